"""UI-facing enforcement helpers (non-authoritative)."""

from src.presentation.ui.render_guard import UIRenderGuard

__all__ = ["UIRenderGuard"]
