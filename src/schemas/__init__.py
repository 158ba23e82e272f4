"""Request/response schemas for API endpoints.

All Pydantic models for HTTP request validation, response serialization
and the claims token payload. Schemas are kept separate from domain
entities (wire-format concerns only).

Usage:
    from src.schemas import ClaimsResponse, ClaimsTokenPayload
"""

from src.schemas.claims_schemas import (
    ClaimsResponse,
    ClaimsRotationCreateRequest,
    ClaimsRotationResponse,
    ClaimsTokenPayload,
    ClaimsVersionResponse,
    RefreshRequestCreateRequest,
    RevocationCreateRequest,
)

__all__ = [
    "ClaimsResponse",
    "ClaimsRotationCreateRequest",
    "ClaimsRotationResponse",
    "ClaimsTokenPayload",
    "ClaimsVersionResponse",
    "RefreshRequestCreateRequest",
    "RevocationCreateRequest",
]
