"""Core enums.

- ErrorCode: Machine-readable codes carried by DomainError values
- Environment: Deployment environment driving log rendering
"""

from src.core.enums.environment import Environment
from src.core.enums.error_code import ErrorCode

__all__ = ["Environment", "ErrorCode"]
