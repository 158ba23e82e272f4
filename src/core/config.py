"""
Configuration management using Pydantic Settings.

Type-safe, validated configuration loaded from environment variables.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic

Usage:
    from src.core.config import get_settings

    settings = get_settings()
    timeout = settings.role_store_timeout_seconds

    if settings.is_development:
        # Dev-specific behavior
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.enums import Environment


class Settings(BaseSettings):
    """
    Main application settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. Default values (only for non-sensitive config)

    Returns:
        Settings: Application configuration loaded from environment.
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )

    # Core application settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_json: bool | None = Field(
        default=None,
        description="Render logs as JSON. Defaults to True outside development.",
    )

    # Application metadata
    app_name: str = Field(
        default="Hierarchy Authz",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )
    api_v1_prefix: str = Field(
        default="/api/v1",
        description="API v1 route prefix",
    )

    # Token signing
    secret_key: str = Field(
        description="Secret key for claims token signing (must be kept secure)",
    )
    algorithm: str = Field(
        default="HS256",
        description="JWT signing algorithm",
    )
    access_token_expire_minutes: int = Field(
        default=60,
        description="Claims token expiration time in minutes",
    )

    # Hierarchy resolution
    unknown_role_fallback_level: int = Field(
        default=0,
        description="Hierarchy level assigned to role names absent from the catalog",
    )
    role_catalog_path: Path | None = Field(
        default=None,
        description="Optional JSON file replacing the built-in role catalog",
    )

    # Role/membership store collaborator
    role_store_timeout_seconds: float = Field(
        default=2.0,
        description="Timeout for role store reads during claims issuance (fails closed)",
    )

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("secret_key")
    @classmethod
    def validate_secret_key(cls, v: str) -> str:
        """
        Require at least 256 bits of key material for HMAC signing.

        Args:
            v: Secret key.

        Returns:
            str: Validated secret key.

        Raises:
            ValueError: If the key is shorter than 32 characters.
        """
        if len(v) < 32:
            raise ValueError("secret_key must be at least 32 characters")
        return v

    @field_validator("unknown_role_fallback_level")
    @classmethod
    def validate_fallback_level(cls, v: int) -> int:
        """
        Keep the fallback level on the 0-100 hierarchy scale.

        Args:
            v: Fallback level.

        Returns:
            int: Validated level.

        Raises:
            ValueError: If level is outside 0-100.
        """
        if not 0 <= v <= 100:
            raise ValueError("unknown_role_fallback_level must be between 0 and 100")
        return v

    @field_validator("role_store_timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """
        Reject non-positive timeouts.

        Args:
            v: Timeout in seconds.

        Returns:
            float: Validated timeout.

        Raises:
            ValueError: If timeout is not positive.
        """
        if v <= 0:
            raise ValueError("role_store_timeout_seconds must be positive")
        return v

    @field_validator("api_v1_prefix")
    @classmethod
    def validate_prefix(cls, v: str) -> str:
        """
        Remove trailing slashes from the route prefix.

        Args:
            v: Prefix string.

        Returns:
            str: Prefix without trailing slash.
        """
        return v.rstrip("/")

    @property
    def is_development(self) -> bool:
        """
        Check if running in development environment.

        Returns:
            bool: True if environment is DEVELOPMENT, False otherwise.
        """
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        """
        Check if running in production environment.

        Returns:
            bool: True if environment is PRODUCTION, False otherwise.
        """
        return self.environment == Environment.PRODUCTION

    @property
    def use_json_logs(self) -> bool:
        """
        Resolve log rendering (explicit setting wins over environment default).

        Returns:
            bool: True when logs should be rendered as JSON.
        """
        if self.log_json is not None:
            return self.log_json
        return not self.is_development


@lru_cache()
def get_settings() -> Settings:
    """Get settings singleton (app-scoped).

    Returns:
        Settings: Configuration loaded from environment.
    """
    return Settings()  # type: ignore[call-arg]
