"""
Authentication configuration settings.

Bearer tokens are issued by the external auth provider. The API verifies the
signature either with the provider's shared HMAC secret or with its public
keys published at a JWKS endpoint.

Dependencies: pydantic_settings
System role: Token verification configuration
"""

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class AuthSettings(BaseSettings):
    """Token verification settings."""

    model_config = SettingsConfigDict(
        env_prefix="AUTH_",
        case_sensitive=False,
        extra="ignore",
    )

    jwt_secret: SecretStr | None = Field(
        default=None,
        description="Shared HMAC secret of the auth provider",
    )
    jwks_url: str | None = Field(
        default=None,
        description="JWKS endpoint for asymmetric signing keys (takes precedence)",
    )
    algorithms: list[str] = Field(
        default=["HS256"],
        description="Accepted signing algorithms",
    )
    audience: str | None = Field(
        default="authenticated",
        description="Expected 'aud' claim; None disables the audience check",
    )
