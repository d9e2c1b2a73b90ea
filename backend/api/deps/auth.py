"""
Bearer token verification.

Tokens are issued by the external auth provider; the API only verifies the
signature, expiry, and audience, then uses the `sub` claim as the owner
identifier for every document and query.

Dependencies: jwt (PyJWT), fastapi
System role: Request authentication
"""

import logging

import jwt
from fastapi import Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from backend.configs.auth import AuthSettings
from backend.core.exceptions import AuthError

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


class TokenVerifier:
    """Verify provider-issued JWTs and extract the owner identifier."""

    def __init__(self, settings: AuthSettings, jwks_client: jwt.PyJWKClient | None = None) -> None:
        """
        Initialize verifier.

        Args:
            settings: Auth settings (HMAC secret and/or JWKS URL)
            jwks_client: Pre-built JWKS client (created from jwks_url when omitted)
        """
        self._settings = settings
        self._jwks_client = jwks_client
        if self._jwks_client is None and settings.jwks_url:
            self._jwks_client = jwt.PyJWKClient(settings.jwks_url)

    def _signing_key(self, token: str):
        if self._jwks_client is not None:
            return self._jwks_client.get_signing_key_from_jwt(token).key
        if self._settings.jwt_secret is not None:
            return self._settings.jwt_secret.get_secret_value()
        raise AuthError("Token verification is not configured")

    def verify(self, token: str) -> str:
        """
        Verify a bearer token.

        Args:
            token: Encoded JWT

        Returns:
            str: Owner identifier from the `sub` claim

        Raises:
            AuthError: When the token is invalid, expired, or has no subject
        """
        options = {"require": ["exp", "sub"]}
        if self._settings.audience is None:
            options["verify_aud"] = False

        try:
            claims = jwt.decode(
                token,
                self._signing_key(token),
                algorithms=self._settings.algorithms,
                audience=self._settings.audience,
                options=options,
            )
        except jwt.PyJWTError as e:
            logger.warning("Token rejected", extra={"error": str(e)})
            raise AuthError("Invalid or expired token") from e

        owner_id = claims.get("sub")
        if not isinstance(owner_id, str) or not owner_id:
            raise AuthError("Invalid or expired token")
        return owner_id


async def get_current_owner(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> str:
    """
    Resolve the caller's owner identifier from the Authorization header.

    Raises:
        AuthError: Missing, malformed, or unverifiable token
    """
    if credentials is None:
        if request.headers.get("Authorization"):
            raise AuthError("Malformed authorization header")
        raise AuthError("No authorization header found")

    verifier: TokenVerifier = request.app.state.services.token_verifier
    return await run_in_threadpool(verifier.verify, credentials.credentials)
