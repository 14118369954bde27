"""JWT authentication provider.

Accepts Supabase access tokens (ES256, verified against the project's JWKS)
and shared-secret tokens (HS256) minted locally for tests and scripts.
Only ``sub`` and ``email`` are required claims; the display name is read
from ``user_metadata`` the way Supabase stores it.
"""

from datetime import datetime, timedelta
from typing import Any
from uuid import UUID

import httpx
import structlog
from jose import jwt
from jose.backends import ECKey
from jose.exceptions import JOSEError

from core.config import settings
from infrastructure.auth.provider import TokenUser

logger = structlog.get_logger()


class JWKSCache:
    """Lazily fetched ``kid -> JWK`` mapping, refreshed once on an unknown kid."""

    def __init__(self, url: str, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._url = url
        self._transport = transport
        self._keys: dict[str, dict[str, Any]] | None = None

    async def get(self, kid: str) -> dict[str, Any] | None:
        keys = await self._load()
        if kid not in keys:
            # Signing keys may have been rotated since the last fetch
            self._keys = None
            keys = await self._load()
        return keys.get(kid)

    async def _load(self) -> dict[str, dict[str, Any]]:
        if self._keys is not None:
            return self._keys
        if not self._url:
            return {}

        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.get(self._url, timeout=10.0)
                response.raise_for_status()
                payload = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("jwks_fetch_failed", url=self._url, error=str(exc))
            return {}

        self._keys = {
            key["kid"]: key for key in payload.get("keys", []) if key.get("kid")
        }
        logger.info("jwks_fetched", key_count=len(self._keys))
        return self._keys


_jwks_cache = JWKSCache(settings.supabase_jwks_url)


def _user_from_claims(claims: dict[str, Any]) -> TokenUser | None:
    user_id = claims.get("sub")
    email = claims.get("email")
    if not user_id or not email:
        return None

    metadata = claims.get("user_metadata") or {}
    display_name = (
        metadata.get("display_name")
        or metadata.get("full_name")
        or metadata.get("name")
        or claims.get("name")
    )

    try:
        return TokenUser(
            id=UUID(user_id),
            email=email,
            display_name=display_name,
            role=claims.get("role"),
        )
    except ValueError:
        return None


class JWTAuthProvider:
    """JWT-based authentication provider."""

    def __init__(
        self,
        secret_key: str = settings.jwt_secret_key,
        algorithm: str = settings.jwt_algorithm,
        expire_minutes: int = settings.jwt_expire_minutes,
        jwks: JWKSCache = _jwks_cache,
    ) -> None:
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._expire_minutes = expire_minutes
        self._jwks = jwks

    async def validate_token(self, token: str) -> TokenUser | None:
        """Validate a bearer token and extract the journal owner.

        The signing algorithm is taken from the token header: ES256 goes
        through JWKS, anything else through the shared secret.
        """
        try:
            header = jwt.get_unverified_header(token)
            if header.get("alg") == "ES256":
                claims = await self._decode_es256(token, header.get("kid"))
            else:
                claims = jwt.decode(
                    token,
                    self._secret_key,
                    algorithms=[self._algorithm],
                    options={"verify_aud": False},
                )
        except JOSEError:
            return None

        if claims is None:
            return None
        return _user_from_claims(claims)

    async def _decode_es256(self, token: str, kid: str | None) -> dict[str, Any] | None:
        if not kid:
            return None

        key_data = await self._jwks.get(kid)
        if key_data is None:
            logger.warning("jwks_key_not_found", kid=kid)
            return None

        return jwt.decode(
            token,
            ECKey(key_data, algorithm="ES256"),
            algorithms=["ES256"],
            options={"verify_aud": False},
        )

    def create_token(self, user: TokenUser) -> str:
        """Issue an HS256 token shaped like a Supabase access token."""
        claims: dict[str, Any] = {
            "sub": str(user.id),
            "email": user.email,
            "aud": "authenticated",
            "role": user.role or "authenticated",
            "exp": datetime.utcnow() + timedelta(minutes=self._expire_minutes),
            "user_metadata": {"display_name": user.display_name},
        }
        return jwt.encode(claims, self._secret_key, algorithm=self._algorithm)
