"""Unit tests for authentication and timezone dependencies."""

from uuid import uuid4
from zoneinfo import ZoneInfo

import pytest
from fastapi.security import HTTPAuthorizationCredentials

from api.dependencies.auth import get_current_user
from api.dependencies.timezone import get_client_timezone, resolve_timezone
from core.exceptions import AuthenticationError, ErrorCode
from infrastructure.auth.jwt_provider import JWTAuthProvider
from infrastructure.auth.provider import TokenUser


@pytest.fixture
def auth_provider() -> JWTAuthProvider:
    return JWTAuthProvider(secret_key="test-secret", algorithm="HS256", expire_minutes=30)


@pytest.fixture
def token_user() -> TokenUser:
    return TokenUser(id=uuid4(), email="writer@example.com", display_name="Writer")


# --- get_current_user ---


class TestGetCurrentUser:
    @pytest.mark.asyncio
    async def test_returns_user_with_valid_token(
        self, auth_provider: JWTAuthProvider, token_user: TokenUser
    ):
        token = auth_provider.create_token(token_user)
        credentials = HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)

        result = await get_current_user(credentials, auth_provider)

        assert result.id == token_user.id
        assert result.display_name == "Writer"

    @pytest.mark.asyncio
    async def test_raises_when_no_credentials(self, auth_provider: JWTAuthProvider):
        with pytest.raises(AuthenticationError) as exc_info:
            await get_current_user(None, auth_provider)

        assert exc_info.value.error_code == ErrorCode.UNAUTHORIZED
        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_raises_when_invalid_token(self, auth_provider: JWTAuthProvider):
        credentials = HTTPAuthorizationCredentials(scheme="Bearer", credentials="invalid.jwt.token")

        with pytest.raises(AuthenticationError) as exc_info:
            await get_current_user(credentials, auth_provider)

        assert exc_info.value.error_code == ErrorCode.INVALID_TOKEN

    @pytest.mark.asyncio
    async def test_raises_when_expired_token(self, token_user: TokenUser):
        expired = JWTAuthProvider(secret_key="test-secret", algorithm="HS256", expire_minutes=-1)
        credentials = HTTPAuthorizationCredentials(
            scheme="Bearer", credentials=expired.create_token(token_user)
        )
        validator = JWTAuthProvider(secret_key="test-secret", algorithm="HS256", expire_minutes=30)

        with pytest.raises(AuthenticationError) as exc_info:
            await get_current_user(credentials, validator)

        assert exc_info.value.error_code == ErrorCode.INVALID_TOKEN


# --- client timezone ---


class TestClientTimezone:
    def test_known_zone(self):
        assert resolve_timezone("Europe/Moscow") == ZoneInfo("Europe/Moscow")

    @pytest.mark.parametrize("name", [None, "", "Mars/Olympus_Mons", "../etc/passwd"])
    def test_falls_back_to_default(self, name):
        assert resolve_timezone(name) == ZoneInfo("UTC")

    @pytest.mark.asyncio
    async def test_header_dependency(self):
        assert await get_client_timezone("Asia/Tokyo") == ZoneInfo("Asia/Tokyo")
