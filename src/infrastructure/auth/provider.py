"""Authentication provider protocol."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID


@dataclass(frozen=True)
class TokenUser:
    """The journal owner a bearer token was issued to."""

    id: UUID
    email: str
    display_name: str | None = None
    role: str | None = None


class IAuthProvider(Protocol):
    """Protocol for authentication providers."""

    async def validate_token(self, token: str) -> TokenUser | None:
        """Return the token's user, or None when the token is invalid or expired."""
        ...

    def create_token(self, user: TokenUser) -> str:
        """Issue a token for ``user``."""
        ...
