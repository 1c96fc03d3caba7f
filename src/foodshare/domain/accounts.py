"""Domain models for authentication."""

from dataclasses import dataclass
from uuid import UUID

from foodshare.domain.results import BackendError


@dataclass(frozen=True)
class Account:
    """An identity owned by Supabase Auth."""

    id: UUID
    email: str | None


@dataclass(frozen=True)
class AuthSession:
    """Tokens for an authenticated session."""

    access_token: str
    refresh_token: str
    expires_at: int | None


@dataclass(frozen=True)
class AccountResult:
    """User and session returned by sign-up or sign-in.

    ``user`` is ``None`` when the project requires email confirmation before
    the account becomes usable.
    """

    user: Account | None
    session: AuthSession | None


@dataclass(frozen=True)
class CurrentUser:
    """Current-user lookup result, keyed as ``user`` rather than ``data``."""

    user: Account | None
    error: BackendError | None = None
