"""Supabase Auth gateway."""

from dataclasses import dataclass
from uuid import UUID

from supabase import AuthError, Client

from foodshare.adapters.supabase_errors import to_backend_error
from foodshare.domain.accounts import Account, AccountResult, AuthSession
from foodshare.domain.results import Result
from foodshare.services.auth import AuthGateway


@dataclass
class SupabaseAuthGateway(AuthGateway):
    """Supabase implementation for authentication calls."""

    client: Client

    def sign_up(self, email: str, password: str) -> Result[AccountResult]:
        """Create an account with email and password."""
        try:
            response = self.client.auth.sign_up({"email": email, "password": password})
        except AuthError as exc:
            return Result(error=to_backend_error(exc))
        return Result(data=_parse_auth_response(response))

    def sign_in(self, email: str, password: str) -> Result[AccountResult]:
        """Sign in with email and password."""
        try:
            response = self.client.auth.sign_in_with_password(
                {"email": email, "password": password}
            )
        except AuthError as exc:
            return Result(error=to_backend_error(exc))
        return Result(data=_parse_auth_response(response))

    def sign_out(self) -> Result[None]:
        """Sign out and clear the client's session."""
        try:
            self.client.auth.sign_out()
        except AuthError as exc:
            return Result(error=to_backend_error(exc))
        return Result()

    def get_user(self) -> Result[Account]:
        """Return the user for the client's current session."""
        try:
            response = self.client.auth.get_user()
        except AuthError as exc:
            return Result(error=to_backend_error(exc))
        if response is None or response.user is None:
            return Result()
        return Result(data=_parse_user(response.user))


def _parse_auth_response(response: object) -> AccountResult:
    user = getattr(response, "user", None)
    session = getattr(response, "session", None)
    return AccountResult(
        user=_parse_user(user) if user is not None else None,
        session=(
            AuthSession(
                access_token=session.access_token,
                refresh_token=session.refresh_token,
                expires_at=session.expires_at,
            )
            if session is not None
            else None
        ),
    )


def _parse_user(user: object) -> Account:
    return Account(id=UUID(str(user.id)), email=getattr(user, "email", None))
