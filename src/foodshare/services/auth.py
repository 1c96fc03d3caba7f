"""Authentication and account provisioning."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

from foodshare.domain.accounts import Account, AccountResult, CurrentUser
from foodshare.domain.profiles import ProfileAttributes
from foodshare.domain.results import Result
from foodshare.domain.signup import (
    SignUpAccountFailed,
    SignUpOutcome,
    SignUpPendingConfirmation,
    SignUpProfileFailed,
    SignUpSucceeded,
)
from foodshare.services.profiles import ProfileRepository

logger = logging.getLogger(__name__)


class AuthGateway(Protocol):
    """Interface to the hosted authentication service."""

    def sign_up(self, email: str, password: str) -> Result[AccountResult]:
        """Create an account."""

    def sign_in(self, email: str, password: str) -> Result[AccountResult]:
        """Authenticate with email and password."""

    def sign_out(self) -> Result[None]:
        """Invalidate the current session."""

    def get_user(self) -> Result[Account]:
        """Return the identity bound to the current session."""


SignUpPorts = Callable[[], tuple[AuthGateway, ProfileRepository]]


@dataclass
class AuthService:
    """Application service for sign-up, sign-in and session lookups.

    ``sign_up_ports`` is called once per sign-up. The gateway and profile
    repository it returns must share one client that nothing else uses, so the
    session saved by the account call authorizes the profile insert and stays
    out of the clients serving other callers.
    """

    auth_gateway: AuthGateway
    sign_up_ports: SignUpPorts

    def sign_up(
        self, email: str, password: str, attributes: ProfileAttributes
    ) -> SignUpOutcome:
        """Create an account, then its profile.

        The two calls are not atomic. A profile failure leaves the account in
        place and is reported as ``SignUpProfileFailed``.
        """
        auth_gateway, profile_repository = self.sign_up_ports()
        account = auth_gateway.sign_up(email, password)
        if account.error is not None:
            return SignUpAccountFailed(error=account.error)

        account_result = account.data or AccountResult(user=None, session=None)
        if account_result.user is None:
            return SignUpPendingConfirmation(account=account_result)

        profile = profile_repository.create_profile(
            account_result.user.id, attributes
        )
        if profile.error is not None:
            logger.error(
                "Failed to create user profile: %s",
                profile.error.message,
                extra={
                    "user_id": str(account_result.user.id),
                    "error_code": profile.error.code,
                },
            )
            return SignUpProfileFailed(account=account_result, error=profile.error)

        return SignUpSucceeded(account=account_result, profile=profile.data)

    def sign_in(self, email: str, password: str) -> Result[AccountResult]:
        """Sign in with email and password."""
        return self.auth_gateway.sign_in(email, password)

    def sign_out(self) -> Result[None]:
        """Sign out of the current session."""
        return self.auth_gateway.sign_out()

    def get_current_user(self) -> CurrentUser:
        """Return the signed-in user, if any."""
        result = self.auth_gateway.get_user()
        return CurrentUser(user=result.data, error=result.error)
