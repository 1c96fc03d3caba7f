"""Outcomes of the two-step account and profile provisioning."""

from dataclasses import dataclass
from typing import ClassVar

from foodshare.domain.accounts import Account, AccountResult, AuthSession
from foodshare.domain.profiles import Profile
from foodshare.domain.results import BackendError


@dataclass(frozen=True)
class ProvisionedAccount:
    """Account fields with the profile created for them."""

    user: Account | None
    session: AuthSession | None
    profile: Profile


@dataclass(frozen=True)
class SignUpSucceeded:
    """Both the account and its profile were created."""

    status: ClassVar[str] = "succeeded"

    account: AccountResult
    profile: Profile

    @property
    def data(self) -> ProvisionedAccount:
        return ProvisionedAccount(
            user=self.account.user,
            session=self.account.session,
            profile=self.profile,
        )

    @property
    def error(self) -> None:
        return None


@dataclass(frozen=True)
class SignUpPendingConfirmation:
    """The account was created without a user identity, so no profile exists yet."""

    status: ClassVar[str] = "pending_confirmation"

    account: AccountResult

    @property
    def data(self) -> AccountResult:
        return self.account

    @property
    def error(self) -> None:
        return None


@dataclass(frozen=True)
class SignUpAccountFailed:
    """Account creation failed; no profile call was made."""

    status: ClassVar[str] = "account_failed"

    error: BackendError

    @property
    def data(self) -> None:
        return None


@dataclass(frozen=True)
class SignUpProfileFailed:
    """The account exists but its profile could not be created.

    Nothing is rolled back. Callers can retry profile creation later with
    ``account.user.id``.
    """

    status: ClassVar[str] = "profile_failed"

    account: AccountResult
    error: BackendError

    @property
    def data(self) -> AccountResult:
        return self.account


SignUpOutcome = (
    SignUpSucceeded
    | SignUpPendingConfirmation
    | SignUpAccountFailed
    | SignUpProfileFailed
)
