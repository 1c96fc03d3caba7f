"""Domain models for user profiles."""

from dataclasses import dataclass, field, fields
from uuid import UUID


@dataclass(frozen=True)
class Profile:
    """A profile row, keyed by the owning account id."""

    id: UUID
    full_name: str | None
    username: str | None
    account_type: str | None
    organization: str | None
    address: str | None
    phone: str | None
    points: int = 0
    badges: list[str] = field(default_factory=list)
    avatar_url: str | None = None


@dataclass(frozen=True)
class ProfileAttributes:
    """Caller-supplied attributes stored when an account is provisioned."""

    full_name: str | None = None
    username: str | None = None
    account_type: str | None = None
    organization: str | None = None
    address: str | None = None
    phone: str | None = None

    def to_payload(self) -> dict[str, object]:
        """Return the attributes that were provided, omitting unset ones."""
        return _set_fields(self)


@dataclass(frozen=True)
class ProfileUpdate:
    """Partial profile update. Fields left as ``None`` are not changed."""

    full_name: str | None = None
    username: str | None = None
    account_type: str | None = None
    organization: str | None = None
    address: str | None = None
    phone: str | None = None
    avatar_url: str | None = None
    points: int | None = None
    badges: list[str] | None = None

    def to_payload(self) -> dict[str, object]:
        """Return only the columns this update sets."""
        return _set_fields(self)


@dataclass(frozen=True)
class LeaderboardEntry:
    """Public projection of a profile used for rankings."""

    id: UUID
    username: str | None
    avatar_url: str | None
    points: int
    badges: list[str]


def _set_fields(record: object) -> dict[str, object]:
    return {
        item.name: getattr(record, item.name)
        for item in fields(record)
        if getattr(record, item.name) is not None
    }
