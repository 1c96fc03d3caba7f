"""Domain models for food listings and requests."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class FoodListing:
    """A donor-authored listing.

    Only the columns this layer relies on are typed; the remaining columns
    are carried in ``attributes``.
    """

    id: str
    donor_id: UUID
    created_at: datetime | None
    attributes: dict[str, object] = field(default_factory=dict)


@dataclass(frozen=True)
class ListingDraft:
    """Columns for a new listing."""

    donor_id: UUID
    attributes: dict[str, object] = field(default_factory=dict)


@dataclass(frozen=True)
class FoodRequest:
    """A requester-authored request, joined with its parent listing."""

    id: str
    requester_id: UUID
    listing_id: str | None
    created_at: datetime | None
    attributes: dict[str, object] = field(default_factory=dict)
    listing: FoodListing | None = None


@dataclass(frozen=True)
class RequestDraft:
    """Columns for a new food request."""

    requester_id: UUID
    listing_id: str
    attributes: dict[str, object] = field(default_factory=dict)
