"""Services for food listings."""

import math
from collections.abc import Mapping
from dataclasses import dataclass
from numbers import Number
from typing import Protocol
from uuid import UUID

from foodshare.domain.listings import FoodListing, ListingDraft
from foodshare.domain.results import Result

Predicate = tuple[str, object]


class ListingRepository(Protocol):
    """Persistence interface for food listings."""

    def list_listings(self, predicates: list[Predicate]) -> Result[list[FoodListing]]:
        """Return listings matching every equality predicate, newest first."""

    def create_listing(self, draft: ListingDraft) -> Result[list[FoodListing]]:
        """Insert a listing and return the inserted rows."""


@dataclass
class ListingService:
    """Application service for listing queries and donations."""

    repository: ListingRepository

    def get_food_listings(
        self, filters: Mapping[str, object] | None = None
    ) -> Result[list[FoodListing]]:
        """Return listings filtered by equality on every set filter value."""
        return self.repository.list_listings(listing_predicates(filters or {}))

    def get_user_donations(self, user_id: UUID) -> Result[list[FoodListing]]:
        """Return listings created by a donor."""
        return self.repository.list_listings([("donor_id", str(user_id))])

    def add_food_listing(self, draft: ListingDraft) -> Result[list[FoodListing]]:
        """Create a listing."""
        return self.repository.create_listing(draft)


def listing_predicates(filters: Mapping[str, object]) -> list[Predicate]:
    """Build equality predicates for the filter values that are set.

    Empty strings, zero, NaN, False and None count as "no filter", so a
    query for a literally false, zero or empty column value cannot be
    expressed. Empty containers do count as set. Field names are not checked.
    """
    return [(name, value) for name, value in filters.items() if _is_set(value)]


def _is_set(value: object) -> bool:
    if value is None or value is False:
        return False
    if isinstance(value, str):
        return value != ""
    if isinstance(value, float) and math.isnan(value):
        return False
    if isinstance(value, Number):
        return value != 0
    return True
