"""Supabase implementation for food listings."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client, PostgrestAPIError

from foodshare.adapters.supabase_errors import to_backend_error
from foodshare.domain.listings import FoodListing, ListingDraft
from foodshare.domain.results import Result
from foodshare.services.listings import ListingRepository, Predicate

_TABLE = "food_listings"
_TYPED_COLUMNS = {"id", "donor_id", "created_at"}


@dataclass
class SupabaseListingRepository(ListingRepository):
    """Supabase-backed repository for food listings."""

    client: Client

    def list_listings(self, predicates: list[Predicate]) -> Result[list[FoodListing]]:
        """Return listings matching the predicates, newest first."""
        query = self.client.table(_TABLE).select("*")
        for column, value in predicates:
            query = query.eq(column, value)
        try:
            response = query.order("created_at", desc=True).execute()
        except PostgrestAPIError as exc:
            return Result(error=to_backend_error(exc))
        return Result(data=[parse_listing(row) for row in response.data or []])

    def create_listing(self, draft: ListingDraft) -> Result[list[FoodListing]]:
        """Insert a listing and return it."""
        try:
            response = (
                self.client.table(_TABLE)
                .insert({**draft.attributes, "donor_id": str(draft.donor_id)})
                .execute()
            )
        except PostgrestAPIError as exc:
            return Result(error=to_backend_error(exc))
        return Result(data=[parse_listing(row) for row in response.data or []])


def parse_listing(row: dict[str, object]) -> FoodListing:
    """Parse a food_listings row into a domain model."""
    return FoodListing(
        id=str(row["id"]),
        donor_id=UUID(str(row["donor_id"])),
        created_at=parse_timestamp(row.get("created_at")),
        attributes={
            key: value for key, value in row.items() if key not in _TYPED_COLUMNS
        },
    )


def parse_timestamp(raw: object) -> datetime | None:
    """Parse an ISO timestamp column, tolerating nulls."""
    if isinstance(raw, str) and raw:
        return datetime.fromisoformat(raw)
    return None
