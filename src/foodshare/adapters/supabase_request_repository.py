"""Supabase implementation for food requests."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client, PostgrestAPIError

from foodshare.adapters.supabase_errors import to_backend_error
from foodshare.adapters.supabase_listing_repository import (
    parse_listing,
    parse_timestamp,
)
from foodshare.domain.listings import FoodRequest, RequestDraft
from foodshare.domain.results import Result
from foodshare.services.requests import RequestRepository

_TABLE = "food_requests"
_LISTING_EMBED = "food_listings"
_TYPED_COLUMNS = {"id", "requester_id", "listing_id", "created_at", _LISTING_EMBED}


@dataclass
class SupabaseRequestRepository(RequestRepository):
    """Supabase-backed repository for food requests."""

    client: Client

    def list_by_requester(self, requester_id: UUID) -> Result[list[FoodRequest]]:
        """Return a requester's requests joined with their listings."""
        try:
            response = (
                self.client.table(_TABLE)
                .select(f"*, {_LISTING_EMBED}(*)")
                .eq("requester_id", str(requester_id))
                .order("created_at", desc=True)
                .execute()
            )
        except PostgrestAPIError as exc:
            return Result(error=to_backend_error(exc))
        return Result(data=[_parse_request(row) for row in response.data or []])

    def create_request(self, draft: RequestDraft) -> Result[list[FoodRequest]]:
        """Insert a request and return it."""
        try:
            response = (
                self.client.table(_TABLE)
                .insert(
                    {
                        **draft.attributes,
                        "requester_id": str(draft.requester_id),
                        "listing_id": draft.listing_id,
                    }
                )
                .execute()
            )
        except PostgrestAPIError as exc:
            return Result(error=to_backend_error(exc))
        return Result(data=[_parse_request(row) for row in response.data or []])


def _parse_request(row: dict[str, object]) -> FoodRequest:
    listing_raw = row.get(_LISTING_EMBED)
    listing_id = row.get("listing_id")
    return FoodRequest(
        id=str(row["id"]),
        requester_id=UUID(str(row["requester_id"])),
        listing_id=str(listing_id) if listing_id is not None else None,
        created_at=parse_timestamp(row.get("created_at")),
        attributes={
            key: value for key, value in row.items() if key not in _TYPED_COLUMNS
        },
        listing=parse_listing(listing_raw) if isinstance(listing_raw, dict) else None,
    )
