"""Services for food requests."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from foodshare.domain.listings import FoodRequest, RequestDraft
from foodshare.domain.results import Result


class RequestRepository(Protocol):
    """Persistence interface for food requests."""

    def list_by_requester(self, requester_id: UUID) -> Result[list[FoodRequest]]:
        """Return a requester's requests with their listings, newest first."""

    def create_request(self, draft: RequestDraft) -> Result[list[FoodRequest]]:
        """Insert a request and return the inserted rows."""


@dataclass
class RequestService:
    """Application service for food requests."""

    repository: RequestRepository

    def get_user_requests(self, user_id: UUID) -> Result[list[FoodRequest]]:
        """Return the requests a user has made."""
        return self.repository.list_by_requester(user_id)

    def request_food(self, draft: RequestDraft) -> Result[list[FoodRequest]]:
        """Request a listing."""
        return self.repository.create_request(draft)
