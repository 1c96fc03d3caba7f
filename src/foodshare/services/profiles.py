"""Profile reads, updates and the points leaderboard."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from foodshare.domain.profiles import (
    LeaderboardEntry,
    Profile,
    ProfileAttributes,
    ProfileUpdate,
)
from foodshare.domain.results import Result

LEADERBOARD_SIZE = 10


class ProfileRepository(Protocol):
    """Persistence interface for profiles."""

    def create_profile(
        self, user_id: UUID, attributes: ProfileAttributes
    ) -> Result[Profile]:
        """Create the profile for an account."""

    def get_profile(self, user_id: UUID) -> Result[Profile]:
        """Return exactly one profile by id."""

    def update_profile(
        self, user_id: UUID, update: ProfileUpdate
    ) -> Result[list[Profile]]:
        """Apply a partial update and return the updated rows."""

    def list_leaderboard(self, limit: int) -> Result[list[LeaderboardEntry]]:
        """Return the top profiles by points."""


@dataclass
class ProfileService:
    """Application service for profiles."""

    repository: ProfileRepository

    def get_user_profile(self, user_id: UUID) -> Result[Profile]:
        """Return a user's profile."""
        return self.repository.get_profile(user_id)

    def update_user_profile(
        self, user_id: UUID, update: ProfileUpdate
    ) -> Result[list[Profile]]:
        """Update a user's profile."""
        return self.repository.update_profile(user_id, update)

    def get_leaderboard(self) -> Result[list[LeaderboardEntry]]:
        """Return the top ten profiles by points."""
        return self.repository.list_leaderboard(LEADERBOARD_SIZE)
