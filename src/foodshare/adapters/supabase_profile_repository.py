"""Supabase implementation for profiles."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client, PostgrestAPIError

from foodshare.adapters.supabase_errors import to_backend_error
from foodshare.domain.profiles import (
    LeaderboardEntry,
    Profile,
    ProfileAttributes,
    ProfileUpdate,
)
from foodshare.domain.results import BackendError, Result
from foodshare.services.profiles import ProfileRepository

_TABLE = "profiles"
_SIGN_UP_TABLE = "user_profiles"
_LEADERBOARD_COLUMNS = "id, username, avatar_url, points, badges"


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase-backed repository for profiles.

    Known limitation: sign-up writes to `user_profiles` while reads, updates and
    the leaderboard use `profiles`. A profile created at sign-up is only visible
    to `get_profile` if the database mirrors one table into the other.
    """

    client: Client

    def create_profile(
        self, user_id: UUID, attributes: ProfileAttributes
    ) -> Result[Profile]:
        """Insert the profile row for a newly created account."""
        try:
            response = (
                self.client.table(_SIGN_UP_TABLE)
                .insert({"id": str(user_id), **attributes.to_payload()})
                .execute()
            )
        except PostgrestAPIError as exc:
            return Result(error=to_backend_error(exc))
        if not response.data:
            return Result(
                error=BackendError(
                    message="Profile insert returned no rows",
                    details=f"table={_SIGN_UP_TABLE} id={user_id}",
                )
            )
        return Result(data=_parse_profile(response.data[0]))

    def get_profile(self, user_id: UUID) -> Result[Profile]:
        """Return the profile for a user; a missing row is an error."""
        try:
            response = (
                self.client.table(_TABLE)
                .select("*")
                .eq("id", str(user_id))
                .single()
                .execute()
            )
        except PostgrestAPIError as exc:
            return Result(error=to_backend_error(exc))
        return Result(data=_parse_profile(response.data))

    def update_profile(
        self, user_id: UUID, update: ProfileUpdate
    ) -> Result[list[Profile]]:
        """Update profile columns and return the updated rows."""
        try:
            response = (
                self.client.table(_TABLE)
                .update(update.to_payload())
                .eq("id", str(user_id))
                .execute()
            )
        except PostgrestAPIError as exc:
            return Result(error=to_backend_error(exc))
        return Result(data=[_parse_profile(row) for row in response.data or []])

    def list_leaderboard(self, limit: int) -> Result[list[LeaderboardEntry]]:
        """Return the profiles with the most points."""
        try:
            response = (
                self.client.table(_TABLE)
                .select(_LEADERBOARD_COLUMNS)
                .order("points", desc=True)
                .limit(limit)
                .execute()
            )
        except PostgrestAPIError as exc:
            return Result(error=to_backend_error(exc))
        return Result(
            data=[
                LeaderboardEntry(
                    id=UUID(str(row["id"])),
                    username=row.get("username"),
                    avatar_url=row.get("avatar_url"),
                    points=int(row.get("points") or 0),
                    badges=list(row.get("badges") or []),
                )
                for row in response.data or []
            ]
        )


def _parse_profile(row: dict[str, object]) -> Profile:
    """Parse a profile row into a domain model."""
    return Profile(
        id=UUID(str(row["id"])),
        full_name=row.get("full_name"),
        username=row.get("username"),
        account_type=row.get("account_type"),
        organization=row.get("organization"),
        address=row.get("address"),
        phone=row.get("phone"),
        points=int(row.get("points") or 0),
        badges=list(row.get("badges") or []),
        avatar_url=row.get("avatar_url"),
    )
