"""Supabase repository for analytics."""

from dataclasses import dataclass

from supabase import Client, PostgrestAPIError

from foodshare.adapters.supabase_errors import to_backend_error
from foodshare.domain.analytics import AnalyticsSnapshot
from foodshare.domain.results import Result
from foodshare.services.analytics import AnalyticsRepository


@dataclass
class SupabaseAnalyticsRepository(AnalyticsRepository):
    """Supabase implementation for the analytics row."""

    client: Client

    def get_snapshot(self) -> Result[AnalyticsSnapshot]:
        """Return the analytics row; zero or several rows is an error."""
        try:
            response = self.client.table("analytics").select("*").single().execute()
        except PostgrestAPIError as exc:
            return Result(error=to_backend_error(exc))
        return Result(data=AnalyticsSnapshot(metrics=dict(response.data or {})))
