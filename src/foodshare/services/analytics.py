"""Analytics service."""

from dataclasses import dataclass
from typing import Protocol

from foodshare.domain.analytics import AnalyticsSnapshot
from foodshare.domain.results import Result


class AnalyticsRepository(Protocol):
    """Persistence interface for the analytics row."""

    def get_snapshot(self) -> Result[AnalyticsSnapshot]:
        """Return the single analytics row."""


@dataclass
class AnalyticsService:
    """Service for platform-wide analytics."""

    repository: AnalyticsRepository

    def get_analytics(self) -> Result[AnalyticsSnapshot]:
        """Return the analytics snapshot."""
        return self.repository.get_snapshot()
