"""Domain models for analytics."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class AnalyticsSnapshot:
    """The single analytics row, column name to value."""

    metrics: dict[str, object] = field(default_factory=dict)
