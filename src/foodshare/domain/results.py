"""Uniform result types returned by every data-access operation."""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class BackendError:
    """An error reported by Supabase, passed through without reclassification."""

    message: str
    code: str | None = None
    status: int | None = None
    details: str | None = None
    hint: str | None = None


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a backend call.

    On success ``data`` holds the payload (which may legitimately be ``None``,
    e.g. when no session exists) and ``error`` is ``None``. On failure
    ``error`` is set and ``data`` is ``None``.
    """

    data: T | None = None
    error: BackendError | None = None

    @property
    def ok(self) -> bool:
        """Return True when the call did not fail."""
        return self.error is None
