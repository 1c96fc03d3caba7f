"""Conversion of Supabase client exceptions into backend errors."""

from supabase import AuthError, PostgrestAPIError

from foodshare.domain.results import BackendError


def to_backend_error(exc: AuthError | PostgrestAPIError) -> BackendError:
    """Return the error Supabase reported, as a plain value."""
    code = getattr(exc, "code", None)
    status = getattr(exc, "status", None)
    details = getattr(exc, "details", None)
    hint = getattr(exc, "hint", None)
    return BackendError(
        message=getattr(exc, "message", None) or str(exc),
        code=str(code) if code is not None else None,
        status=status if isinstance(status, int) else None,
        details=str(details) if details is not None else None,
        hint=str(hint) if hint is not None else None,
    )
