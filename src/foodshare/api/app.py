"""FastAPI application factory."""

import logging
from uuid import UUID

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder

from foodshare.api.schemas import (
    FoodRequestBody,
    ListingBody,
    ProfileUpdateBody,
    SignUpBody,
)
from foodshare.app_logging import configure_logging
from foodshare.containers import AppContainer
from foodshare.domain.results import BackendError, Result


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies.

    Data endpoints always answer 200 with a ``{"data", "error"}`` envelope;
    callers must check ``error``. Sign-in, sign-out and current-user lookups
    are not routed because the Supabase client keeps one session per process.
    """
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/auth/sign-up")
    async def sign_up(body: SignUpBody, request: Request) -> dict[str, object]:
        """Create an account and its profile."""
        state_container: AppContainer = request.app.state.container
        outcome = state_container.auth_service.sign_up(
            body.email, body.password, body.to_attributes()
        )
        if outcome.error is not None:
            logger.info(
                "Sign-up did not complete",
                extra={"status": outcome.status, "error_code": outcome.error.code},
            )
        return {
            "status": outcome.status,
            **_envelope(outcome.data, outcome.error),
        }

    @app.get("/listings")
    async def list_listings(request: Request) -> dict[str, object]:
        """Return listings; every query parameter is an equality filter."""
        state_container: AppContainer = request.app.state.container
        result = state_container.listing_service.get_food_listings(
            dict(request.query_params)
        )
        return _result_envelope(result)

    @app.post("/listings")
    async def add_listing(body: ListingBody, request: Request) -> dict[str, object]:
        """Create a listing."""
        state_container: AppContainer = request.app.state.container
        result = state_container.listing_service.add_food_listing(body.to_draft())
        return _result_envelope(result)

    @app.get("/users/{user_id}/donations")
    async def user_donations(user_id: UUID, request: Request) -> dict[str, object]:
        """Return listings donated by a user."""
        state_container: AppContainer = request.app.state.container
        return _result_envelope(
            state_container.listing_service.get_user_donations(user_id)
        )

    @app.get("/users/{user_id}/requests")
    async def user_requests(user_id: UUID, request: Request) -> dict[str, object]:
        """Return requests made by a user."""
        state_container: AppContainer = request.app.state.container
        return _result_envelope(
            state_container.request_service.get_user_requests(user_id)
        )

    @app.post("/requests")
    async def request_food(
        body: FoodRequestBody, request: Request
    ) -> dict[str, object]:
        """Request a listing."""
        state_container: AppContainer = request.app.state.container
        result = state_container.request_service.request_food(body.to_draft())
        return _result_envelope(result)

    @app.get("/profiles/{user_id}")
    async def get_profile(user_id: UUID, request: Request) -> dict[str, object]:
        """Return a user's profile."""
        state_container: AppContainer = request.app.state.container
        return _result_envelope(
            state_container.profile_service.get_user_profile(user_id)
        )

    @app.patch("/profiles/{user_id}")
    async def update_profile(
        user_id: UUID, body: ProfileUpdateBody, request: Request
    ) -> dict[str, object]:
        """Apply a partial profile update."""
        state_container: AppContainer = request.app.state.container
        result = state_container.profile_service.update_user_profile(
            user_id, body.to_update()
        )
        return _result_envelope(result)

    @app.get("/leaderboard")
    async def leaderboard(request: Request) -> dict[str, object]:
        """Return the top profiles by points."""
        state_container: AppContainer = request.app.state.container
        return _result_envelope(state_container.profile_service.get_leaderboard())

    @app.get("/analytics")
    async def analytics(request: Request) -> dict[str, object]:
        """Return the analytics snapshot."""
        state_container: AppContainer = request.app.state.container
        return _result_envelope(state_container.analytics_service.get_analytics())

    return app


def _result_envelope(result: Result) -> dict[str, object]:
    return _envelope(result.data, result.error)


def _envelope(data: object, error: BackendError | None) -> dict[str, object]:
    return jsonable_encoder({"data": data, "error": error})
