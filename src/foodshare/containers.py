"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import Client, create_client
from supabase.client import ClientOptions

from foodshare.adapters.supabase_analytics_repository import (
    SupabaseAnalyticsRepository,
)
from foodshare.adapters.supabase_auth_gateway import SupabaseAuthGateway
from foodshare.adapters.supabase_listing_repository import SupabaseListingRepository
from foodshare.adapters.supabase_profile_repository import SupabaseProfileRepository
from foodshare.adapters.supabase_request_repository import SupabaseRequestRepository
from foodshare.config import Settings
from foodshare.services.analytics import AnalyticsService
from foodshare.services.auth import AuthService
from foodshare.services.listings import ListingService
from foodshare.services.profiles import ProfileService
from foodshare.services.requests import RequestService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    auth_service: AuthService
    listing_service: ListingService
    request_service: RequestService
    profile_service: ProfileService
    analytics_service: AnalyticsService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container.

    Data repositories share one client that never signs in. Session calls get
    their own client, and every sign-up gets a fresh one.
    """
    resolved_settings = settings or Settings()

    def connect(options: ClientOptions | None = None) -> Client:
        return create_client(
            resolved_settings.supabase_url,
            resolved_settings.supabase_anon_key,
            options=options,
        )

    def sign_up_ports() -> tuple[SupabaseAuthGateway, SupabaseProfileRepository]:
        client = connect(
            ClientOptions(auto_refresh_token=False, persist_session=False)
        )
        return SupabaseAuthGateway(client), SupabaseProfileRepository(client)

    data_client = connect()
    return AppContainer(
        settings=resolved_settings,
        auth_service=AuthService(
            auth_gateway=SupabaseAuthGateway(connect()),
            sign_up_ports=sign_up_ports,
        ),
        listing_service=ListingService(SupabaseListingRepository(data_client)),
        request_service=RequestService(SupabaseRequestRepository(data_client)),
        profile_service=ProfileService(SupabaseProfileRepository(data_client)),
        analytics_service=AnalyticsService(SupabaseAnalyticsRepository(data_client)),
    )
