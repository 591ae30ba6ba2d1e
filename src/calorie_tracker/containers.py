"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from calorie_tracker.adapters.file_state_store import FileStateStore
from calorie_tracker.adapters.nutritionix_client import HttpxNutritionixClient
from calorie_tracker.adapters.supabase_state_store import SupabaseStateStore
from calorie_tracker.config import Settings
from calorie_tracker.services.clock import Clock, ZoneClock
from calorie_tracker.services.diary import DiaryService
from calorie_tracker.services.lookup import LookupService
from calorie_tracker.services.profile import ProfileService
from calorie_tracker.services.rollover import MidnightRolloverScheduler
from calorie_tracker.services.state import StateStore


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    clock: Clock
    state_store: StateStore
    lookup_service: LookupService
    profile_service: ProfileService
    diary_service: DiaryService
    rollover_scheduler: MidnightRolloverScheduler
    close_resources: Callable[[], Awaitable[None]]


def build_state_store(settings: Settings) -> StateStore:
    """Create the state store selected by settings."""
    if settings.state_backend == "file":
        return FileStateStore.create(settings.state_dir)
    if settings.state_backend == "supabase":
        if not settings.supabase_url or not settings.supabase_service_key:
            raise ValueError(
                "SUPABASE_URL and SUPABASE_SERVICE_KEY are required "
                "for the supabase state backend"
            )
        client = create_client(settings.supabase_url, settings.supabase_service_key)
        return SupabaseStateStore(client, table=settings.supabase_table)
    raise ValueError(f"Unknown state backend: {settings.state_backend!r}")


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    clock = ZoneClock(resolved_settings.timezone)
    state_store = build_state_store(resolved_settings)
    nutritionix_client = HttpxNutritionixClient.create(
        app_id=resolved_settings.nx_app_id,
        api_key=resolved_settings.nx_api_key,
        base_url=resolved_settings.nx_base_url,
        remote_user_id=resolved_settings.nx_remote_user_id,
    )
    diary_service = DiaryService(store=state_store, clock=clock)
    rollover_scheduler = MidnightRolloverScheduler(
        diary_service=diary_service, clock=clock
    )

    async def close_resources() -> None:
        await rollover_scheduler.stop()
        await nutritionix_client.close()

    return AppContainer(
        settings=resolved_settings,
        clock=clock,
        state_store=state_store,
        lookup_service=LookupService(nutritionix_client),
        profile_service=ProfileService(state_store),
        diary_service=diary_service,
        rollover_scheduler=rollover_scheduler,
        close_resources=close_resources,
    )
