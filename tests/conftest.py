"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

import httpx
import pytest

from calorie_tracker.adapters.nutritionix_client import NutritionixClient
from calorie_tracker.config import Settings
from calorie_tracker.containers import AppContainer
from calorie_tracker.services.clock import Clock
from calorie_tracker.services.diary import DiaryService
from calorie_tracker.services.lookup import LookupService
from calorie_tracker.services.profile import ProfileService
from calorie_tracker.services.rollover import MidnightRolloverScheduler
from calorie_tracker.services.state import StateStore


@dataclass
class InMemoryStateStore(StateStore):
    """In-memory state store for tests."""

    records: dict[str, str] = field(default_factory=dict)
    writes: list[str] = field(default_factory=list)

    def read(self, key: str) -> str | None:
        return self.records.get(key)

    def write(self, key: str, value: str) -> None:
        self.records[key] = value
        self.writes.append(key)


@dataclass
class FixedClock(Clock):
    """Clock that only moves when told to."""

    current: datetime = field(
        default_factory=lambda: datetime(2024, 3, 5, 9, 30, tzinfo=ZoneInfo("UTC"))
    )

    def now(self) -> datetime:
        return self.current

    def advance(self, **kwargs: float) -> None:
        self.current = self.current + timedelta(**kwargs)


@dataclass
class FakeNutritionixClient(NutritionixClient):
    """Fake Nutritionix client with a canned response."""

    payload: dict[str, object] = field(
        default_factory=lambda: {
            "foods": [
                {
                    "food_name": "apple",
                    "nf_calories": 94.64,
                    "serving_qty": 1,
                    "serving_unit": "medium (3\" dia)",
                }
            ]
        }
    )
    status_code: int = 200
    queries: list[str] = field(default_factory=list)

    async def natural_nutrients(self, query: str) -> dict[str, object]:
        self.queries.append(query)
        if self.status_code >= 400:
            request = httpx.Request("POST", "https://nutritionix.test")
            response = httpx.Response(self.status_code, request=request)
            raise httpx.HTTPStatusError(
                "upstream error", request=request, response=response
            )
        return self.payload


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        nx_app_id="app-id",
        nx_api_key="api-key",
        state_dir=str(tmp_path / "state"),
    )


@pytest.fixture
def state_store() -> InMemoryStateStore:
    return InMemoryStateStore()


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def nutritionix_client() -> FakeNutritionixClient:
    return FakeNutritionixClient()


@pytest.fixture
def container(
    settings: Settings,
    state_store: InMemoryStateStore,
    clock: FixedClock,
    nutritionix_client: FakeNutritionixClient,
) -> AppContainer:
    diary_service = DiaryService(store=state_store, clock=clock)
    rollover_scheduler = MidnightRolloverScheduler(
        diary_service=diary_service, clock=clock
    )

    async def close_resources() -> None:
        await rollover_scheduler.stop()

    return AppContainer(
        settings=settings,
        clock=clock,
        state_store=state_store,
        lookup_service=LookupService(nutritionix_client),
        profile_service=ProfileService(state_store),
        diary_service=diary_service,
        rollover_scheduler=rollover_scheduler,
        close_resources=close_resources,
    )
