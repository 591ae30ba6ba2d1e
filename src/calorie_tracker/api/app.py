"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import asdict

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse

from calorie_tracker.api.models import DiaryAddRequest, NutritionQuery, StatsPayload
from calorie_tracker.app_logging import configure_logging
from calorie_tracker.containers import AppContainer
from calorie_tracker.domain.metabolic import UserStats, energy_profile
from calorie_tracker.services.diary import DiaryItemNotFoundError
from calorie_tracker.services.lookup import NutritionLookupError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        state_container: AppContainer = app.state.container
        try:
            state_container.diary_service.reconcile()
        except Exception:
            logger.exception("Startup rollover check failed")
        state_container.rollover_scheduler.start()
        yield
        await state_container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/api/nutrition", response_model=None)
    async def nutrition_lookup(
        payload: NutritionQuery, request: Request
    ) -> dict[str, object] | JSONResponse:
        """Relay a food query to the nutrition API."""
        state_container: AppContainer = request.app.state.container
        try:
            return await state_container.lookup_service.lookup(payload.query)
        except NutritionLookupError as exc:
            return JSONResponse(
                {"error": str(exc)},
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

    @app.get("/api/stats")
    async def get_stats(request: Request) -> dict[str, object]:
        """Return stored stats with BMR and TDEE."""
        state_container: AppContainer = request.app.state.container
        stats = state_container.profile_service.get_stats()
        return _stats_response(stats)

    @app.put("/api/stats")
    async def update_stats(
        payload: StatsPayload, request: Request
    ) -> dict[str, object]:
        """Replace stored stats and return the recomputed figures."""
        state_container: AppContainer = request.app.state.container
        stats = state_container.profile_service.update_stats(payload.to_domain())
        return _stats_response(stats)

    @app.get("/api/diary")
    async def get_diary(request: Request) -> dict[str, object]:
        """Return today's diary, total and remaining budget."""
        state_container: AppContainer = request.app.state.container
        tdee = state_container.profile_service.get_energy().tdee
        summary = state_container.diary_service.summarize(tdee)
        return {**asdict(summary), "tdee": tdee}

    @app.post("/api/diary", status_code=status.HTTP_201_CREATED)
    async def add_diary_item(
        payload: DiaryAddRequest, request: Request
    ) -> dict[str, object]:
        """Log a portion of a food for today."""
        state_container: AppContainer = request.app.state.container
        item = state_container.diary_service.add_item(
            payload.food.to_domain(), payload.portion
        )
        return asdict(item)

    @app.delete("/api/diary/{index}")
    async def remove_diary_item(index: int, request: Request) -> dict[str, object]:
        """Remove today's diary item at a position."""
        state_container: AppContainer = request.app.state.container
        try:
            item = state_container.diary_service.remove_item(index)
        except DiaryItemNotFoundError as exc:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"No diary item at position {index}",
            ) from exc
        return asdict(item)

    @app.get("/api/history")
    async def get_history(request: Request) -> dict[str, object]:
        """Return archived daily totals."""
        state_container: AppContainer = request.app.state.container
        history = state_container.diary_service.history()
        return {"history": [asdict(entry) for entry in history]}

    @app.post("/api/rollover")
    async def rollover(request: Request) -> dict[str, object]:
        """Run the day-boundary check now."""
        state_container: AppContainer = request.app.state.container
        archived = state_container.diary_service.reconcile()
        return {"archived": asdict(archived) if archived else None}

    return app


def _stats_response(stats: UserStats) -> dict[str, object]:
    energy = energy_profile(stats)
    return {**asdict(stats), "bmr": energy.bmr, "tdee": energy.tdee}
