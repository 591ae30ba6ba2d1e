"""Food lookup service backed by Nutritionix."""

import logging
from dataclasses import dataclass

import httpx

from calorie_tracker.adapters.nutritionix_client import NutritionixClient

_logger = logging.getLogger(__name__)


class NutritionLookupError(Exception):
    """Raised when the upstream nutrition API does not return a result."""


@dataclass
class LookupService:
    """Relays free-text food queries to the nutrition API."""

    client: NutritionixClient

    async def lookup(self, query: str) -> dict[str, object]:
        """Return the upstream JSON body for a query, unmodified."""
        try:
            return await self.client.natural_nutrients(query)
        except httpx.HTTPStatusError as exc:
            _logger.warning(
                "Nutritionix lookup failed: query=%s status=%s",
                query,
                exc.response.status_code,
            )
            raise NutritionLookupError("Nutritionix error") from exc
        except httpx.HTTPError as exc:
            _logger.warning("Nutritionix lookup failed: query=%s error=%s", query, exc)
            raise NutritionLookupError("Nutritionix error") from exc
        except ValueError as exc:
            _logger.warning("Nutritionix returned a non-JSON body: query=%s", query)
            raise NutritionLookupError("Nutritionix error") from exc
