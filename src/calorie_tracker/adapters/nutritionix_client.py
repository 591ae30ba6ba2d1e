"""Nutritionix natural-language nutrients API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class NutritionixClient(Protocol):
    """Interface for Nutritionix API interactions."""

    async def natural_nutrients(self, query: str) -> dict[str, object]:
        """Resolve a free-text food query and return raw API data."""


@dataclass
class HttpxNutritionixClient(NutritionixClient):
    """HTTPX-backed Nutritionix client."""

    app_id: str
    api_key: str
    base_url: str
    http_client: httpx.AsyncClient
    remote_user_id: str = "0"

    @classmethod
    def create(
        cls, app_id: str, api_key: str, base_url: str, remote_user_id: str = "0"
    ) -> "HttpxNutritionixClient":
        """Create a Nutritionix client with a managed httpx session."""
        return cls(
            app_id=app_id,
            api_key=api_key,
            base_url=base_url,
            http_client=httpx.AsyncClient(),
            remote_user_id=remote_user_id,
        )

    async def natural_nutrients(self, query: str) -> dict[str, object]:
        """POST the query to the natural nutrients endpoint."""
        url = f"{self.base_url}/v2/natural/nutrients"
        response = await self.http_client.post(
            url,
            headers={
                "x-app-id": self.app_id,
                "x-app-key": self.api_key,
                "x-remote-user-id": self.remote_user_id,
            },
            json={"query": query},
            timeout=15,
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
