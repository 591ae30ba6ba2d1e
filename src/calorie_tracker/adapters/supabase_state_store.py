"""Supabase-backed state store."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from calorie_tracker.services.state import StateStore


@dataclass
class SupabaseStateStore(StateStore):
    """Supabase implementation keeping one row per state record."""

    client: Client
    table: str = "state_records"

    def read(self, key: str) -> str | None:
        """Return the stored value for a record key."""
        response = (
            self.client.table(self.table)
            .select("value")
            .eq("key", key)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return response.data[0].get("value")

    def write(self, key: str, value: str) -> None:
        """Insert or replace the record row."""
        self.client.table(self.table).upsert(
            {
                "key": key,
                "value": value,
                "updated_at": datetime.now(tz=UTC).isoformat(),
            },
            on_conflict="key",
        ).execute()
