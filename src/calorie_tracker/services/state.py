"""Named-record state store interface and JSON helpers."""

import json
import logging
from typing import Protocol

STATS_KEY = "calorie_stats"
DIARY_KEY = "calorie_log"
HISTORY_KEY = "calorie_history"
LAST_LOG_DATE_KEY = "last_log_date"

_logger = logging.getLogger(__name__)


class StateStore(Protocol):
    """Key-value persistence for JSON-encoded state records."""

    def read(self, key: str) -> str | None:
        """Return the raw record text, or None when the record is absent."""

    def write(self, key: str, value: str) -> None:
        """Replace the record text."""


def read_json(store: StateStore, key: str) -> object | None:
    """Read and decode a record; undecodable records count as absent."""
    raw = store.read(key)
    if raw is None:
        return None
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        _logger.warning("Ignoring undecodable state record: key=%s", key)
        return None


def write_json(store: StateStore, key: str, value: object) -> None:
    """Encode and write a record."""
    store.write(key, json.dumps(value))
