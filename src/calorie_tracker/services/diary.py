"""Diary and history service with day rollover."""

import logging
from collections.abc import Callable
from dataclasses import asdict, dataclass
from datetime import date
from typing import TypeVar

from calorie_tracker.domain.diary import (
    DiarySummary,
    FoodItem,
    HistoryEntry,
    diary_total,
    remaining_budget,
)
from calorie_tracker.services.clock import Clock, today
from calorie_tracker.services.state import (
    DIARY_KEY,
    HISTORY_KEY,
    LAST_LOG_DATE_KEY,
    StateStore,
    read_json,
    write_json,
)

_logger = logging.getLogger(__name__)

T = TypeVar("T")


class DiaryItemNotFoundError(IndexError):
    """Raised when a diary position does not exist."""


@dataclass
class DiaryService:
    """Keeps today's food log and the archive of past daily totals.

    Persisted state is the only source of truth: every operation starts by
    reconciling the stored last-log-date with today, so the load-time check
    and the midnight scheduler share one rollover path.
    """

    store: StateStore
    clock: Clock

    def reconcile(self) -> HistoryEntry | None:
        """Archive the stored diary if it belongs to an earlier day.

        Returns the archived entry, or None when the diary is already today's.
        """
        current = today(self.clock)
        stored_date = _parse_date(read_json(self.store, LAST_LOG_DATE_KEY)) or current
        if stored_date > current:
            # Clock moved back: the diary stays with the later day.
            _logger.warning(
                "Last log date is ahead of today, keeping diary: stored=%s today=%s",
                stored_date,
                current,
            )
            return None

        archived = None
        if stored_date < current:
            items = self._load_items()
            history = self._load_history()
            if history and history[-1].date >= stored_date:
                _logger.warning(
                    "Day not after last archived day, skipping: date=%s last=%s",
                    stored_date,
                    history[-1].date,
                )
            else:
                archived = HistoryEntry(date=stored_date, total=diary_total(items))
                history.append(archived)
                self._save_history(history)
                _logger.info(
                    "Archived diary: date=%s total=%s items=%s",
                    archived.date,
                    archived.total,
                    len(items),
                )
            self._save_items([])

        write_json(self.store, LAST_LOG_DATE_KEY, current)
        return archived

    def list_items(self) -> list[FoodItem]:
        """Return today's logged items in order."""
        self.reconcile()
        return self._load_items()

    def add_item(self, food: FoodItem, portion: float = 1.0) -> FoodItem:
        """Log a portion of a food for today and return the stored copy."""
        entry = food.scaled(portion)
        self.reconcile()
        items = self._load_items()
        items.append(entry)
        self._save_items(items)
        return entry

    def remove_item(self, index: int) -> FoodItem:
        """Remove today's item at a position and return it."""
        self.reconcile()
        items = self._load_items()
        if index < 0 or index >= len(items):
            raise DiaryItemNotFoundError(index)
        removed = items.pop(index)
        self._save_items(items)
        return removed

    def summarize(self, tdee: int) -> DiarySummary:
        """Return today's items with the running total and remaining budget."""
        items = self.list_items()
        total = diary_total(items)
        return DiarySummary(
            date=today(self.clock),
            items=items,
            total=total,
            remaining=remaining_budget(tdee, total),
        )

    def history(self) -> list[HistoryEntry]:
        """Return archived daily totals in the order they were recorded."""
        self.reconcile()
        return self._load_history()

    def _load_items(self) -> list[FoodItem]:
        raw = read_json(self.store, DIARY_KEY)
        if not isinstance(raw, list):
            return []
        return _parse_rows(raw, _parse_item, DIARY_KEY)

    def _save_items(self, items: list[FoodItem]) -> None:
        write_json(self.store, DIARY_KEY, [asdict(item) for item in items])

    def _load_history(self) -> list[HistoryEntry]:
        raw = read_json(self.store, HISTORY_KEY)
        if not isinstance(raw, list):
            return []
        return _parse_rows(raw, _parse_history, HISTORY_KEY)

    def _save_history(self, history: list[HistoryEntry]) -> None:
        write_json(self.store, HISTORY_KEY, [asdict(entry) for entry in history])


def _parse_item(row: dict[str, object]) -> FoodItem:
    return FoodItem(
        name=str(row.get("name", "")),
        calories=float(row.get("calories") or 0.0),
        serving_qty=float(row.get("serving_qty") or 0.0),
        serving_unit=str(row.get("serving_unit", "")),
    )


def _parse_history(row: dict[str, object]) -> HistoryEntry:
    return HistoryEntry(
        date=str(row.get("date", "")),
        total=int(row.get("total") or 0),
    )


def _parse_rows(
    raw: list[object], parse: Callable[[dict[str, object]], T], key: str
) -> list[T]:
    """Parse stored rows, skipping any that are not well-formed."""
    rows = []
    for row in raw:
        try:
            if not isinstance(row, dict):
                raise TypeError(type(row).__name__)
            rows.append(parse(row))
        except (TypeError, ValueError):
            _logger.warning("Skipping malformed state row: key=%s row=%r", key, row)
    return rows


def _parse_date(value: object) -> str | None:
    """Return a stored ISO date, or None when it is missing or malformed."""
    if not isinstance(value, str):
        return None
    try:
        return date.fromisoformat(value).isoformat()
    except ValueError:
        return None
