"""Diary and history domain models."""

from dataclasses import dataclass, replace

from calorie_tracker.domain.metabolic import round_half_up

PORTIONS: dict[str, float] = {
    "full": 1.0,
    "half": 0.5,
    "quarter": 0.25,
}


@dataclass(frozen=True)
class FoodItem:
    """A food with its calories for one serving."""

    name: str
    calories: float
    serving_qty: float
    serving_unit: str

    def scaled(self, portion: float) -> "FoodItem":
        """Return a copy with calories scaled by a portion preset and rounded."""
        if portion not in PORTIONS.values():
            raise ValueError(f"Unknown portion: {portion!r}")
        return replace(self, calories=round_half_up(self.calories * portion))


@dataclass(frozen=True)
class HistoryEntry:
    """Archived calorie total for a completed day."""

    date: str
    total: int


@dataclass(frozen=True)
class DiarySummary:
    """Today's diary with its running total and remaining budget."""

    date: str
    items: list[FoodItem]
    total: int
    remaining: int


def diary_total(items: list[FoodItem]) -> int:
    """Sum item calories, rounded to a whole number."""
    return round_half_up(sum(item.calories for item in items))


def remaining_budget(tdee: int, total: int) -> int:
    """Calories left for the day, never below zero."""
    return max(tdee - total, 0)
