"""Pydantic models for API request payloads."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from calorie_tracker.domain.diary import PORTIONS, FoodItem
from calorie_tracker.domain.metabolic import ACTIVITY_LEVELS, UserStats

_DEFAULT_STATS = UserStats()


class NutritionQuery(BaseModel):
    """Free-text food lookup request."""

    query: str


class StatsPayload(BaseModel):
    """User body stats in imperial units."""

    weight_lbs: float = Field(default=_DEFAULT_STATS.weight_lbs, ge=0)
    height_ft: float = Field(default=_DEFAULT_STATS.height_ft, ge=0)
    height_in: float = Field(default=_DEFAULT_STATS.height_in, ge=0)
    age: float = Field(default=_DEFAULT_STATS.age, ge=0)
    gender: Literal["male", "female"] = _DEFAULT_STATS.gender
    activity: float = _DEFAULT_STATS.activity

    @field_validator("activity")
    @classmethod
    def _known_activity(cls, value: float) -> float:
        if value not in ACTIVITY_LEVELS.values():
            allowed = ", ".join(str(level) for level in ACTIVITY_LEVELS.values())
            raise ValueError(f"activity must be one of {allowed}")
        return value

    def to_domain(self) -> UserStats:
        return UserStats(**self.model_dump())


class FoodPayload(BaseModel):
    """Food item as returned by the nutrition lookup."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str = Field(alias="food_name")
    calories: float = Field(alias="nf_calories", ge=0)
    serving_qty: float = 1
    serving_unit: str = "serving"

    def to_domain(self) -> FoodItem:
        return FoodItem(
            name=self.name,
            calories=self.calories,
            serving_qty=self.serving_qty,
            serving_unit=self.serving_unit,
        )


class DiaryAddRequest(BaseModel):
    """Request to log a portion of a food for today."""

    food: FoodPayload
    portion: float = PORTIONS["full"]

    @field_validator("portion")
    @classmethod
    def _known_portion(cls, value: float) -> float:
        if value not in PORTIONS.values():
            allowed = ", ".join(str(portion) for portion in PORTIONS.values())
            raise ValueError(f"portion must be one of {allowed}")
        return value
