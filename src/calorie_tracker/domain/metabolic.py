"""Body stats and energy expenditure formulas."""

import math
from dataclasses import dataclass

LBS_PER_KG = 2.20462
CM_PER_INCH = 2.54
INCHES_PER_FOOT = 12

GENDERS = ("male", "female")

ACTIVITY_LEVELS: dict[str, float] = {
    "sedentary": 1.2,
    "light": 1.375,
    "moderate": 1.55,
    "active": 1.725,
}


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up."""
    return math.floor(value + 0.5)


def lbs_to_kg(weight_lbs: float) -> float:
    return weight_lbs / LBS_PER_KG


def feet_inches_to_cm(feet: float, inches: float) -> float:
    return (feet * INCHES_PER_FOOT + inches) * CM_PER_INCH


def calc_bmr(weight_kg: float, height_cm: float, age: float, gender: str) -> float:
    """Basal metabolic rate in kcal/day (Mifflin-St Jeor)."""
    offset = 5 if gender == "male" else -161
    return 10 * weight_kg + 6.25 * height_cm - 5 * age + offset


def calc_tdee(bmr: float, activity_factor: float) -> int:
    """Total daily energy expenditure: BMR scaled by activity, rounded."""
    return round_half_up(bmr * activity_factor)


@dataclass(frozen=True)
class UserStats:
    """Body stats in imperial units, as entered by the user."""

    weight_lbs: float = 154
    height_ft: float = 5
    height_in: float = 9
    age: float = 30
    gender: str = "male"
    activity: float = ACTIVITY_LEVELS["sedentary"]

    def __post_init__(self) -> None:
        for name in ("weight_lbs", "height_ft", "height_in", "age"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative")
        if self.gender not in GENDERS:
            raise ValueError(f"Unknown gender: {self.gender!r}")
        if self.activity not in ACTIVITY_LEVELS.values():
            raise ValueError(f"Unknown activity multiplier: {self.activity!r}")

    @property
    def weight_kg(self) -> float:
        return lbs_to_kg(self.weight_lbs)

    @property
    def height_cm(self) -> float:
        return feet_inches_to_cm(self.height_ft, self.height_in)


@dataclass(frozen=True)
class EnergyProfile:
    """Derived daily energy figures for a set of stats."""

    bmr: int
    tdee: int


def energy_profile(stats: UserStats) -> EnergyProfile:
    """Compute display BMR and TDEE from imperial stats."""
    bmr = calc_bmr(stats.weight_kg, stats.height_cm, stats.age, stats.gender)
    return EnergyProfile(bmr=round_half_up(bmr), tdee=calc_tdee(bmr, stats.activity))
