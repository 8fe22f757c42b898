"""Unit conversions for weights, distances, durations and heights."""

from typing import Optional

from ..constants import (
    CM_PER_INCH,
    LBS_TO_KG,
    MILES_PER_FOOT,
    MILES_PER_KM,
    MILES_PER_METER,
)


def lbs_to_kg(value: float) -> float:
    """Convert pounds to kilograms."""
    return value * LBS_TO_KG


def kg_to_lbs(value: float) -> float:
    """Convert kilograms to pounds."""
    return value / LBS_TO_KG


def to_kg(value: float, unit: Optional[str]) -> float:
    """Convert a weight to kilograms. Anything other than 'lbs' is taken as kg."""
    if unit == "lbs":
        return lbs_to_kg(value)
    return value


def from_kg(value_kg: float, unit: Optional[str]) -> float:
    """Convert a kilogram weight to the requested unit."""
    if unit == "lbs":
        return kg_to_lbs(value_kg)
    return value_kg


def distance_to_miles(value: float, unit: Optional[str]) -> float:
    """
    Convert a distance to miles.

    Args:
        value: Distance value
        unit: One of 'mi', 'km', 'ft', 'm'. Missing or unknown units are
            treated as miles, which is how workouts are logged by default.

    Returns:
        Distance in miles
    """
    if unit == "km":
        return value * MILES_PER_KM
    if unit == "ft":
        return value * MILES_PER_FOOT
    if unit == "m":
        return value * MILES_PER_METER
    return value


def duration_to_minutes(value: float, unit: Optional[str]) -> float:
    """Convert a duration to minutes. Missing or unknown units are minutes."""
    if unit == "hr":
        return value * 60
    if unit == "sec":
        return value / 60
    return value


def inches_to_cm(value: float) -> float:
    return value * CM_PER_INCH


def cm_to_inches(value: float) -> float:
    return value / CM_PER_INCH


def pace_to_speed_mph(pace_min_per_mile: float) -> float:
    """Convert a pace (min/mile) to speed (mph). Non-positive paces give 0."""
    if pace_min_per_mile <= 0:
        return 0.0
    return 60 / pace_min_per_mile
