"""Shared helpers and enums for the data models."""

from enum import Enum


def to_camel(string: str) -> str:
    """Convert snake_case to camelCase."""
    components = string.split("_")
    return components[0] + "".join(x.title() for x in components[1:])


class WeightUnit(str, Enum):
    KG = "kg"
    LBS = "lbs"


class DistanceUnit(str, Enum):
    MILES = "mi"
    KILOMETERS = "km"
    FEET = "ft"
    METERS = "m"


class DurationUnit(str, Enum):
    MINUTES = "min"
    HOURS = "hr"
    SECONDS = "sec"
