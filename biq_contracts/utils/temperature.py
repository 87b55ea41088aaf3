import math
from enum import IntEnum
from typing import Optional


DEGREE_MARK = "º"


class TemperatureScale(IntEnum):
    CELSIUS = 0
    FAHRENHEIT = 1

    @property
    def suffix(self) -> str:
        if self is TemperatureScale.FAHRENHEIT:
            return "F"
        return "C"

    @classmethod
    def from_limit_value(cls, value: float) -> Optional["TemperatureScale"]:
        """Scale chosen by a tempScale limit, or None if the value names no scale."""
        if value in (0, 1):
            return cls(int(value))
        return None


# Halves round away from zero: 0.25 -> 0.3 with one decimal, 2.25 -> 2.5 as a half.
def _round_half_away(value: float) -> float:
    if not math.isfinite(value):
        return value
    magnitude = abs(value)
    rounded = math.floor(magnitude)
    if magnitude - rounded >= 0.5:
        rounded += 1
    return float(rounded if value >= 0 else -rounded)


def to_celsius(value: float, from_scale: TemperatureScale) -> float:
    if math.isnan(value) or from_scale == TemperatureScale.CELSIUS:
        return value
    return (value - 32) * 5 / 9


def from_celsius(value: float, to_scale: TemperatureScale) -> float:
    if math.isnan(value) or to_scale == TemperatureScale.CELSIUS:
        return value
    return value * 9 / 5 + 32


def one_decimal_place(value: float) -> float:
    return _round_half_away(value * 10) / 10


def nearest_half(value: float) -> float:
    """Snap to the closest .0 or .5, used for threshold steps."""
    return _round_half_away(value * 2) / 2


def format_temperature(value: float, scale: TemperatureScale) -> str:
    """Render a value already in ``scale``, e.g. ``21.5ºC``."""
    return f"{one_decimal_place(value):.1f}{DEGREE_MARK}{scale.suffix}"


def format_from_celsius(value: float, scale: TemperatureScale) -> str:
    return format_temperature(from_celsius(value, scale), scale)
