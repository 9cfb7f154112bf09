from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

ANY_STYLE = "Any"
MIN_PASSENGERS = 1
MAX_PASSENGERS = 7
DEFAULT_CITY_HIGHWAY_RATIO = 50


class Priority(str, Enum):
    performance = "Performance"
    efficiency = "Efficiency"
    balanced = "Balanced"


class InvalidPreferenceError(ValueError):
    """The submitted preferences are missing or malformed required fields."""

    def __init__(self, message: str, fields: list[str] | None = None) -> None:
        super().__init__(message)
        self.fields = fields or []


@dataclass(frozen=True)
class PreferenceSet:
    """Validated shopping constraints for a single recommendation request."""

    price_min: int
    price_max: int
    daily_distance_miles: int
    passenger_count: int
    body_style: str
    priority: Priority = Priority.balanced
    # Accepted and stored, but no scoring rule reads it
    city_highway_ratio: int = DEFAULT_CITY_HIGHWAY_RATIO
    towing_required: bool = False
    fsd_required: bool = False
    color_preference: str = ANY_STYLE

    def to_dict(self) -> dict[str, Any]:
        """Wire-format view, as accepted by ``normalize_preferences``."""
        return {
            "priceRange": {"min": self.price_min, "max": self.price_max},
            "dailyDistance": self.daily_distance_miles,
            "passengers": self.passenger_count,
            "style": self.body_style,
            "priority": self.priority.value,
            "cityHighwayRatio": self.city_highway_ratio,
            "towing": self.towing_required,
            "fsd": self.fsd_required,
            "colorPreference": self.color_preference,
        }


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def _to_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    try:
        return int(float(value))
    except (TypeError, ValueError, OverflowError):
        return None


def _to_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"true", "yes", "1", "on"}
    return bool(value)


def normalize_preferences(raw: Mapping[str, Any] | None) -> PreferenceSet:
    """
    Validate a raw preference payload and fill in defaults.

    Required: ``priceRange.max``, ``dailyDistance``, ``passengers``, ``style``.
    Out-of-range numbers are clamped rather than rejected.

    Raises:
        InvalidPreferenceError: a required field is absent or a field is malformed.
    """
    if not isinstance(raw, Mapping):
        raise InvalidPreferenceError("Preferences required", ["preferences"])

    price_range = raw.get("priceRange")
    if price_range is not None and not isinstance(price_range, Mapping):
        raise InvalidPreferenceError("priceRange must be an object", ["priceRange"])
    price_range = price_range or {}

    required = {
        "priceRange.max": price_range.get("max"),
        "dailyDistance": raw.get("dailyDistance"),
        "passengers": raw.get("passengers"),
        "style": raw.get("style"),
    }
    missing = [name for name, value in required.items() if value is None or value == ""]
    if missing:
        raise InvalidPreferenceError(
            f"Missing required preferences: {', '.join(missing)}", missing
        )

    numbers = {
        "priceRange.min": price_range.get("min", 0),
        "priceRange.max": price_range["max"],
        "dailyDistance": raw["dailyDistance"],
        "passengers": raw["passengers"],
        "cityHighwayRatio": raw.get("cityHighwayRatio", DEFAULT_CITY_HIGHWAY_RATIO),
    }
    parsed: dict[str, int] = {}
    malformed: list[str] = []
    for name, value in numbers.items():
        if value is None:
            value = 0 if name == "priceRange.min" else DEFAULT_CITY_HIGHWAY_RATIO
        number = _to_int(value)
        if number is None:
            malformed.append(name)
        else:
            parsed[name] = number
    if malformed:
        raise InvalidPreferenceError(
            f"Preferences must be numeric: {', '.join(malformed)}", malformed
        )

    raw_priority = raw.get("priority") or Priority.balanced.value
    try:
        priority = Priority(str(raw_priority).strip().capitalize())
    except ValueError:
        raise InvalidPreferenceError(
            f"Unknown priority: {raw_priority!r}", ["priority"]
        ) from None

    style = str(raw["style"]).strip()
    if style.lower() == ANY_STYLE.lower():
        style = ANY_STYLE

    price_max = max(0, parsed["priceRange.max"])
    price_min = _clamp(parsed["priceRange.min"], 0, price_max)

    return PreferenceSet(
        price_min=price_min,
        price_max=price_max,
        daily_distance_miles=max(0, parsed["dailyDistance"]),
        passenger_count=_clamp(parsed["passengers"], MIN_PASSENGERS, MAX_PASSENGERS),
        body_style=style,
        priority=priority,
        city_highway_ratio=_clamp(parsed["cityHighwayRatio"], 0, 100),
        towing_required=_to_bool(raw.get("towing", False)),
        fsd_required=_to_bool(raw.get("fsd", False)),
        color_preference=str(raw.get("colorPreference") or ANY_STYLE),
    )
