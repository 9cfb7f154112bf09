from __future__ import annotations

import time
from datetime import datetime, timezone
from typing import Any

from ..recommendations.preferences import PreferenceSet

# (filter_type, filter_value) -> counter record
_filter_counts: dict[tuple[str, str], dict[str, Any]] = {}
_events: list[dict[str, Any]] = []

TRACKED_FILTERS = ("style", "passengers", "priority", "colorPreference")


def track_filter(filter_type: str, filter_value: str) -> None:
    key = (filter_type, filter_value)
    record = _filter_counts.get(key)
    now = datetime.now(timezone.utc).isoformat()
    if record:
        record["count"] += 1
        record["lastUpdated"] = now
    else:
        _filter_counts[key] = {
            "filterType": filter_type,
            "filterValue": filter_value,
            "count": 1,
            "lastUpdated": now,
        }


def track_preferences(prefs: PreferenceSet) -> None:
    values = prefs.to_dict()
    for name in TRACKED_FILTERS:
        track_filter(name, str(values[name]))


def get_filter_counts() -> list[dict[str, Any]]:
    """Counter records, most used first."""
    return sorted(_filter_counts.values(), key=lambda r: r["count"], reverse=True)


def record_event(event_type: str, data: dict[str, Any]) -> None:
    _events.append({
        "type": event_type,
        "timestamp": time.time(),
        **data,
    })


def get_events() -> list[dict[str, Any]]:
    return _events


def clear_events() -> None:
    _events.clear()
    _filter_counts.clear()
