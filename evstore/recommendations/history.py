from __future__ import annotations

import itertools
from datetime import datetime, timezone
from typing import Any

from .models import RecommendationItem
from .preferences import PreferenceSet

_history: list[dict[str, Any]] = []
_ids = itertools.count(1)


def save_recommendation(
    user_id: int,
    prefs: PreferenceSet,
    recommendations: list[RecommendationItem],
) -> dict[str, Any]:
    entry = {
        "id": next(_ids),
        "userId": user_id,
        "preferences": prefs.to_dict(),
        "recommendations": [
            {
                "vehicleId": r.id,
                "vehicleName": r.name,
                "score": r.score,
                "reasons": list(r.reasons),
                "estimatedPrice": r.basePrice,
            }
            for r in recommendations
        ],
        "createdAt": datetime.now(timezone.utc).isoformat(),
    }
    _history.append(entry)
    return entry


def get_history(user_id: int, limit: int | None = None) -> list[dict[str, Any]]:
    """A user's saved runs, newest first."""
    entries = [e for e in reversed(_history) if e["userId"] == user_id]
    return entries[:limit] if limit is not None else entries


def clear_history() -> None:
    _history.clear()
