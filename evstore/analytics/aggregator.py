from __future__ import annotations

from collections import Counter, defaultdict
from typing import Any

TOP_FILTERS = 20


def compute_analytics(
    filter_counts: list[dict[str, Any]],
    events: list[dict[str, Any]],
) -> dict[str, Any]:
    runs = [e for e in events if e["type"] == "recommend"]
    total = len(runs)

    times = [r["response_time_ms"] for r in runs if "response_time_ms" in r]
    avg_time = round(sum(times) / len(times), 1) if times else 0.0

    # Filter breakdown per type, e.g. {"style": {"SUV": 3, "Any": 1}}
    by_filter: dict[str, dict[str, int]] = defaultdict(dict)
    for record in filter_counts:
        by_filter[record["filterType"]][record["filterValue"]] = record["count"]

    # Vehicles that made it into the top results
    recommended: Counter[str] = Counter()
    top_pick: Counter[str] = Counter()
    for r in runs:
        names = r.get("vehicles", []) or []
        recommended.update(names)
        if names:
            top_pick[names[0]] += 1

    empty_runs = sum(1 for r in runs if not r.get("vehicles"))
    signed_in = sum(1 for r in runs if r.get("user_id") is not None)

    return {
        "total_recommendations": total,
        "avg_response_time_ms": avg_time,
        "signed_in_rate": round(signed_in / total * 100, 1) if total else 0.0,
        "empty_results": empty_runs,
        "filters": filter_counts[:TOP_FILTERS],
        "filter_breakdown": dict(by_filter),
        "top_recommended": [{"name": n, "count": c} for n, c in recommended.most_common(10)],
        "top_picks": [{"name": n, "count": c} for n, c in top_pick.most_common(5)],
    }
