from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from ..catalog.models import VehicleSpec
from .assets import VEHICLE_ASSETS, asset_for
from .config import DEFAULT_RECOMMENDATION_CONFIG
from .models import RecommendationItem, VehicleOut, VehicleSpecsOut
from .preferences import PreferenceSet
from .scoring import ScoredCandidate, score_catalog

logger = logging.getLogger(__name__)


def format_range(vehicle: VehicleSpec) -> str:
    return f"{vehicle.range_miles} mi"


def format_acceleration(vehicle: VehicleSpec) -> str:
    return f"{vehicle.zero_to_sixty_seconds:g}s"


def format_top_speed(vehicle: VehicleSpec) -> str:
    return f"{vehicle.top_speed_mph} mph"


def rank(
    candidates: Iterable[ScoredCandidate],
    limit: int = DEFAULT_RECOMMENDATION_CONFIG.top_n,
) -> list[ScoredCandidate]:
    """Highest score first; ``sorted`` is stable so earlier catalog entries win ties."""
    ordered = sorted(candidates, key=lambda c: c.score, reverse=True)
    return ordered[:limit]


def present(
    candidate: ScoredCandidate,
    assets: dict[str, dict[str, Any]] = VEHICLE_ASSETS,
) -> RecommendationItem:
    vehicle = candidate.vehicle
    asset = asset_for(vehicle.model_name, assets)
    return RecommendationItem(
        id=asset["id"],
        name=vehicle.display_name,
        image=asset.get("image"),
        basePrice=vehicle.base_price_usd,
        range=format_range(vehicle),
        acceleration=format_acceleration(vehicle),
        topSpeed=format_top_speed(vehicle),
        score=candidate.score,
        reasons=candidate.top_reasons,
        details=[candidate.over_budget_note] if candidate.over_budget_note else [],
        specs=VehicleSpecsOut(
            drive=vehicle.drive_type,
            seats=vehicle.seating_label,
            warranty=vehicle.warranty_summary,
        ),
    )


def present_vehicle(
    vehicle: VehicleSpec,
    assets: dict[str, dict[str, Any]] = VEHICLE_ASSETS,
) -> VehicleOut:
    """Catalog listing entry, independent of any preferences."""
    return VehicleOut(
        id=asset_for(vehicle.model_name, assets)["id"],
        name=vehicle.display_name,
        basePrice=vehicle.base_price_usd,
        range=format_range(vehicle),
        acceleration=format_acceleration(vehicle),
        topSpeed=format_top_speed(vehicle),
        bodyType=vehicle.body_type,
        seats=vehicle.seating_label,
        towing=vehicle.towing_capacity_lbs,
        fsd=vehicle.full_self_driving_available,
    )


def recommend(
    catalog: Iterable[VehicleSpec],
    prefs: PreferenceSet,
    limit: int = DEFAULT_RECOMMENDATION_CONFIG.top_n,
) -> list[RecommendationItem]:
    """Score the whole catalog and return the best ``limit`` matches."""
    candidates = score_catalog(catalog, prefs)
    top = rank(candidates, limit)
    logger.debug(
        "Scored %d vehicles, top: %s",
        len(candidates),
        [(c.vehicle.display_name, c.score) for c in top],
    )
    return [present(c) for c in top]
