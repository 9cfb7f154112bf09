"""
Deterministic rule-based scoring of a vehicle against a preference set.

Each rule is a pure function ``(vehicle, preferences) -> RuleOutcome``.
``score_vehicle`` folds the rules in ``RULES`` order, summing deltas and
collecting reasons in the order they fired:

==========  ======================================================
Rule        Contribution
==========  ======================================================
budget      +30 within budget (+5 under 80%), +15 up to 115%, -30
range       +25 at 2.5x daily distance, +15 at 1.5x, else -10
priority    +20/+10 performance, +20 efficiency, 0 balanced
seating     +15 when seats suffice, else -50
style       +10 on body type match
towing      +15 when required and available
fsd         +10 when required and available
==========  ======================================================

The running total is allowed to go negative; only ``ScoredCandidate.score``
clamps it to zero.
"""
from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from ..catalog.models import VehicleSpec
from .preferences import ANY_STYLE, PreferenceSet, Priority

MAX_REASONS = 3
FSD_REASON = "Full Self Driving Hardware Ready"


@dataclass(frozen=True)
class RuleOutcome:
    delta: int = 0
    reason: str | None = None
    note: str | None = None


@dataclass(frozen=True)
class ScoredCandidate:
    vehicle: VehicleSpec
    raw_score: int
    reasons: tuple[str, ...] = ()
    over_budget_note: str | None = None

    @property
    def score(self) -> int:
        return max(0, self.raw_score)

    @property
    def top_reasons(self) -> list[str]:
        return list(self.reasons[:MAX_REASONS])


Rule = Callable[[VehicleSpec, PreferenceSet], RuleOutcome]


def budget_rule(vehicle: VehicleSpec, prefs: PreferenceSet) -> RuleOutcome:
    price = vehicle.base_price_usd
    budget = prefs.price_max
    # Integer cross-multiplication keeps the 80% / 115% boundaries exact
    if price <= budget:
        bonus = 5 if price * 10 < budget * 8 else 0
        return RuleOutcome(30 + bonus, reason=f"Fits budget: ${price:,}")
    if price * 100 <= budget * 115:
        return RuleOutcome(15, note=f"Slightly over budget (${price:,})")
    return RuleOutcome(-30)


def range_rule(vehicle: VehicleSpec, prefs: PreferenceSet) -> RuleOutcome:
    range_mi = vehicle.range_miles
    daily = prefs.daily_distance_miles
    if range_mi * 2 >= daily * 5:
        return RuleOutcome(25, reason=f"Range ({range_mi}mi) covers daily drive")
    if range_mi * 2 >= daily * 3:
        return RuleOutcome(15)
    return RuleOutcome(-10)


def priority_rule(vehicle: VehicleSpec, prefs: PreferenceSet) -> RuleOutcome:
    if prefs.priority is Priority.performance:
        accel = vehicle.zero_to_sixty_seconds
        if accel < 3.5:
            return RuleOutcome(20, reason=f"Supercar acceleration: {accel:g}s")
        if accel < 4.5:
            return RuleOutcome(10)
    elif prefs.priority is Priority.efficiency:
        efficiency = vehicle.energy_consumption_wh_per_mile
        if efficiency < 260:
            return RuleOutcome(20, reason=f"High efficiency: {efficiency} Wh/mi")
    return RuleOutcome()


def seating_rule(vehicle: VehicleSpec, prefs: PreferenceSet) -> RuleOutcome:
    seats = vehicle.effective_seats
    if seats >= prefs.passenger_count:
        if seats > 5 and prefs.passenger_count > 5:
            return RuleOutcome(15, reason=f"Seats {seats} people")
        return RuleOutcome(15)
    return RuleOutcome(-50)


def style_rule(vehicle: VehicleSpec, prefs: PreferenceSet) -> RuleOutcome:
    if prefs.body_style != ANY_STYLE and vehicle.body_type == prefs.body_style:
        return RuleOutcome(10, reason=f"Matches {vehicle.body_type} style")
    return RuleOutcome()


def towing_rule(vehicle: VehicleSpec, prefs: PreferenceSet) -> RuleOutcome:
    if prefs.towing_required and vehicle.towing_capacity_lbs is not None:
        return RuleOutcome(15, reason=f"Towing: {vehicle.towing_capacity_lbs} lbs")
    return RuleOutcome()


def fsd_rule(vehicle: VehicleSpec, prefs: PreferenceSet) -> RuleOutcome:
    if prefs.fsd_required and vehicle.full_self_driving_available:
        return RuleOutcome(10, reason=FSD_REASON)
    return RuleOutcome()


RULES: tuple[Rule, ...] = (
    budget_rule,
    range_rule,
    priority_rule,
    seating_rule,
    style_rule,
    towing_rule,
    fsd_rule,
)


def score_vehicle(
    vehicle: VehicleSpec,
    prefs: PreferenceSet,
    rules: Iterable[Rule] = RULES,
) -> ScoredCandidate:
    """Apply every rule in order and collect the result."""
    total = 0
    reasons: list[str] = []
    note: str | None = None
    for rule in rules:
        outcome = rule(vehicle, prefs)
        total += outcome.delta
        if outcome.reason:
            reasons.append(outcome.reason)
        if outcome.note:
            note = outcome.note
    return ScoredCandidate(
        vehicle=vehicle,
        raw_score=total,
        reasons=tuple(reasons),
        over_budget_note=note,
    )


def score_catalog(vehicles: Iterable[VehicleSpec], prefs: PreferenceSet) -> list[ScoredCandidate]:
    """Score every vehicle, preserving catalog order."""
    return [score_vehicle(v, prefs) for v in vehicles]
