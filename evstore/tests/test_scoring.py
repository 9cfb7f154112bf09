from __future__ import annotations

from dataclasses import replace

import pytest

from evstore.catalog.models import VehicleSpec
from evstore.recommendations.preferences import PreferenceSet, Priority
from evstore.recommendations.scoring import (
    FSD_REASON,
    RULES,
    budget_rule,
    fsd_rule,
    priority_rule,
    range_rule,
    score_vehicle,
    seating_rule,
    style_rule,
    towing_rule,
)

MODEL_3_STANDARD = VehicleSpec(
    model_name="Model 3",
    variant_name="Standard",
    base_price_usd=38990,
    range_miles=272,
    top_speed_mph=125,
    zero_to_sixty_seconds=5.8,
    energy_consumption_wh_per_mile=247,
    seating_options=(5,),
    body_type="Sedan",
    towing_capacity_lbs=None,
    full_self_driving_available=False,
)

BASE_PREFS = PreferenceSet(
    price_min=30000,
    price_max=40000,
    daily_distance_miles=30,
    passenger_count=5,
    body_style="Any",
)


def _vehicle(**changes) -> VehicleSpec:
    return replace(MODEL_3_STANDARD, **changes)


def _prefs(**changes) -> PreferenceSet:
    return replace(BASE_PREFS, **changes)


# ── Whole-vehicle scoring ────────────────────────────────────────────────


def test_model_3_standard_example():
    result = score_vehicle(MODEL_3_STANDARD, BASE_PREFS)
    assert result.score == 70
    assert result.top_reasons == ["Fits budget: $38,990", "Range (272mi) covers daily drive"]
    assert result.over_budget_note is None


def test_scoring_is_deterministic():
    prefs = _prefs(priority=Priority.performance, towing_required=True, fsd_required=True)
    vehicle = _vehicle(zero_to_sixty_seconds=3.1, towing_capacity_lbs=3500)
    results = [score_vehicle(vehicle, prefs) for _ in range(5)]
    assert len({(r.raw_score, r.reasons) for r in results}) == 1


def test_reasons_keep_firing_order_and_cap_at_three():
    vehicle = _vehicle(
        base_price_usd=30000,
        zero_to_sixty_seconds=2.9,
        seating_options=(5, 7),
        body_type="SUV",
        towing_capacity_lbs=3500,
        full_self_driving_available=True,
    )
    prefs = _prefs(
        passenger_count=6,
        body_style="SUV",
        priority=Priority.performance,
        towing_required=True,
        fsd_required=True,
    )

    result = score_vehicle(vehicle, prefs)

    assert len(result.reasons) == 7
    assert result.top_reasons == [
        "Fits budget: $30,000",
        "Range (272mi) covers daily drive",
        "Supercar acceleration: 2.9s",
    ]
    assert result.raw_score == 35 + 25 + 20 + 15 + 10 + 15 + 10


def test_negative_total_is_clamped_to_zero():
    vehicle = _vehicle(base_price_usd=100000, range_miles=10, seating_options=(2,))
    result = score_vehicle(vehicle, _prefs(daily_distance_miles=100))
    assert result.raw_score == -30 - 10 - 50
    assert result.score == 0
    assert result.reasons == ()


def test_seat_shortfall_loses_to_otherwise_identical_vehicle():
    prefs = _prefs(passenger_count=7, towing_required=True, fsd_required=True, body_style="SUV")
    roomy = _vehicle(seating_options=(5, 7), body_type="SUV", towing_capacity_lbs=3500,
                     full_self_driving_available=True)
    cramped = replace(roomy, seating_options=(5,))

    assert score_vehicle(roomy, prefs).raw_score - score_vehicle(cramped, prefs).raw_score == 65
    assert score_vehicle(roomy, prefs).score > score_vehicle(cramped, prefs).score


def test_over_budget_note_is_recorded_without_reason():
    result = score_vehicle(_vehicle(base_price_usd=44990), BASE_PREFS)
    assert result.over_budget_note == "Slightly over budget ($44,990)"
    assert "Slightly over budget ($44,990)" not in result.reasons
    assert result.raw_score == 15 + 25 + 15


def test_custom_rule_list():
    result = score_vehicle(MODEL_3_STANDARD, BASE_PREFS, rules=[range_rule])
    assert result.raw_score == 25
    assert RULES[0] is budget_rule and RULES[-1] is fsd_rule


# ── Budget ───────────────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "price, expected",
    [
        (31999, 35),   # under 80% of budget
        (32000, 30),   # exactly 80% gets no bonus
        (40000, 30),   # exactly the budget
        (40001, 15),
        (46000, 15),   # exactly 115%
        (46001, -30),
    ],
)
def test_budget_boundaries(price, expected):
    assert budget_rule(_vehicle(base_price_usd=price), BASE_PREFS).delta == expected


def test_budget_reason_only_within_budget():
    assert budget_rule(_vehicle(base_price_usd=40000), BASE_PREFS).reason == "Fits budget: $40,000"
    assert budget_rule(_vehicle(base_price_usd=45000), BASE_PREFS).reason is None
    assert budget_rule(_vehicle(base_price_usd=90000), BASE_PREFS).note is None


# ── Range ────────────────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "range_mi, expected",
    [(250, 25), (249, 15), (150, 15), (149, -10)],
)
def test_range_thresholds(range_mi, expected):
    prefs = _prefs(daily_distance_miles=100)
    assert range_rule(_vehicle(range_miles=range_mi), prefs).delta == expected


def test_range_reason_only_for_full_coverage():
    prefs = _prefs(daily_distance_miles=100)
    assert range_rule(_vehicle(range_miles=300), prefs).reason == "Range (300mi) covers daily drive"
    assert range_rule(_vehicle(range_miles=200), prefs).reason is None


# ── Priority ─────────────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "accel, expected",
    [(2.9, 20), (3.5, 10), (4.4, 10), (4.5, 0)],
)
def test_performance_priority(accel, expected):
    prefs = _prefs(priority=Priority.performance)
    assert priority_rule(_vehicle(zero_to_sixty_seconds=accel), prefs).delta == expected


def test_efficiency_priority():
    prefs = _prefs(priority=Priority.efficiency)
    outcome = priority_rule(_vehicle(energy_consumption_wh_per_mile=247), prefs)
    assert outcome.delta == 20
    assert outcome.reason == "High efficiency: 247 Wh/mi"
    assert priority_rule(_vehicle(energy_consumption_wh_per_mile=260), prefs).delta == 0


def test_balanced_priority_contributes_nothing():
    outcome = priority_rule(_vehicle(zero_to_sixty_seconds=2.0), BASE_PREFS)
    assert outcome.delta == 0
    assert outcome.reason is None


# ── Seating, style, towing, FSD ──────────────────────────────────────────


def test_seating_reason_only_for_large_groups():
    seven = _vehicle(seating_options=(5, 7))
    assert seating_rule(seven, _prefs(passenger_count=6)).reason == "Seats 7 people"
    assert seating_rule(seven, _prefs(passenger_count=5)).reason is None
    assert seating_rule(seven, _prefs(passenger_count=5)).delta == 15
    assert seating_rule(MODEL_3_STANDARD, _prefs(passenger_count=6)).delta == -50


def test_style_match():
    assert style_rule(MODEL_3_STANDARD, _prefs(body_style="Sedan")).reason == "Matches Sedan style"
    assert style_rule(MODEL_3_STANDARD, _prefs(body_style="SUV")).delta == 0
    assert style_rule(MODEL_3_STANDARD, BASE_PREFS).delta == 0


def test_towing_requires_capacity():
    prefs = _prefs(towing_required=True)
    assert towing_rule(MODEL_3_STANDARD, prefs).delta == 0
    outcome = towing_rule(_vehicle(towing_capacity_lbs=11000), prefs)
    assert outcome.delta == 15
    assert outcome.reason == "Towing: 11000 lbs"
    assert towing_rule(_vehicle(towing_capacity_lbs=11000), BASE_PREFS).delta == 0


def test_fsd_bonus():
    prefs = _prefs(fsd_required=True)
    assert fsd_rule(MODEL_3_STANDARD, prefs).delta == 0
    outcome = fsd_rule(_vehicle(full_self_driving_available=True), prefs)
    assert outcome.delta == 10
    assert outcome.reason == FSD_REASON
