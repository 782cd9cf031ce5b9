"""Green score, grade and benchmark percentile."""

from __future__ import annotations

import math

from event_footprint.engine.result import AnnualProjection, FootprintResult, OffsetCost
from event_footprint.factors.benchmarks import BenchmarkRange
from event_footprint.factors.emissions import (
    ENERGY_EMISSION_FACTORS,
    OFFSET_PRICES_PER_TONNE,
    TRANSIT_SCORES,
    WORST_CASE_ENERGY_FACTOR,
)
from event_footprint.factors.lookup import coerce_enum, lookup
from event_footprint.models.enums import (
    EnergySource,
    Grade,
    IndustryComparison,
    TransitAccess,
    VenueType,
)
from event_footprint.models.errors import require_non_negative, require_positive
from event_footprint.models.profiles import VenueProfile

BASE_SCORE = 50
ENERGY_POINTS = 30
GREEN_BUILDING_POINTS = 10
WASTE_PROGRAM_POINTS = 3
WATER_CONSERVATION_POINTS = 2
VENUE_TYPE_POINTS: dict[VenueType, int] = {
    VenueType.OUTDOOR: 5,
    VenueType.HYBRID_SPACE: 3,
}

# Inclusive lower bounds, checked in order
GRADE_THRESHOLDS: tuple[tuple[int, Grade], ...] = (
    (90, Grade.A_PLUS),
    (80, Grade.A),
    (70, Grade.B),
    (60, Grade.C),
    (50, Grade.D),
)

COMPARISON_THRESHOLDS: tuple[tuple[float, IndustryComparison], ...] = (
    (80, IndustryComparison.EXCELLENT),
    (60, IndustryComparison.GOOD),
    (40, IndustryComparison.AVERAGE),
    (20, IndustryComparison.BELOW_AVERAGE),
)

PERCENTILE_BEST = 95.0
PERCENTILE_WORST = 5.0


def round_half_up(value: float) -> int:
    """Round halves upwards; Python's round() rounds them to even."""
    return math.floor(value + 0.5)


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def calculate_green_score(venue: VenueProfile) -> int:
    """Score a venue 0-100.

    50 base, up to 30 for an energy source cleaner than the standard grid,
    10 for a green building certification, 3 for a waste programme, 2 for
    water conservation, up to 10 for transit access and a small bonus for
    outdoor or hybrid spaces. The total is clamped to [0, 100].
    """
    factor = lookup(
        ENERGY_EMISSION_FACTORS, EnergySource, venue.energy_source, "venue.energy_source"
    )
    transit = lookup(TRANSIT_SCORES, TransitAccess, venue.transit_access, "venue.transit_access")
    venue_type = coerce_enum(VenueType, venue.venue_type, "venue.venue_type")

    score = BASE_SCORE
    score += round_half_up((1 - factor / WORST_CASE_ENERGY_FACTOR) * ENERGY_POINTS)
    if venue.has_green_building_certification:
        score += GREEN_BUILDING_POINTS
    if venue.has_waste_program:
        score += WASTE_PROGRAM_POINTS
    if venue.has_water_conservation:
        score += WATER_CONSERVATION_POINTS
    score += round_half_up(transit / 10)
    score += VENUE_TYPE_POINTS.get(venue_type, 0)
    return int(clamp(score, 0, 100))


def score_to_grade(score: float) -> Grade:
    for threshold, grade in GRADE_THRESHOLDS:
        if score >= threshold:
            return grade
    return Grade.F


def percentile_rank(value: float, benchmark: BenchmarkRange) -> float:
    """Where ``value`` (kg per attendee) sits against a benchmark triple.

    95 at or below best practice, 5 at or above the worst case, linear in
    between. Lower emissions give a higher percentile.
    """
    if value <= benchmark.best:
        return PERCENTILE_BEST
    if value >= benchmark.worst:
        return PERCENTILE_WORST
    position = (value - benchmark.best) / (benchmark.worst - benchmark.best)
    return clamp(PERCENTILE_BEST - position * (PERCENTILE_BEST - PERCENTILE_WORST), 0.0, 100.0)


def industry_comparison(percentile: float) -> IndustryComparison:
    for threshold, label in COMPARISON_THRESHOLDS:
        if percentile >= threshold:
            return label
    return IndustryComparison.POOR


def carbon_offset_costs(carbon_kg: float) -> list[OffsetCost]:
    """Cost of offsetting ``carbon_kg`` at each market tier."""
    require_non_negative(carbon_kg, "carbon_kg")
    tonnes = carbon_kg / 1000
    return [
        OffsetCost(tier=tier, price_per_tonne=price, cost=tonnes * price)
        for tier, price in OFFSET_PRICES_PER_TONNE.items()
    ]


def annual_projection(result: FootprintResult, events_per_year: int = 4) -> AnnualProjection:
    """Scale one event's footprint to a recurring programme."""
    require_positive(events_per_year, "events_per_year")
    return AnnualProjection(
        events_per_year=events_per_year,
        carbon_kg=result.carbon_kg * events_per_year,
        water_liters=result.water_liters * events_per_year,
        waste_kg=result.waste_kg * events_per_year,
    )
