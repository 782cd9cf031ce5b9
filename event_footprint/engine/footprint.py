"""Aggregate the footprint calculators into one FootprintResult."""

from __future__ import annotations

import logging
from typing import Any, Optional

from event_footprint.calculators.formulas import (
    calculate_accommodation_emissions,
    calculate_catering_emissions,
    calculate_materials_emissions,
    calculate_materials_waste,
    calculate_venue_emissions,
    check_distribution,
    cohort_travel_emissions,
)
from event_footprint.calculators.registry import CalculatorDefinition, get_all_calculators
from event_footprint.engine.result import (
    CateringMaterialsAssessment,
    CohortEmission,
    FootprintResult,
    TravelBreakdown,
    VenueAssessment,
)
from event_footprint.engine.scoring import (
    calculate_green_score,
    industry_comparison,
    percentile_rank,
    round_half_up,
    score_to_grade,
)
from event_footprint.factors.benchmarks import EVENT_BENCHMARKS
from event_footprint.factors.emissions import (
    LOCAL_SOURCING_CEILING,
    SHUTTLE_TRAVEL_FACTOR,
    WASTE_KG_PER_ATTENDEE_DAY,
    WATER_LITERS_PER_ATTENDEE_DAY,
)
from event_footprint.factors.lookup import lookup
from event_footprint.models.enums import (
    EnergySource,
    EventType,
    ImpactCategory,
    MaterialLevel,
    MealType,
    WasteManagement,
)
from event_footprint.models.errors import require_non_negative, require_positive
from event_footprint.models.profiles import (
    AttendeeTravelProfile,
    CateringProfile,
    EventConfiguration,
    MaterialsProfile,
    VenueProfile,
)

logger = logging.getLogger(__name__)

VIRTUAL_SHARE_TARGET_PERCENT = 20
DOMINANT_COHORT_SHARE = 0.5
AIR_SHARE_THRESHOLD_PERCENT = 50

BEST_LOCAL_SOURCING_PERCENT = 80.0
BEST_ORGANIC_PERCENT = 60.0


def _resolve(config: EventConfiguration, path: str) -> Any:
    value: Any = config
    for attr in path.split("."):
        value = getattr(value, attr)
        if value is None:
            return None
    return value


def _run_calculator(
    definition: CalculatorDefinition,
    config: EventConfiguration,
    options: dict[str, Any],
) -> Optional[float]:
    """Call one registered formula with inputs read from ``config``.

    Returns None when an optional section (e.g. ``virtual``) is absent.
    """
    kwargs: dict[str, Any] = {}
    missing: list[str] = []
    for param, path in definition.required_inputs.items():
        value = _resolve(config, path)
        if value is None:
            missing.append(path)
        else:
            kwargs[param] = value

    if missing:
        logger.debug("Skipping calculator %s: no %s configured", definition.id, missing)
        return None

    for name in definition.options:
        if name in options:
            kwargs[name] = options[name]
    return definition.calculate_fn(**kwargs)


def calculate_breakdown(
    config: EventConfiguration,
    tolerance_percent: float = 1.0,
) -> dict[ImpactCategory, float]:
    """Carbon per category, every category present, in declaration order."""
    breakdown = {category: 0.0 for category in ImpactCategory}
    options = {"tolerance_percent": tolerance_percent}
    for definition in get_all_calculators().values():
        emissions = _run_calculator(definition, config, options)
        if emissions is None:
            continue
        breakdown[definition.category] += emissions
        logger.debug("%s: %.3f %s", definition.id, emissions, definition.unit)
    return breakdown


def calculate_footprint(
    config: EventConfiguration,
    tolerance_percent: float = 1.0,
) -> FootprintResult:
    """Carbon, water and waste for ``config``, scored and benchmarked.

    Raises ``InvalidConfiguration`` or ``DistributionError`` for inputs the
    calculators reject.
    """
    require_non_negative(config.duration_days, "duration_days")
    breakdown = calculate_breakdown(config, tolerance_percent)
    carbon_kg = sum(breakdown[category] for category in ImpactCategory)

    guests = config.catering.guest_count
    guest_days = guests * config.duration_days
    water_liters = guest_days * sum(WATER_LITERS_PER_ATTENDEE_DAY.values())
    waste_kg = calculate_materials_waste(config.materials, guests) + guest_days * sum(
        WASTE_KG_PER_ATTENDEE_DAY.values()
    )

    attendees = require_positive(config.attendee_count, "travel.total_attendees")
    per_attendee = carbon_kg / attendees
    benchmark = lookup(EVENT_BENCHMARKS, EventType, config.event_type, "event_type")
    percentile = percentile_rank(per_attendee, benchmark)
    green_score = calculate_green_score(config.venue)

    return FootprintResult(
        carbon_kg=carbon_kg,
        water_liters=water_liters,
        waste_kg=waste_kg,
        breakdown=breakdown,
        green_score=green_score,
        grade=score_to_grade(green_score),
        carbon_per_attendee_kg=per_attendee,
        percentile=percentile,
        industry_comparison=industry_comparison(percentile),
    )


def _travel_recommendations(
    travel: AttendeeTravelProfile,
    cohorts: list[CohortEmission],
    total_kg: float,
) -> list[str]:
    recommendations = []
    virtual = travel.virtual_attendee_percent
    if virtual < VIRTUAL_SHARE_TARGET_PERCENT:
        recommendations.append(
            f"Adding {VIRTUAL_SHARE_TARGET_PERCENT - virtual:g}% virtual attendees could save "
            f"{round_half_up(total_kg * VIRTUAL_SHARE_TARGET_PERCENT / 100)} kg CO2e"
        )
    if total_kg > 0:
        biggest = max(cohorts, key=lambda c: c.emissions_kg)
        if biggest.emissions_kg > total_kg * DOMINANT_COHORT_SHARE:
            share = round_half_up(biggest.emissions_kg / total_kg * 100)
            recommendations.append(
                f"{biggest.region.value.capitalize()} travel accounts for {share}% of emissions"
            )
    air_share = sum(c.percentage for c in travel.cohorts if c.travel_mode.is_air)
    if air_share > AIR_SHARE_THRESHOLD_PERCENT:
        recommendations.append(
            "Consider rail alternatives for short-haul travelers to cut emissions by 85%"
        )
    return recommendations


def travel_breakdown(
    travel: AttendeeTravelProfile,
    tolerance_percent: float = 1.0,
) -> TravelBreakdown:
    """Per-cohort travel emissions, with shuttle savings already applied.

    Also reports emissions per registered attendee, the travel avoided by
    virtual attendance, and travel-specific recommendations.
    """
    require_positive(travel.total_attendees, "travel.total_attendees")
    check_distribution(travel, tolerance_percent)

    in_person = travel.in_person_attendees
    shuttle = SHUTTLE_TRAVEL_FACTOR if travel.shuttle_service else 1.0
    cohorts = [
        CohortEmission(
            region=c.region,
            travel_mode=c.travel_mode,
            attendees=in_person * (c.percentage / 100),
            avg_distance_km=c.avg_distance_km,
            emissions_kg=cohort_travel_emissions(c, in_person) * shuttle,
        )
        for c in travel.cohorts
    ]
    travel_kg = sum(c.emissions_kg for c in cohorts)
    accommodation_kg = calculate_accommodation_emissions(travel)
    total_kg = travel_kg + accommodation_kg

    virtual_fraction = travel.virtual_attendee_percent / 100
    virtual_savings = 0.0
    if virtual_fraction < 1:
        virtual_savings = total_kg * virtual_fraction / (1 - virtual_fraction)

    biggest = None
    if travel_kg > 0:
        biggest = max(cohorts, key=lambda c: c.emissions_kg).region

    return TravelBreakdown(
        cohorts=cohorts,
        travel_kg=travel_kg,
        accommodation_kg=accommodation_kg,
        total_kg=total_kg,
        emissions_per_attendee_kg=total_kg / travel.total_attendees,
        virtual_savings_kg=virtual_savings,
        shuttle_applied=travel.shuttle_service,
        biggest_contributor=biggest,
        recommendations=_travel_recommendations(travel, cohorts, total_kg),
    )


def assess_venue(venue: VenueProfile, duration_hours: float) -> VenueAssessment:
    """Venue emissions and score next to its best achievable configuration."""
    emissions = calculate_venue_emissions(venue, duration_hours)
    area = venue.effective_floor_area_m2
    best_venue = venue.model_copy(
        update={
            "energy_source": EnergySource.CARBON_NEUTRAL,
            "has_green_building_certification": True,
            "has_water_conservation": True,
        }
    )
    best_case = calculate_venue_emissions(best_venue, duration_hours)
    score = calculate_green_score(venue)

    return VenueAssessment(
        emissions_kg=emissions,
        emissions_per_m2=emissions / area if area > 0 else 0.0,
        green_score=score,
        grade=score_to_grade(score),
        best_case_kg=best_case,
        potential_savings_kg=max(0.0, emissions - best_case),
    )


def assess_catering_materials(
    catering: CateringProfile,
    materials: MaterialsProfile,
    duration_days: float,
) -> CateringMaterialsAssessment:
    """Catering and materials emissions next to their best achievable options.

    The best case serves local-organic meals (80% local, 60% organic) and
    runs zero-waste materials without swag bags.
    """
    catering_kg = calculate_catering_emissions(catering, duration_days)
    materials_kg = calculate_materials_emissions(materials, catering.guest_count)
    best_catering = catering.model_copy(
        update={
            "meal_type": MealType.LOCAL_ORGANIC,
            "local_sourcing_percent": BEST_LOCAL_SOURCING_PERCENT,
            "organic_percent": BEST_ORGANIC_PERCENT,
        }
    )
    best_materials = materials.model_copy(
        update={
            "printed_materials": MaterialLevel.ZERO_WASTE,
            "swag_bags": False,
            "waste_management": WasteManagement.ZERO_WASTE,
        }
    )
    best_catering_kg = calculate_catering_emissions(best_catering, duration_days)
    best_materials_kg = calculate_materials_emissions(best_materials, catering.guest_count)
    total_kg = catering_kg + materials_kg

    return CateringMaterialsAssessment(
        catering_kg=catering_kg,
        materials_kg=materials_kg,
        total_kg=total_kg,
        per_attendee_kg=total_kg / catering.guest_count,
        best_catering_kg=best_catering_kg,
        best_materials_kg=best_materials_kg,
        potential_catering_savings_kg=max(0.0, catering_kg - best_catering_kg),
        potential_materials_savings_kg=max(0.0, materials_kg - best_materials_kg),
        local_sourcing_savings_kg=(
            catering_kg * (catering.local_sourcing_percent / 100) * LOCAL_SOURCING_CEILING
        ),
    )
