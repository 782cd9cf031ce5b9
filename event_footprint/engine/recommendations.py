"""Rank reduction actions by impact per unit of effort."""

from __future__ import annotations

from typing import Mapping, NamedTuple

from event_footprint.engine.result import Alternative, Recommendation
from event_footprint.factors.lookup import coerce_enum
from event_footprint.models.enums import (
    CostDirection,
    DecorationLevel,
    Difficulty,
    EnergySource,
    EventFormat,
    EventType,
    ImpactCategory,
    MealType,
    TransitAccess,
    VenueType,
)
from event_footprint.models.errors import require_non_negative
from event_footprint.models.profiles import EventConfiguration


class ReductionLever(NamedTuple):
    """Achievable reduction for one category and the effort it takes (1-3)."""

    fraction: float
    effort: int


REDUCTION_LEVERS: dict[ImpactCategory, ReductionLever] = {
    ImpactCategory.VENUE: ReductionLever(0.35, 3),
    ImpactCategory.FOOD_BEVERAGE: ReductionLever(0.45, 1),
    ImpactCategory.TRANSPORT: ReductionLever(0.40, 2),
    ImpactCategory.MATERIALS: ReductionLever(0.80, 1),
}

# Beyond this a venue needs good transit to stay reachable without driving
REMOTE_VENUE_KM = 10.0


def _action(category: ImpactCategory, event_type: EventType, event_format: EventFormat) -> str:
    virtual = event_format is EventFormat.VIRTUAL
    if category is ImpactCategory.VENUE:
        if virtual:
            return "Stream from a platform hosted on renewable-powered data centres"
        return "Choose a LEED-certified or renewable-powered venue"
    if category is ImpactCategory.FOOD_BEVERAGE:
        if event_type is EventType.GALA:
            return "Serve a plant-forward plated menu with local sourcing"
        return "Switch to plant-forward menu with local sourcing"
    if category is ImpactCategory.TRANSPORT:
        if virtual:
            return "Encourage remote attendees to join from their usual workplace"
        if event_format is EventFormat.HYBRID:
            return "Provide shuttle service from major transit hubs and promote remote attendance"
        return "Provide shuttle service from major transit hubs"
    if event_type is EventType.TRADE_SHOW:
        return "Go digital-first with event app and QR codes, and require reusable exhibitor stands"
    return "Go digital-first with event app and QR codes"


def generate_recommendations(
    breakdown: Mapping[ImpactCategory, float],
    event_type: EventType | str,
    event_format: EventFormat | str,
) -> list[Recommendation]:
    """One recommendation per category, quick wins first.

    savings = category emissions x lever fraction; ordered by savings per
    unit of effort, descending. Equal priorities keep category order.
    """
    event_type = coerce_enum(EventType, event_type, "event_type")
    event_format = coerce_enum(EventFormat, event_format, "event_format")
    values = {
        coerce_enum(ImpactCategory, key, "breakdown"): value
        for key, value in breakdown.items()
    }

    recommendations = []
    for category, lever in REDUCTION_LEVERS.items():
        emissions = require_non_negative(values.get(category, 0.0), f"breakdown.{category.value}")
        recommendations.append(
            Recommendation(
                category=category,
                action=_action(category, event_type, event_format),
                savings_kg=emissions * lever.fraction,
                savings_percent=lever.fraction * 100,
                effort=lever.effort,
            )
        )
    # sorted() is stable, including with reverse=True
    return sorted(recommendations, key=lambda r: r.priority, reverse=True)


def suggest_alternatives(config: EventConfiguration) -> list[Alternative]:
    """Concrete swaps for what this configuration currently does."""
    venue = config.venue
    catering = config.catering
    travel = config.travel
    materials = config.materials
    meal = coerce_enum(MealType, catering.meal_type, "catering.meal_type")
    alts: list[Alternative] = []

    if venue.energy_source == EnergySource.GRID_STANDARD:
        alts.append(Alternative(
            "v1", ImpactCategory.VENUE, "Grid electricity",
            "Switch to renewable energy venue", 85, CostDirection.SAME, Difficulty.MEDIUM,
        ))
    if venue.venue_type not in (VenueType.OUTDOOR, VenueType.HYBRID_SPACE):
        alts.append(Alternative(
            "v2", ImpactCategory.VENUE, "Indoor venue",
            "Consider outdoor or hybrid venue", 50, CostDirection.LOWER, Difficulty.MEDIUM,
        ))
    alts.append(Alternative(
        "v3", ImpactCategory.VENUE, "Standard HVAC",
        "Use natural ventilation + smart thermostats", 30, CostDirection.LOWER, Difficulty.EASY,
    ))

    if meal is not MealType.VEGAN:
        alts.append(Alternative(
            "f1", ImpactCategory.FOOD_BEVERAGE, f"{meal.value} menu",
            "Offer plant-based menu options", 60, CostDirection.LOWER, Difficulty.EASY,
        ))
    if catering.local_sourcing_percent < 100:
        alts.append(Alternative(
            "f2", ImpactCategory.FOOD_BEVERAGE, "Standard catering",
            "Source from local farms (< 80 km)", 40, CostDirection.SAME, Difficulty.MEDIUM,
        ))
    alts.append(Alternative(
        "f3", ImpactCategory.FOOD_BEVERAGE, "Single-use servingware",
        "Use compostable or reusable servingware", 90, CostDirection.HIGHER, Difficulty.EASY,
    ))

    all_public = all(c.travel_mode.is_public_transit for c in travel.cohorts)
    if not travel.shuttle_service and not all_public:
        main_mode = max(travel.cohorts, key=lambda c: c.percentage).travel_mode
        alts.append(Alternative(
            "t1", ImpactCategory.TRANSPORT, f"{main_mode.value} transport",
            "Provide shuttle buses from transit hubs", 55, CostDirection.HIGHER, Difficulty.MEDIUM,
        ))
    alts.append(Alternative(
        "t2", ImpactCategory.TRANSPORT, "No carpooling",
        "Set up carpooling platform for attendees", 35, CostDirection.LOWER, Difficulty.EASY,
    ))
    alts.append(Alternative(
        "t3", ImpactCategory.TRANSPORT, "Standard parking",
        "Offer EV charging stations + bike parking", 20, CostDirection.HIGHER, Difficulty.HARD,
    ))
    poorly_served = venue.transit_access in (TransitAccess.LIMITED, TransitAccess.NONE)
    if venue.distance_from_city_center_km > REMOTE_VENUE_KM and poorly_served:
        alts.append(Alternative(
            "t4", ImpactCategory.TRANSPORT,
            f"Venue {venue.distance_from_city_center_km:g} km from city centre",
            "Choose a venue within reach of public transit", 30,
            CostDirection.SAME, Difficulty.MEDIUM,
        ))

    if not materials.digital_alternatives:
        alts.append(Alternative(
            "m1", ImpactCategory.MATERIALS, "Printed materials",
            "Go fully digital: QR codes, event app", 95, CostDirection.LOWER, Difficulty.EASY,
        ))
    if materials.swag_bags:
        alts.append(Alternative(
            "m2", ImpactCategory.MATERIALS, "Traditional swag bags",
            "Digital gift cards or tree-planting donations", 100,
            CostDirection.LOWER, Difficulty.EASY,
        ))
    if materials.decoration_level != DecorationLevel.MINIMAL:
        alts.append(Alternative(
            "m3", ImpactCategory.MATERIALS, f"{materials.decoration_level.value} decorations",
            "Rent decorations or use living plants", 70, CostDirection.SAME, Difficulty.MEDIUM,
        ))
    return alts
