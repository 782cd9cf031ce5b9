"""In-person / virtual / hybrid comparison and format recommendation."""

from __future__ import annotations

from typing import NamedTuple, Sequence

from event_footprint.calculators.formulas import calculate_venue_emissions
from event_footprint.engine.result import FormatComparisonResult
from event_footprint.factors.emissions import (
    ACCOMMODATION_FACTOR,
    DEVICE_EMISSION_FACTOR,
    MEAL_EMISSION_FACTORS,
    STREAMING_EMISSION_FACTOR,
    TRAVEL_EMISSION_FACTORS,
)
from event_footprint.models.enums import (
    EnergySource,
    EventFormat,
    MealType,
    TravelMode,
    VenueType,
)
from event_footprint.models.errors import (
    InvalidConfiguration,
    require_non_negative,
    require_positive,
)
from event_footprint.models.profiles import VenueProfile


class FormatExperience(NamedTuple):
    """Fixed experience ratings per format (industry consensus, not derived)."""

    cost_index: float
    engagement: int
    accessibility: int
    networking: int
    reason: str


FORMAT_EXPERIENCE: dict[EventFormat, FormatExperience] = {
    EventFormat.IN_PERSON: FormatExperience(
        1.0, 95, 60, 98, "Best for high-value networking and immersive experiences"
    ),
    EventFormat.VIRTUAL: FormatExperience(
        0.35, 70, 95, 55, "Maximum reach and sustainability, ideal for information sharing"
    ),
    EventFormat.HYBRID: FormatExperience(
        0.75, 85, 85, 80,
        "Balanced approach combining reach with valuable in-person interactions",
    ),
}

# Reference assumptions for a comparison made before the venue is chosen
REFERENCE_VENUE = VenueProfile(
    venue_type=VenueType.CONVENTION_CENTER,
    floor_area_m2=500,
    energy_source=EnergySource.GRID_STANDARD,
)
REFERENCE_HOURS_PER_DAY = 8
REFERENCE_TRAVEL_MODE = TravelMode.AIR_MEDIUM
REFERENCE_MEAL = MealType.MIXED_MEAT_VEG
REFERENCE_MEALS_PER_DAY = 2
VIRTUAL_HOURS_PER_DAY = 6
HYBRID_VENUE_FACTOR = 0.7


def _on_site_emissions(attendees: float, distance_km: float, days: float) -> float:
    """Travel, hotel nights and meals for ``attendees`` who come in person."""
    travel = attendees * distance_km * 2 * TRAVEL_EMISSION_FACTORS[REFERENCE_TRAVEL_MODE]
    accommodation = attendees * days * ACCOMMODATION_FACTOR
    catering = attendees * REFERENCE_MEALS_PER_DAY * days * MEAL_EMISSION_FACTORS[REFERENCE_MEAL]
    return travel + accommodation + catering


def _streaming_emissions(attendees: float, days: float) -> float:
    hours = days * VIRTUAL_HOURS_PER_DAY
    return attendees * hours * (STREAMING_EMISSION_FACTOR + DEVICE_EMISSION_FACTOR)


def _result(event_format: EventFormat, carbon_kg: float, attendees: int) -> FormatComparisonResult:
    experience = FORMAT_EXPERIENCE[event_format]
    return FormatComparisonResult(
        format=event_format,
        estimated_carbon_kg=carbon_kg,
        carbon_per_attendee_kg=carbon_kg / attendees,
        cost_index=experience.cost_index,
        engagement_score=experience.engagement,
        accessibility_score=experience.accessibility,
        networking_score=experience.networking,
        recommendation_reason=experience.reason,
    )


def compare_formats(
    attendees: int,
    avg_travel_distance_km: float,
    duration_days: float,
    in_person_ratio: float = 0.5,
) -> list[FormatComparisonResult]:
    """Estimate the same event run in-person, virtually and as a hybrid.

    Virtual drops travel, hotel, catering and venue energy entirely; the
    hybrid sends ``in_person_ratio`` of attendees to a venue running at
    70% of the in-person energy and streams the rest.
    """
    require_positive(attendees, "attendees")
    require_non_negative(avg_travel_distance_km, "avg_travel_distance_km")
    require_non_negative(duration_days, "duration_days")
    if not (0 <= in_person_ratio <= 1):
        raise InvalidConfiguration(
            f"in_person_ratio must be between 0 and 1, got {in_person_ratio}",
            field="in_person_ratio",
        )

    venue_kg = calculate_venue_emissions(
        REFERENCE_VENUE, duration_days * REFERENCE_HOURS_PER_DAY
    )
    in_person_total = (
        _on_site_emissions(attendees, avg_travel_distance_km, duration_days) + venue_kg
    )
    virtual_total = _streaming_emissions(attendees, duration_days)

    on_site = attendees * in_person_ratio
    remote = attendees * (1 - in_person_ratio)
    hybrid_total = (
        _on_site_emissions(on_site, avg_travel_distance_km, duration_days)
        + venue_kg * HYBRID_VENUE_FACTOR
        + _streaming_emissions(remote, duration_days)
    )

    return [
        _result(EventFormat.IN_PERSON, in_person_total, attendees),
        _result(EventFormat.VIRTUAL, virtual_total, attendees),
        _result(EventFormat.HYBRID, hybrid_total, attendees),
    ]


def composite_score(result: FormatComparisonResult) -> float:
    """(100 - kg per attendee / 20) + (100 - cost index x 100) + engagement + accessibility"""
    return (
        (100 - result.carbon_per_attendee_kg / 20)
        + (100 - result.cost_index * 100)
        + result.engagement_score
        + result.accessibility_score
    )


def recommend_format(results: Sequence[FormatComparisonResult]) -> FormatComparisonResult:
    """Highest composite score wins; ties go to the earlier entry."""
    if not results:
        raise InvalidConfiguration("No formats to compare", field="formats")
    best = results[0]
    best_score = composite_score(best)
    for candidate in results[1:]:
        score = composite_score(candidate)
        if score > best_score:
            best, best_score = candidate, score
    return best
