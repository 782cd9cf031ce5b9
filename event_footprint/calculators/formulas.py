"""Footprint formulas, one per configuration domain.

Each function is a pure calculation with no side effects and returns
kg CO2e (``calculate_materials_waste`` returns kg of waste). Enum fields
are read through ``lookup`` so an unknown value is rejected instead of
silently contributing zero.
"""

from __future__ import annotations

from event_footprint.calculators.registry import register_calculator
from event_footprint.factors.emissions import (
    ACCOMMODATION_FACTOR,
    DECORATION_MULTIPLIERS,
    DEVICE_EMISSION_FACTOR,
    ENERGY_EMISSION_FACTORS,
    EXHIBITOR_WASTE_PER_ATTENDEE,
    GREEN_BUILDING_REDUCTION,
    INTERACTIVE_FEATURES_SURCHARGE,
    LOCAL_SOURCING_CEILING,
    MATERIAL_WASTE_FACTORS,
    MEAL_EMISSION_FACTORS,
    ORGANIC_CEILING,
    PLATFORM_MULTIPLIERS,
    RECORDING_STORAGE_SURCHARGE,
    SHUTTLE_TRAVEL_FACTOR,
    STREAMING_EMISSION_FACTOR,
    SWAG_BAG_WASTE_PER_ATTENDEE,
    TRAVEL_EMISSION_FACTORS,
    VENUE_ENERGY_INTENSITY,
    WASTE_MANAGEMENT_REDUCTIONS,
    WASTE_TO_CO2E,
    WATER_CONSERVATION_REDUCTION,
)
from event_footprint.factors.lookup import lookup
from event_footprint.models.enums import (
    DecorationLevel,
    EnergySource,
    ImpactCategory,
    MaterialLevel,
    MealType,
    PlatformType,
    TravelMode,
    VenueType,
    WasteManagement,
)
from event_footprint.models.errors import (
    DistributionError,
    InvalidConfiguration,
    require_non_negative,
    require_positive,
)
from event_footprint.models.profiles import (
    AttendeeCohort,
    AttendeeTravelProfile,
    CateringProfile,
    MaterialsProfile,
    VenueProfile,
    VirtualEventProfile,
)


def _require_percent(value: float, field: str) -> float:
    if not (0 <= value <= 100):
        raise InvalidConfiguration(f"{field} must be 0-100, got {value}", field=field)
    return value


@register_calculator(
    calculator_id="venue_energy",
    label="Venue Energy",
    description=(
        "Venue electricity emissions. Formula: floor_area * energy_intensity "
        "* duration_hours * energy_factor, then x0.75 for a green building "
        "certification and x0.95 for a water conservation programme."
    ),
    category=ImpactCategory.VENUE,
    required_inputs={"venue": "venue", "duration_hours": "duration_hours"},
)
def calculate_venue_emissions(venue: VenueProfile, duration_hours: float) -> float:
    """Venue = area x intensity[type] x hours x factor[source] x reductions"""
    require_non_negative(duration_hours, "duration_hours")
    area = require_non_negative(venue.effective_floor_area_m2, "venue.floor_area_m2")
    intensity = lookup(VENUE_ENERGY_INTENSITY, VenueType, venue.venue_type, "venue.venue_type")
    factor = lookup(
        ENERGY_EMISSION_FACTORS, EnergySource, venue.energy_source, "venue.energy_source"
    )

    emissions = area * intensity * duration_hours * factor
    if venue.has_green_building_certification:
        emissions *= GREEN_BUILDING_REDUCTION
    if venue.has_water_conservation:
        emissions *= WATER_CONSERVATION_REDUCTION
    return emissions


def check_distribution(travel: AttendeeTravelProfile, tolerance_percent: float = 1.0) -> None:
    """Reject cohort shares that do not sum to 100 within ``tolerance_percent``."""
    if not travel.distribution_is_valid(tolerance_percent):
        raise DistributionError(
            f"Attendee cohort percentages must sum to 100 (+/-{tolerance_percent}), "
            f"got {travel.percentage_total:g}",
            field="travel.cohorts",
        )


def cohort_travel_emissions(cohort: AttendeeCohort, in_person_attendees: float) -> float:
    """Round-trip emissions for one cohort, before any shuttle adjustment."""
    require_non_negative(cohort.avg_distance_km, "travel.cohorts.avg_distance_km")
    _require_percent(cohort.percentage, "travel.cohorts.percentage")
    factor = lookup(
        TRAVEL_EMISSION_FACTORS, TravelMode, cohort.travel_mode, "travel.cohorts.travel_mode"
    )
    attendees_in_group = in_person_attendees * (cohort.percentage / 100)
    return attendees_in_group * cohort.avg_distance_km * 2 * factor


def calculate_accommodation_emissions(travel: AttendeeTravelProfile) -> float:
    require_non_negative(travel.accommodation_nights, "travel.accommodation_nights")
    return travel.in_person_attendees * travel.accommodation_nights * ACCOMMODATION_FACTOR


@register_calculator(
    calculator_id="attendee_travel",
    label="Attendee Travel & Accommodation",
    description=(
        "Round-trip travel per regional cohort plus hotel nights. Formula: "
        "sum(in_person * share * 2 * distance * mode_factor) [x0.6 with shuttles] "
        "+ in_person * nights * 21.2."
    ),
    category=ImpactCategory.TRANSPORT,
    required_inputs={"travel": "travel"},
    options=("tolerance_percent",),
)
def calculate_travel_emissions(
    travel: AttendeeTravelProfile,
    tolerance_percent: float = 1.0,
) -> float:
    """Travel = sum(cohort round trips) + in-person x nights x 21.2"""
    require_positive(travel.total_attendees, "travel.total_attendees")
    _require_percent(travel.virtual_attendee_percent, "travel.virtual_attendee_percent")
    check_distribution(travel, tolerance_percent)

    in_person = travel.in_person_attendees
    travel_kg = sum(cohort_travel_emissions(c, in_person) for c in travel.cohorts)
    if travel.shuttle_service:
        travel_kg *= SHUTTLE_TRAVEL_FACTOR
    return travel_kg + calculate_accommodation_emissions(travel)


@register_calculator(
    calculator_id="catering",
    label="Food & Beverage",
    description=(
        "Meal emissions. Formula: guests * meals_per_day * days * meal_factor "
        "* (1 - local% * 0.20) * (1 - organic% * 0.10)."
    ),
    category=ImpactCategory.FOOD_BEVERAGE,
    required_inputs={"catering": "catering", "duration_days": "duration_days"},
)
def calculate_catering_emissions(catering: CateringProfile, duration_days: float) -> float:
    """Catering = total_meals x meal_factor x sourcing reductions"""
    require_positive(catering.guest_count, "catering.guest_count")
    require_non_negative(catering.meals_per_day, "catering.meals_per_day")
    require_non_negative(duration_days, "duration_days")
    local = _require_percent(catering.local_sourcing_percent, "catering.local_sourcing_percent")
    organic = _require_percent(catering.organic_percent, "catering.organic_percent")
    factor = lookup(MEAL_EMISSION_FACTORS, MealType, catering.meal_type, "catering.meal_type")

    total_meals = catering.guest_count * catering.meals_per_day * duration_days
    emissions = total_meals * factor
    emissions *= 1 - (local / 100) * LOCAL_SOURCING_CEILING
    emissions *= 1 - (organic / 100) * ORGANIC_CEILING
    return emissions


def calculate_materials_waste(materials: MaterialsProfile, attendees: int) -> float:
    """Waste mass (kg) left after the event's waste management."""
    require_positive(attendees, "catering.guest_count")
    per_attendee = lookup(
        MATERIAL_WASTE_FACTORS, MaterialLevel, materials.printed_materials,
        "materials.printed_materials",
    )
    decoration = lookup(
        DECORATION_MULTIPLIERS, DecorationLevel, materials.decoration_level,
        "materials.decoration_level",
    )
    reduction = lookup(
        WASTE_MANAGEMENT_REDUCTIONS, WasteManagement, materials.waste_management,
        "materials.waste_management",
    )

    waste_kg = attendees * per_attendee
    if materials.swag_bags:
        waste_kg += attendees * SWAG_BAG_WASTE_PER_ATTENDEE
    if materials.exhibitor_materials:
        waste_kg += attendees * EXHIBITOR_WASTE_PER_ATTENDEE
    waste_kg *= decoration
    return waste_kg * (1 - reduction)


@register_calculator(
    calculator_id="materials",
    label="Materials & Waste",
    description=(
        "Printed materials, swag, exhibitor and decoration waste converted to "
        "CO2e. Formula: (attendees * tier_factor + swag + exhibitor) "
        "* decoration * (1 - waste_reduction) * 2.5."
    ),
    category=ImpactCategory.MATERIALS,
    required_inputs={"materials": "materials", "attendees": "catering.guest_count"},
)
def calculate_materials_emissions(materials: MaterialsProfile, attendees: int) -> float:
    """Materials = waste_kg x 2.5 kg CO2e/kg"""
    return calculate_materials_waste(materials, attendees) * WASTE_TO_CO2E


@register_calculator(
    calculator_id="digital_streaming",
    label="Streaming & Devices",
    description=(
        "Virtual attendance emissions. Formula: attendees * streaming_hours "
        "* (0.036 + 0.015) * platform, x1.10 with recording storage and "
        "x1.15 with interactive features."
    ),
    category=ImpactCategory.VENUE,
    required_inputs={"virtual": "virtual", "attendees": "travel.total_attendees"},
)
def calculate_digital_emissions(virtual: VirtualEventProfile, attendees: int) -> float:
    """Digital = attendees x hours x (streaming + device) x platform x surcharges"""
    require_positive(attendees, "travel.total_attendees")
    require_non_negative(virtual.streaming_hours, "virtual.streaming_hours")
    platform = lookup(
        PLATFORM_MULTIPLIERS, PlatformType, virtual.platform_type, "virtual.platform_type"
    )

    emissions = (
        attendees
        * virtual.streaming_hours
        * (STREAMING_EMISSION_FACTOR + DEVICE_EMISSION_FACTOR)
        * platform
    )
    if virtual.recording_storage:
        emissions *= RECORDING_STORAGE_SURCHARGE
    if virtual.interactive_features:
        emissions *= INTERACTIVE_FEATURES_SURCHARGE
    return emissions
