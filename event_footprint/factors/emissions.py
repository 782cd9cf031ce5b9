"""Emission and resource factors for event footprint calculations.

Sources: GHG Protocol / DEFRA conversion factors for travel and energy,
WRAP waste factors, and event-industry averages for catering. All values
are kg CO2e unless the name says otherwise.
"""

from __future__ import annotations

from typing import NamedTuple

from event_footprint.models.enums import (
    AttendeeRegion,
    DecorationLevel,
    EnergySource,
    ImpactCategory,
    MaterialLevel,
    MealType,
    OffsetTier,
    PlatformType,
    TransitAccess,
    TravelMode,
    VenueSize,
    VenueType,
    WasteManagement,
)

# -- Venue ---------------------------------------------------------------

# kg CO2e per kWh
ENERGY_EMISSION_FACTORS: dict[EnergySource, float] = {
    EnergySource.GRID_STANDARD: 0.42,
    EnergySource.GRID_RENEWABLE: 0.10,
    EnergySource.ONSITE_SOLAR: 0.05,
    EnergySource.ONSITE_WIND: 0.03,
    EnergySource.MIXED_RENEWABLE: 0.15,
    EnergySource.CARBON_NEUTRAL: 0.01,
}
WORST_CASE_ENERGY_FACTOR = ENERGY_EMISSION_FACTORS[EnergySource.GRID_STANDARD]

# kWh per m2 per hour
VENUE_ENERGY_INTENSITY: dict[VenueType, float] = {
    VenueType.CONVENTION_CENTER: 0.08,
    VenueType.HOTEL: 0.12,
    VenueType.CORPORATE_OFFICE: 0.06,
    VenueType.OUTDOOR: 0.02,
    VenueType.HYBRID_SPACE: 0.05,
    VenueType.UNIQUE_VENUE: 0.07,
}

# m2, used when no explicit floor area is given
VENUE_SIZE_FLOOR_AREA: dict[VenueSize, float] = {
    VenueSize.SMALL: 200.0,
    VenueSize.MEDIUM: 500.0,
    VenueSize.LARGE: 1500.0,
    VenueSize.EXTRA_LARGE: 4000.0,
}

# Multiplicative, applied in this order
GREEN_BUILDING_REDUCTION = 0.75
WATER_CONSERVATION_REDUCTION = 0.95

# 0-100 transit score per access tier
TRANSIT_SCORES: dict[TransitAccess, int] = {
    TransitAccess.EXCELLENT: 100,
    TransitAccess.GOOD: 75,
    TransitAccess.LIMITED: 40,
    TransitAccess.NONE: 0,
}

# -- Travel --------------------------------------------------------------

# kg CO2e per passenger-km
TRAVEL_EMISSION_FACTORS: dict[TravelMode, float] = {
    TravelMode.AIR_SHORT: 0.255,  # < 500 km
    TravelMode.AIR_MEDIUM: 0.195,  # 500-1500 km
    TravelMode.AIR_LONG: 0.150,  # > 1500 km
    TravelMode.TRAIN: 0.041,
    TravelMode.CAR: 0.171,  # single occupancy
    TravelMode.BUS: 0.089,
    TravelMode.LOCAL: 0.020,
}

# kg CO2e per hotel night
ACCOMMODATION_FACTOR = 21.2

# Shared shuttles from transit hubs replace individual trips
SHUTTLE_TRAVEL_FACTOR = 0.6


class DistanceBand(NamedTuple):
    min_km: float
    max_km: float
    typical_km: float


REGIONAL_DISTANCES: dict[AttendeeRegion, DistanceBand] = {
    AttendeeRegion.LOCAL: DistanceBand(0, 50, 25),
    AttendeeRegion.DOMESTIC: DistanceBand(50, 800, 400),
    AttendeeRegion.CONTINENTAL: DistanceBand(800, 3000, 1500),
    AttendeeRegion.INTERNATIONAL: DistanceBand(3000, 15000, 8000),
}

# -- Catering ------------------------------------------------------------

# kg CO2e per meal
MEAL_EMISSION_FACTORS: dict[MealType, float] = {
    MealType.FULL_MEAT: 7.2,
    MealType.MIXED_MEAT_VEG: 5.5,
    MealType.PESCATARIAN: 4.0,
    MealType.VEGETARIAN: 2.5,
    MealType.VEGAN: 1.5,
    MealType.LOCAL_ORGANIC: 2.0,
}

# Reduction at 100 % adoption, scaled linearly below that
LOCAL_SOURCING_CEILING = 0.20
ORGANIC_CEILING = 0.10

# -- Materials -----------------------------------------------------------

# kg waste per attendee
MATERIAL_WASTE_FACTORS: dict[MaterialLevel, float] = {
    MaterialLevel.STANDARD: 3.5,
    MaterialLevel.REDUCED: 2.0,
    MaterialLevel.DIGITAL_FIRST: 0.8,
    MaterialLevel.ZERO_WASTE: 0.2,
}
SWAG_BAG_WASTE_PER_ATTENDEE = 1.5
EXHIBITOR_WASTE_PER_ATTENDEE = 2.0

DECORATION_MULTIPLIERS: dict[DecorationLevel, float] = {
    DecorationLevel.MINIMAL: 0.5,
    DecorationLevel.MODERATE: 1.0,
    DecorationLevel.EXTENSIVE: 2.0,
}

WASTE_MANAGEMENT_REDUCTIONS: dict[WasteManagement, float] = {
    WasteManagement.NONE: 0.0,
    WasteManagement.RECYCLING: 0.3,
    WasteManagement.COMPOSTING: 0.5,
    WasteManagement.ZERO_WASTE: 0.8,
}

# kg CO2e per kg of event waste
WASTE_TO_CO2E = 2.5

# -- Digital -------------------------------------------------------------

STREAMING_EMISSION_FACTOR = 0.036  # per viewer-hour
DEVICE_EMISSION_FACTOR = 0.015  # per attendee-hour

PLATFORM_MULTIPLIERS: dict[PlatformType, float] = {
    PlatformType.BASIC: 0.8,
    PlatformType.STANDARD: 1.0,
    PlatformType.PREMIUM: 1.3,
    PlatformType.ENTERPRISE: 1.5,
}
RECORDING_STORAGE_SURCHARGE = 1.10
INTERACTIVE_FEATURES_SURCHARGE = 1.15

# -- Water & waste (linear, per attendee per day) ------------------------

WATER_LITERS_PER_ATTENDEE_DAY: dict[ImpactCategory, float] = {
    ImpactCategory.VENUE: 20.0,
    ImpactCategory.FOOD_BEVERAGE: 50.0,
    ImpactCategory.TRANSPORT: 0.0,
    ImpactCategory.MATERIALS: 5.0,
}

# Materials waste comes from the materials calculator instead
WASTE_KG_PER_ATTENDEE_DAY: dict[ImpactCategory, float] = {
    ImpactCategory.VENUE: 0.1,
    ImpactCategory.FOOD_BEVERAGE: 0.5,
    ImpactCategory.TRANSPORT: 0.0,
}

# -- Offsets -------------------------------------------------------------

# Currency per tonne CO2e
OFFSET_PRICES_PER_TONNE: dict[OffsetTier, float] = {
    OffsetTier.VOLUNTARY: 15.0,
    OffsetTier.GOLD_STANDARD: 35.0,
    OffsetTier.VERIFIED: 25.0,
    OffsetTier.PREMIUM: 50.0,
}
