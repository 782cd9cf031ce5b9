"""Shared test fixtures for the event footprint test suite."""

import pytest

from event_footprint.config.settings import Settings
from event_footprint.models.enums import (
    AttendeeRegion,
    EnergySource,
    EventFormat,
    EventType,
    MealType,
    Region,
    TravelMode,
    VenueType,
)
from event_footprint.models.profiles import (
    AttendeeCohort,
    AttendeeTravelProfile,
    CateringProfile,
    CostInputs,
    EventConfiguration,
    MaterialsProfile,
    VenueProfile,
)


def make_config(**overrides) -> EventConfiguration:
    """Helper to build an EventConfiguration with minimal boilerplate."""
    fields = {
        "event_type": EventType.CONFERENCE,
        "event_format": EventFormat.IN_PERSON,
        "duration_days": 1,
        "venue": VenueProfile(floor_area_m2=500),
        "catering": CateringProfile(guest_count=100),
        "travel": AttendeeTravelProfile.single_mode(100, 50, TravelMode.CAR),
        "materials": MaterialsProfile(),
    }
    fields.update(overrides)
    return EventConfiguration(**fields)


@pytest.fixture
def make_event():
    """Factory fixture: ``make_event(catering=...)`` overrides any field."""
    return make_config


@pytest.fixture
def reference_venue() -> VenueProfile:
    """500 m2 grid-powered convention centre with no certifications."""
    return VenueProfile(
        venue_type=VenueType.CONVENTION_CENTER,
        floor_area_m2=500,
        energy_source=EnergySource.GRID_STANDARD,
    )


@pytest.fixture
def vegan_catering() -> CateringProfile:
    return CateringProfile(guest_count=100, meal_type=MealType.VEGAN, meals_per_day=2)


@pytest.fixture
def mixed_travel() -> AttendeeTravelProfile:
    """200 attendees from four regions, two hotel nights."""
    return AttendeeTravelProfile(
        total_attendees=200,
        cohorts=(
            AttendeeCohort(
                region=AttendeeRegion.LOCAL, percentage=40,
                avg_distance_km=20, travel_mode=TravelMode.LOCAL,
            ),
            AttendeeCohort(
                region=AttendeeRegion.DOMESTIC, percentage=30,
                avg_distance_km=400, travel_mode=TravelMode.TRAIN,
            ),
            AttendeeCohort(
                region=AttendeeRegion.CONTINENTAL, percentage=20,
                avg_distance_km=1500, travel_mode=TravelMode.AIR_MEDIUM,
            ),
            AttendeeCohort(
                region=AttendeeRegion.INTERNATIONAL, percentage=10,
                avg_distance_km=8000, travel_mode=TravelMode.AIR_LONG,
            ),
        ),
        accommodation_nights=2,
    )


@pytest.fixture
def basic_config() -> EventConfiguration:
    """One-day, 100-person conference, everyone driving 50 km."""
    return make_config()


@pytest.fixture
def green_config() -> EventConfiguration:
    """The same conference with every sustainable option taken."""
    return make_config(
        venue=VenueProfile(
            venue_type=VenueType.OUTDOOR,
            floor_area_m2=500,
            energy_source=EnergySource.CARBON_NEUTRAL,
            has_green_building_certification=True,
            has_waste_program=True,
            has_water_conservation=True,
        ),
        catering=CateringProfile(
            guest_count=100, meal_type=MealType.VEGAN, local_sourcing_percent=100,
        ),
        travel=AttendeeTravelProfile.single_mode(
            100, 50, TravelMode.BUS, shuttle_service=True
        ),
        materials=MaterialsProfile(digital_alternatives=True),
    )


@pytest.fixture
def basic_costs() -> CostInputs:
    return CostInputs(
        venue_cost=10_000,
        energy_cost=2_000,
        catering_cost=6_000,
        transport_cost=3_000,
        materials_cost=2_500,
        waste_disposal_cost=600,
        region=Region.US,
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)
