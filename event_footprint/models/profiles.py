"""Pydantic models for event configuration inputs.

Every model is frozen; a calculation never mutates its inputs.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from event_footprint.factors.emissions import REGIONAL_DISTANCES, VENUE_SIZE_FLOOR_AREA
from event_footprint.models.enums import (
    AdoptionTier,
    AttendeeRegion,
    BeverageOption,
    DecorationLevel,
    EnergySource,
    EventFormat,
    EventType,
    MaterialLevel,
    MealType,
    PlatformType,
    Region,
    TransitAccess,
    TravelMode,
    VenueSize,
    VenueType,
    WasteManagement,
)


class _Profile(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class VenueProfile(_Profile):
    """Venue description used for venue energy emissions and the green score."""

    venue_type: VenueType = VenueType.CONVENTION_CENTER
    size_class: VenueSize = VenueSize.MEDIUM
    floor_area_m2: Optional[float] = Field(
        default=None, ge=0, description="Overrides the size-class floor area"
    )
    energy_source: EnergySource = EnergySource.GRID_STANDARD
    has_green_building_certification: bool = False
    has_waste_program: bool = False
    has_water_conservation: bool = False
    distance_from_city_center_km: float = Field(default=5.0, ge=0)
    transit_access: TransitAccess = TransitAccess.GOOD

    @property
    def effective_floor_area_m2(self) -> float:
        if self.floor_area_m2 is not None:
            return self.floor_area_m2
        return VENUE_SIZE_FLOOR_AREA[self.size_class]


class CateringProfile(_Profile):
    guest_count: int = Field(ge=0)
    meal_type: MealType = MealType.MIXED_MEAT_VEG
    beverage_option: BeverageOption = BeverageOption.STANDARD
    meals_per_day: int = Field(default=2, ge=0)
    local_sourcing_percent: float = Field(default=0.0, ge=0, le=100)
    organic_percent: float = Field(default=0.0, ge=0, le=100)


class AttendeeCohort(_Profile):
    """One regional slice of the attendee base."""

    region: AttendeeRegion
    percentage: float = Field(ge=0, le=100)
    avg_distance_km: float = Field(ge=0, description="One-way distance")
    travel_mode: TravelMode


class AttendeeTravelProfile(_Profile):
    total_attendees: int = Field(ge=0)
    cohorts: tuple[AttendeeCohort, ...] = Field(min_length=1)
    virtual_attendee_percent: float = Field(default=0.0, ge=0, le=100)
    accommodation_nights: float = Field(default=0.0, ge=0)
    shuttle_service: bool = False

    @classmethod
    def single_mode(
        cls,
        attendees: int,
        avg_distance_km: float,
        travel_mode: TravelMode,
        shuttle_service: bool = False,
        accommodation_nights: float = 0.0,
    ) -> AttendeeTravelProfile:
        """Everyone travels the same average distance by the same mode."""
        cohort = AttendeeCohort(
            region=region_for_distance(avg_distance_km),
            percentage=100.0,
            avg_distance_km=avg_distance_km,
            travel_mode=travel_mode,
        )
        return cls(
            total_attendees=attendees,
            cohorts=(cohort,),
            shuttle_service=shuttle_service,
            accommodation_nights=accommodation_nights,
        )

    @property
    def in_person_attendees(self) -> float:
        return self.total_attendees * (1 - self.virtual_attendee_percent / 100)

    @property
    def percentage_total(self) -> float:
        return sum(c.percentage for c in self.cohorts)

    @property
    def average_distance_km(self) -> float:
        """Share-weighted one-way distance across cohorts."""
        total = self.percentage_total
        if total == 0:
            return 0.0
        return sum(c.percentage * c.avg_distance_km for c in self.cohorts) / total

    def distribution_is_valid(self, tolerance_percent: float = 1.0) -> bool:
        return abs(self.percentage_total - 100) < tolerance_percent


class MaterialsProfile(_Profile):
    printed_materials: MaterialLevel = MaterialLevel.STANDARD
    swag_bags: bool = False
    exhibitor_materials: bool = False
    decoration_level: DecorationLevel = DecorationLevel.MODERATE
    waste_management: WasteManagement = WasteManagement.RECYCLING
    digital_alternatives: bool = False


class VirtualEventProfile(_Profile):
    streaming_hours: float = Field(ge=0)
    platform_type: PlatformType = PlatformType.STANDARD
    recording_storage: bool = False
    interactive_features: bool = False


class EventConfiguration(_Profile):
    """Everything the footprint calculators need for one event."""

    event_type: EventType = EventType.CONFERENCE
    event_format: EventFormat = EventFormat.IN_PERSON
    duration_days: int = Field(default=1, ge=0)
    hours_per_day: float = Field(default=8.0, ge=0, le=24)
    venue: VenueProfile = Field(default_factory=VenueProfile)
    catering: CateringProfile
    travel: AttendeeTravelProfile
    materials: MaterialsProfile = Field(default_factory=MaterialsProfile)
    virtual: Optional[VirtualEventProfile] = None

    @property
    def duration_hours(self) -> float:
        return self.duration_days * self.hours_per_day

    @property
    def attendee_count(self) -> int:
        return self.travel.total_attendees


class EventProfile(_Profile):
    """Early-stage event description for the pre-assessment estimate."""

    event_type: EventType
    event_format: EventFormat
    expected_attendees: int = Field(ge=0)
    duration_days: int = Field(default=1, ge=0)
    hours_per_day: float = Field(default=8.0, ge=0, le=24)
    industry: str = "other"
    is_international: bool = False


class CostInputs(_Profile):
    """Per-category event spend in the region's currency."""

    venue_cost: float = Field(ge=0)
    energy_cost: float = Field(ge=0)
    catering_cost: float = Field(ge=0)
    transport_cost: float = Field(ge=0)
    materials_cost: float = Field(ge=0)
    waste_disposal_cost: float = Field(ge=0)
    region: Region = Region.US
    attendee_count: Optional[int] = Field(default=None, ge=0)
    duration_hours: Optional[float] = Field(default=None, ge=0)
    adoption_tier: AdoptionTier = AdoptionTier.MODERATE

    @property
    def traditional_total(self) -> float:
        return (
            self.venue_cost
            + self.energy_cost
            + self.catering_cost
            + self.transport_cost
            + self.materials_cost
            + self.waste_disposal_cost
        )


def region_for_distance(distance_km: float) -> AttendeeRegion:
    """Classify a one-way distance into the regional cohort it falls in."""
    for region in AttendeeRegion:
        if distance_km < REGIONAL_DISTANCES[region].max_km:
            return region
    return AttendeeRegion.INTERNATIONAL
