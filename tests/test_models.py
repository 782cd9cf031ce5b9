"""Tests for input models, errors and factor tables."""

import pytest
from pydantic import ValidationError

from event_footprint.factors import benchmarks, costs, emissions
from event_footprint.factors.benchmarks import BenchmarkRange
from event_footprint.factors.lookup import coerce_enum, lookup
from event_footprint.models.enums import (
    AttendeeRegion,
    EnergySource,
    EventType,
    MealType,
    TravelMode,
    VenueSize,
)
from event_footprint.models.errors import (
    DistributionError,
    EstimationError,
    InvalidConfiguration,
    ValidationIssue,
    parse_model,
)
from event_footprint.models.profiles import (
    AttendeeTravelProfile,
    CateringProfile,
    EventConfiguration,
    VenueProfile,
    region_for_distance,
)


class TestProfiles:
    def test_frozen(self):
        venue = VenueProfile()
        with pytest.raises(ValidationError):
            venue.floor_area_m2 = 10

    def test_extra_fields_forbidden(self):
        with pytest.raises(ValidationError):
            VenueProfile(parking_spaces=200)

    def test_negative_floor_area_rejected(self):
        with pytest.raises(ValidationError):
            VenueProfile(floor_area_m2=-1)

    def test_size_class_default_area(self):
        assert VenueProfile(size_class=VenueSize.EXTRA_LARGE).effective_floor_area_m2 == 4000
        assert VenueProfile(floor_area_m2=750).effective_floor_area_m2 == 750

    def test_percentages_bounded(self):
        with pytest.raises(ValidationError):
            CateringProfile(guest_count=10, local_sourcing_percent=120)

    def test_single_mode(self):
        travel = AttendeeTravelProfile.single_mode(120, 600, TravelMode.TRAIN)
        assert len(travel.cohorts) == 1
        assert travel.cohorts[0].percentage == 100
        assert travel.cohorts[0].region is AttendeeRegion.DOMESTIC
        assert travel.distribution_is_valid()

    def test_in_person_attendees(self, mixed_travel):
        hybrid = mixed_travel.model_copy(update={"virtual_attendee_percent": 25})
        assert hybrid.in_person_attendees == 150

    def test_average_distance(self, mixed_travel):
        expected = (40 * 20 + 30 * 400 + 20 * 1500 + 10 * 8000) / 100
        assert mixed_travel.average_distance_km == pytest.approx(expected)

    def test_distribution_tolerance_is_exclusive(self, mixed_travel):
        assert mixed_travel.distribution_is_valid(1.0)
        off_by_one = mixed_travel.model_copy(
            update={"cohorts": mixed_travel.cohorts[:-1] + (
                mixed_travel.cohorts[-1].model_copy(update={"percentage": 11}),
            )}
        )
        assert off_by_one.percentage_total == 101
        assert not off_by_one.distribution_is_valid(1.0)

    def test_configuration_properties(self, basic_config):
        assert basic_config.duration_hours == 8
        assert basic_config.attendee_count == 100

    @pytest.mark.parametrize(
        "distance, region",
        [
            (10, AttendeeRegion.LOCAL),
            (50, AttendeeRegion.DOMESTIC),
            (2000, AttendeeRegion.CONTINENTAL),
            (9000, AttendeeRegion.INTERNATIONAL),
            (20000, AttendeeRegion.INTERNATIONAL),
        ],
    )
    def test_region_for_distance(self, distance, region):
        assert region_for_distance(distance) is region


class TestParseModel:
    def test_valid_payload(self):
        config = parse_model(
            EventConfiguration,
            {
                "event_type": "workshop",
                "catering": {"guest_count": 20, "meal_type": "vegetarian"},
                "travel": {
                    "total_attendees": 20,
                    "cohorts": [
                        {"region": "local", "percentage": 100,
                         "avg_distance_km": 15, "travel_mode": "bus"},
                    ],
                },
            },
        )
        assert config.event_type is EventType.WORKSHOP
        assert config.catering.meal_type is MealType.VEGETARIAN

    def test_unknown_enum_becomes_invalid_configuration(self):
        with pytest.raises(InvalidConfiguration) as exc_info:
            parse_model(VenueProfile, {"energy_source": "coal"})
        assert exc_info.value.field == "energy_source"
        assert "Invalid VenueProfile" in exc_info.value.message

    def test_nested_field_path(self):
        with pytest.raises(InvalidConfiguration) as exc_info:
            parse_model(
                EventConfiguration,
                {
                    "catering": {"guest_count": -5},
                    "travel": {
                        "total_attendees": 5,
                        "cohorts": [
                            {"region": "local", "percentage": 100,
                             "avg_distance_km": 1, "travel_mode": "local"},
                        ],
                    },
                },
            )
        assert exc_info.value.field == "catering.guest_count"


class TestErrors:
    def test_hierarchy(self):
        assert issubclass(InvalidConfiguration, EstimationError)
        assert issubclass(DistributionError, EstimationError)
        assert issubclass(EstimationError, ValueError)

    def test_to_issue(self):
        issue = DistributionError("shares off", field="travel.cohorts").to_issue()
        assert issue == ValidationIssue(
            code="distribution_error", field="travel.cohorts", message="shares off"
        )


class TestLookup:
    def test_accepts_string_values(self):
        assert lookup(emissions.ENERGY_EMISSION_FACTORS, EnergySource, "onsite-wind", "e") == 0.03

    def test_unknown_value_raises(self):
        with pytest.raises(InvalidConfiguration, match="Expected one of"):
            coerce_enum(MealType, "keto", "meal_type")

    def test_missing_table_entry_raises(self):
        partial = {EnergySource.GRID_STANDARD: 0.42}
        with pytest.raises(InvalidConfiguration, match="No factor defined"):
            lookup(partial, EnergySource, EnergySource.ONSITE_SOLAR, "energy_source")


class TestFactorTables:
    @pytest.mark.parametrize(
        "table",
        [
            emissions.ENERGY_EMISSION_FACTORS,
            emissions.VENUE_ENERGY_INTENSITY,
            emissions.VENUE_SIZE_FLOOR_AREA,
            emissions.TRANSIT_SCORES,
            emissions.TRAVEL_EMISSION_FACTORS,
            emissions.REGIONAL_DISTANCES,
            emissions.MEAL_EMISSION_FACTORS,
            emissions.MATERIAL_WASTE_FACTORS,
            emissions.DECORATION_MULTIPLIERS,
            emissions.WASTE_MANAGEMENT_REDUCTIONS,
            emissions.PLATFORM_MULTIPLIERS,
            emissions.OFFSET_PRICES_PER_TONNE,
            benchmarks.EVENT_BENCHMARKS,
            benchmarks.FORMAT_MULTIPLIERS,
            costs.CARBON_PRICES,
            costs.WATER_COSTS,
            costs.WASTE_COSTS,
            costs.ADOPTION_MULTIPLIERS,
            costs.REDUCTION_CEILINGS,
        ],
    )
    def test_tables_cover_every_member(self, table):
        enum_cls = type(next(iter(table)))
        assert set(table) == set(enum_cls)

    def test_savings_potentials_are_fractions(self):
        for potential in (
            costs.VENUE_SAVINGS,
            costs.ENERGY_SAVINGS,
            costs.CATERING_SAVINGS,
            costs.TRANSPORT_SAVINGS,
            costs.MATERIALS_SAVINGS,
            costs.WASTE_SAVINGS,
        ):
            assert all(0 < value < 1 for value in potential)
        assert costs.ENERGY_SAVINGS.led_lighting == 0.35
        assert costs.MATERIALS_SAVINGS._fields == ("digital", "minimal_print", "no_swag")

    def test_ceilings_below_one(self):
        assert all(0 < c < 1 for c in costs.REDUCTION_CEILINGS.values())

    def test_benchmark_ordering_validated(self):
        with pytest.raises(ValidationError, match="must be ordered"):
            BenchmarkRange(best=500, average=400, worst=900)

    def test_benchmark_scaled(self):
        scaled = benchmarks.EVENT_BENCHMARKS[EventType.WORKSHOP].scaled(0.5)
        assert (scaled.best, scaled.average, scaled.worst) == (50, 250, 600)
