"""Traditional vs sustainable cost model and financial metrics.

Each cost category gets a reduction fraction built from the sustainability
signals in the event configuration, scaled by the adoption tier and by how
much room the spend leaves for savings, then clamped to the category's
ceiling. Every ceiling is below 1, so no sustainable cost ever exceeds
its traditional counterpart.
"""

from __future__ import annotations

import logging

from event_footprint.engine.result import CostCategoryResult, CostSavingsResult, FootprintResult
from event_footprint.engine.scoring import clamp, round_half_up
from event_footprint.factors.costs import (
    ADOPTION_MULTIPLIERS,
    BRAND_VALUE_MULTIPLIER,
    CARBON_PRICES,
    CATERING_SAVINGS,
    DISCOUNT_RATE,
    ENERGY_SAVINGS,
    ENERGY_SPEND_HIGH,
    ENERGY_SPEND_MEDIUM,
    IMPLEMENTATION_COST_SHARE,
    MATERIALS_SAVINGS,
    NPV_HORIZON_YEARS,
    REDUCTION_CEILINGS,
    RISK_MITIGATION_MULTIPLIER,
    SOCIAL_COST_OF_CARBON,
    SPEND_BASELINES_PER_ATTENDEE,
    SPEND_SCALE_CAPS,
    TRANSPORT_DISTANCE_BASELINE_KM,
    TRANSPORT_DISTANCE_CAP,
    TRANSPORT_SAVINGS,
    VENUE_SAVINGS,
    WASTE_COSTS,
    WASTE_SAVINGS,
    WATER_COSTS,
)
from event_footprint.factors.lookup import coerce_enum, lookup
from event_footprint.models.enums import (
    AdoptionTier,
    BeverageOption,
    CostCategory,
    EnergySource,
    MaterialLevel,
    MealType,
    Region,
    VenueSize,
    VenueType,
)
from event_footprint.models.errors import require_non_negative, require_positive
from event_footprint.models.profiles import CostInputs, EventConfiguration

logger = logging.getLogger(__name__)

_LARGE_VENUES = (VenueSize.LARGE, VenueSize.EXTRA_LARGE)
_PLANT_FORWARD_MEALS = (MealType.VEGETARIAN, MealType.LOCAL_ORGANIC)
_MINIMAL_PRINT = (MaterialLevel.DIGITAL_FIRST, MaterialLevel.ZERO_WASTE)
_COMPOSTABLE_MEALS = (MealType.VEGAN, MealType.VEGETARIAN)


def _spend_scale(category: CostCategory, cost: float, attendees: int) -> float:
    """How much room a category's spend per head leaves for savings."""
    per_head = cost / attendees
    return min(
        per_head / SPEND_BASELINES_PER_ATTENDEE[category],
        SPEND_SCALE_CAPS[category],
    )


def _venue_reduction(config: EventConfiguration) -> float:
    potential = VENUE_SAVINGS
    reduction = potential.base
    if coerce_enum(EnergySource, config.venue.energy_source, "venue.energy_source").is_renewable:
        reduction += potential.renewable
    if config.venue.venue_type == VenueType.OUTDOOR:
        reduction += potential.outdoor
    return reduction


def _energy_reduction(config: EventConfiguration, costs: CostInputs, attendees: int) -> float:
    potential = ENERGY_SAVINGS
    per_head = costs.energy_cost / attendees
    if per_head > ENERGY_SPEND_HIGH:
        reduction = potential.led_lighting
    elif per_head > ENERGY_SPEND_MEDIUM:
        reduction = potential.led_lighting * 0.6
    else:
        reduction = potential.led_lighting * 0.3

    source = coerce_enum(EnergySource, config.venue.energy_source, "venue.energy_source")
    if source is EnergySource.ONSITE_SOLAR:
        reduction += potential.renewable * 0.8
    elif source.is_renewable:
        reduction += potential.renewable

    if config.venue.size_class in _LARGE_VENUES:
        reduction += potential.smart_hvac
    return reduction


def _catering_reduction(config: EventConfiguration, costs: CostInputs, attendees: int) -> float:
    potential = CATERING_SAVINGS
    catering = config.catering
    meal = coerce_enum(MealType, catering.meal_type, "catering.meal_type")

    reduction = 0.0
    if meal is MealType.VEGAN:
        reduction += potential.vegan
    elif meal in _PLANT_FORWARD_MEALS:
        reduction += potential.vegetarian
    reduction += potential.local_seasonal * catering.local_sourcing_percent / 100
    if catering.beverage_option == BeverageOption.MINIMAL:
        reduction += potential.portion_optimization * 0.5
    return reduction * _spend_scale(CostCategory.CATERING, costs.catering_cost, attendees)


def _transport_reduction(config: EventConfiguration) -> float:
    potential = TRANSPORT_SAVINGS
    travel = config.travel
    transit_share = sum(
        c.percentage for c in travel.cohorts if c.travel_mode.is_public_transit
    ) / 100

    reduction = potential.public_transit * transit_share
    if travel.shuttle_service:
        reduction += potential.shuttle
    distance_scale = min(
        travel.average_distance_km / TRANSPORT_DISTANCE_BASELINE_KM, TRANSPORT_DISTANCE_CAP
    )
    return reduction * distance_scale


def _materials_reduction(config: EventConfiguration, costs: CostInputs, attendees: int) -> float:
    potential = MATERIALS_SAVINGS
    materials = config.materials
    printed = coerce_enum(MaterialLevel, materials.printed_materials, "materials.printed_materials")

    reduction = 0.0
    if materials.digital_alternatives:
        reduction += potential.digital
    elif printed in _MINIMAL_PRINT:
        reduction += potential.minimal_print
    elif printed is MaterialLevel.REDUCED:
        reduction += potential.minimal_print * 0.5
    if not materials.swag_bags:
        reduction += potential.no_swag * 0.7
    return reduction * _spend_scale(CostCategory.MATERIALS, costs.materials_cost, attendees)


def _waste_reduction(config: EventConfiguration, costs: CostInputs, attendees: int) -> float:
    potential = WASTE_SAVINGS
    materials = config.materials

    reduction = potential.recycling * 0.5
    if materials.digital_alternatives and not materials.swag_bags:
        reduction += potential.zero_waste * 0.6
    if config.catering.meal_type in _COMPOSTABLE_MEALS:
        reduction += potential.composting * 0.4
    return reduction * _spend_scale(CostCategory.WASTE, costs.waste_disposal_cost, attendees)


def category_reductions(
    config: EventConfiguration,
    costs: CostInputs,
) -> dict[CostCategory, float]:
    """Clamped reduction fraction per cost category."""
    attendees = cost_attendee_count(config, costs)
    adoption = lookup(ADOPTION_MULTIPLIERS, AdoptionTier, costs.adoption_tier, "adoption_tier")
    raw = {
        CostCategory.VENUE: _venue_reduction(config),
        CostCategory.ENERGY: _energy_reduction(config, costs, attendees),
        CostCategory.CATERING: _catering_reduction(config, costs, attendees),
        CostCategory.TRANSPORT: _transport_reduction(config),
        CostCategory.MATERIALS: _materials_reduction(config, costs, attendees),
        CostCategory.WASTE: _waste_reduction(config, costs, attendees),
    }
    return {
        category: clamp(value * adoption, 0.0, REDUCTION_CEILINGS[category])
        for category, value in raw.items()
    }


def cost_attendee_count(config: EventConfiguration, costs: CostInputs) -> int:
    """Headcount for per-head spend; falls back to the configuration's."""
    attendees = costs.attendee_count
    if attendees is None:
        attendees = config.attendee_count
    return int(require_positive(attendees, "costs.attendee_count"))


def cost_duration_hours(config: EventConfiguration, costs: CostInputs) -> float:
    """Event hours for per-hour spend; falls back to the configuration's."""
    hours = costs.duration_hours
    if hours is None:
        hours = config.duration_hours
    return require_non_negative(hours, "costs.duration_hours")


def _category_costs(costs: CostInputs) -> dict[CostCategory, float]:
    values = {
        CostCategory.VENUE: costs.venue_cost,
        CostCategory.ENERGY: costs.energy_cost,
        CostCategory.CATERING: costs.catering_cost,
        CostCategory.TRANSPORT: costs.transport_cost,
        CostCategory.MATERIALS: costs.materials_cost,
        CostCategory.WASTE: costs.waste_disposal_cost,
    }
    for category, value in values.items():
        require_non_negative(value, f"costs.{category.value}")
    return values


def net_present_value(benefit: float, implementation_cost: float) -> float:
    """Implementation cost up front, ``benefit`` each year, discounted at 5%."""
    npv = -implementation_cost
    for year in range(1, NPV_HORIZON_YEARS + 1):
        npv += benefit / (1 + DISCOUNT_RATE) ** year
    return npv


def simplified_irr(benefit: float, implementation_cost: float) -> float:
    """((benefit / implementation) - 1) x 100.

    An approximation kept for consistency with published figures; it is
    not a discounted-cash-flow IRR.
    """
    if implementation_cost <= 0:
        return 0.0
    return (benefit / implementation_cost - 1) * 100


def payback_months(benefit: float, implementation_cost: float) -> int:
    monthly = benefit / 12
    if monthly <= 0:
        return 0
    return max(1, round_half_up(implementation_cost / monthly))


def calculate_cost_savings(
    config: EventConfiguration,
    footprint: FootprintResult,
    costs: CostInputs,
) -> CostSavingsResult:
    """Compare traditional spend with its sustainable equivalent."""
    region = coerce_enum(Region, costs.region, "costs.region")
    spend = _category_costs(costs)
    reductions = category_reductions(config, costs)

    categories = [
        CostCategoryResult(
            category=category,
            traditional=spend[category],
            sustainable=spend[category] * (1 - reductions[category]),
            savings=spend[category] * reductions[category],
            reduction=reductions[category],
        )
        for category in CostCategory
    ]
    traditional_total = sum(c.traditional for c in categories)
    sustainable_total = sum(c.sustainable for c in categories)
    total_savings = traditional_total - sustainable_total

    carbon_price = lookup(CARBON_PRICES, Region, region, "costs.region") + SOCIAL_COST_OF_CARBON
    carbon_value = footprint.carbon_kg * carbon_price
    water_value = footprint.water_liters * lookup(WATER_COSTS, Region, region, "costs.region")
    waste_value = footprint.waste_kg * lookup(WASTE_COSTS, Region, region, "costs.region")
    brand_value = traditional_total * BRAND_VALUE_MULTIPLIER * (footprint.green_score / 100)
    risk_value = traditional_total * RISK_MITIGATION_MULTIPLIER
    total_benefit = (
        total_savings + carbon_value + water_value + waste_value + brand_value + risk_value
    )

    implementation_cost = sustainable_total * IMPLEMENTATION_COST_SHARE
    attendee_hours = cost_attendee_count(config, costs) * cost_duration_hours(config, costs)
    roi = total_benefit / implementation_cost * 100 if implementation_cost > 0 else 0.0
    logger.debug(
        "Cost savings for %s: %.2f of %.2f, benefit %.2f",
        region.value, total_savings, traditional_total, total_benefit,
    )

    return CostSavingsResult(
        categories=categories,
        traditional_total=traditional_total,
        sustainable_total=sustainable_total,
        total_savings=total_savings,
        savings_percent=total_savings / traditional_total * 100 if traditional_total > 0 else 0.0,
        carbon_value=carbon_value,
        water_value=water_value,
        waste_value=waste_value,
        brand_value=brand_value,
        risk_mitigation_value=risk_value,
        total_benefit=total_benefit,
        implementation_cost=implementation_cost,
        roi_percent=roi,
        payback_months=payback_months(total_benefit, implementation_cost),
        npv=net_present_value(total_benefit, implementation_cost),
        irr_percent=simplified_irr(total_benefit, implementation_cost),
        savings_per_attendee_hour=total_savings / attendee_hours if attendee_hours > 0 else 0.0,
    )
