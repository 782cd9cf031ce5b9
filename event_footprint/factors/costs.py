"""Regional prices and savings potentials for the cost-savings model.

Based on EU ETS / voluntary carbon market averages, municipal utility
tariffs, and Event Industry Council / GMIC green meeting guidance.
"""

from __future__ import annotations

from typing import NamedTuple

from event_footprint.models.enums import AdoptionTier, CostCategory, Region

# Currency per kg CO2e (market price only)
CARBON_PRICES: dict[Region, float] = {
    Region.US: 0.025,  # voluntary market, $25/t
    Region.EU: 0.085,  # EU ETS
    Region.UK: 0.075,  # UK ETS
    Region.CA: 0.065,  # federal carbon charge
    Region.AU: 0.030,  # safeguard mechanism
}

# EPA social cost of carbon, $51/t, added to every regional price
SOCIAL_COST_OF_CARBON = 0.051

# Currency per litre
WATER_COSTS: dict[Region, float] = {
    Region.US: 0.004,
    Region.EU: 0.006,
    Region.UK: 0.005,
    Region.CA: 0.003,
    Region.AU: 0.008,
}

# Currency per kg
WASTE_COSTS: dict[Region, float] = {
    Region.US: 0.12,
    Region.EU: 0.18,
    Region.UK: 0.15,
    Region.CA: 0.10,
    Region.AU: 0.14,
}

ADOPTION_MULTIPLIERS: dict[AdoptionTier, float] = {
    AdoptionTier.BASIC: 0.4,
    AdoptionTier.MODERATE: 0.7,
    AdoptionTier.ADVANCED: 0.9,
    AdoptionTier.COMPREHENSIVE: 1.0,
}


class VenueSavings(NamedTuple):
    base: float
    renewable: float
    outdoor: float


class EnergySavings(NamedTuple):
    led_lighting: float
    smart_hvac: float
    renewable: float


class CateringSavings(NamedTuple):
    vegan: float
    vegetarian: float
    local_seasonal: float
    portion_optimization: float


class TransportSavings(NamedTuple):
    public_transit: float
    shuttle: float


class MaterialsSavings(NamedTuple):
    digital: float
    minimal_print: float
    no_swag: float


class WasteSavings(NamedTuple):
    recycling: float
    zero_waste: float
    composting: float


# Maximum achievable savings per measure at full implementation
VENUE_SAVINGS = VenueSavings(base=0.15, renewable=0.25, outdoor=0.08)
ENERGY_SAVINGS = EnergySavings(led_lighting=0.35, smart_hvac=0.25, renewable=0.40)
CATERING_SAVINGS = CateringSavings(
    vegan=0.35, vegetarian=0.25, local_seasonal=0.20, portion_optimization=0.18
)
TRANSPORT_SAVINGS = TransportSavings(public_transit=0.45, shuttle=0.30)
MATERIALS_SAVINGS = MaterialsSavings(digital=0.85, minimal_print=0.55, no_swag=0.70)
WASTE_SAVINGS = WasteSavings(recycling=0.35, zero_waste=0.75, composting=0.50)

# Reduction fractions never exceed these, whatever the signals say
REDUCTION_CEILINGS: dict[CostCategory, float] = {
    CostCategory.VENUE: 0.40,
    CostCategory.ENERGY: 0.65,
    CostCategory.CATERING: 0.45,
    CostCategory.TRANSPORT: 0.55,
    CostCategory.MATERIALS: 0.80,
    CostCategory.WASTE: 0.70,
}

# Per-attendee spend at which a category's savings potential is "typical"
SPEND_BASELINES_PER_ATTENDEE: dict[CostCategory, float] = {
    CostCategory.CATERING: 50.0,
    CostCategory.MATERIALS: 20.0,
    CostCategory.WASTE: 5.0,
}
SPEND_SCALE_CAPS: dict[CostCategory, float] = {
    CostCategory.CATERING: 1.5,
    CostCategory.MATERIALS: 1.4,
    CostCategory.WASTE: 1.5,
}

# Energy spend per attendee above which LED retrofits pay off fully / partly
ENERGY_SPEND_HIGH = 15.0
ENERGY_SPEND_MEDIUM = 8.0

# One-way km at which transport savings are "typical", and the cap
TRANSPORT_DISTANCE_BASELINE_KM = 100.0
TRANSPORT_DISTANCE_CAP = 1.3

BRAND_VALUE_MULTIPLIER = 0.03
RISK_MITIGATION_MULTIPLIER = 0.02

IMPLEMENTATION_COST_SHARE = 0.10
DISCOUNT_RATE = 0.05
NPV_HORIZON_YEARS = 3

# Green-score step function for incentive estimates: (minimum score, fraction)
INCENTIVE_TIERS: tuple[tuple[int, float], ...] = (
    (80, 1.0),
    (60, 0.7),
    (0, 0.4),
)
