"""Immutable result data structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from event_footprint.models.enums import (
    AttendeeRegion,
    CostCategory,
    CostDirection,
    Difficulty,
    EventFormat,
    EventScale,
    Grade,
    ImpactCategory,
    IncentiveCategory,
    IndustryComparison,
    OffsetTier,
    TravelMode,
)
from event_footprint.models.errors import ValidationIssue


@dataclass(frozen=True)
class FootprintResult:
    """Aggregated footprint for one event configuration."""

    carbon_kg: float
    water_liters: float
    waste_kg: float
    breakdown: Mapping[ImpactCategory, float]
    green_score: int
    grade: Grade
    carbon_per_attendee_kg: float
    percentile: float
    industry_comparison: IndustryComparison

    def __post_init__(self):
        # read-only view over a private copy
        object.__setattr__(self, "breakdown", MappingProxyType(dict(self.breakdown)))


@dataclass(frozen=True)
class CohortEmission:
    region: AttendeeRegion
    travel_mode: TravelMode
    attendees: float
    avg_distance_km: float
    emissions_kg: float


@dataclass(frozen=True)
class TravelBreakdown:
    """Per-cohort travel emissions plus accommodation."""

    cohorts: list[CohortEmission]
    travel_kg: float
    accommodation_kg: float
    total_kg: float
    emissions_per_attendee_kg: float
    # extra travel the virtual attendees would add by coming in person
    virtual_savings_kg: float
    shuttle_applied: bool
    biggest_contributor: Optional[AttendeeRegion] = None
    recommendations: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class VenueAssessment:
    emissions_kg: float
    emissions_per_m2: float
    green_score: int
    grade: Grade
    best_case_kg: float
    potential_savings_kg: float


@dataclass(frozen=True)
class CateringMaterialsAssessment:
    catering_kg: float
    materials_kg: float
    total_kg: float
    per_attendee_kg: float
    best_catering_kg: float
    best_materials_kg: float
    potential_catering_savings_kg: float
    potential_materials_savings_kg: float
    local_sourcing_savings_kg: float


@dataclass(frozen=True)
class PreAssessmentResult:
    """Benchmark-based estimate made before detailed planning."""

    emissions_per_attendee_kg: float
    total_emissions_kg: float
    best_case_kg: float
    worst_case_kg: float
    industry_benchmark_kg: float
    percentile: float
    scale: EventScale
    risks: list[str] = field(default_factory=list)
    opportunities: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class FormatComparisonResult:
    format: EventFormat
    estimated_carbon_kg: float
    carbon_per_attendee_kg: float
    cost_index: float
    engagement_score: int
    accessibility_score: int
    networking_score: int
    recommendation_reason: str


@dataclass(frozen=True)
class CostCategoryResult:
    category: CostCategory
    traditional: float
    sustainable: float
    savings: float
    reduction: float


@dataclass(frozen=True)
class CostSavingsResult:
    """Traditional vs sustainable spend and the derived financial metrics."""

    categories: list[CostCategoryResult]
    traditional_total: float
    sustainable_total: float
    total_savings: float
    savings_percent: float
    carbon_value: float
    water_value: float
    waste_value: float
    brand_value: float
    risk_mitigation_value: float
    total_benefit: float
    implementation_cost: float
    roi_percent: float
    payback_months: int
    npv: float
    # simplified approximation, not a discounted-cash-flow IRR
    irr_percent: float
    savings_per_attendee_hour: float = 0.0

    @property
    def environmental_value(self) -> float:
        return self.carbon_value + self.water_value + self.waste_value

    def for_category(self, category: CostCategory) -> CostCategoryResult:
        return next(c for c in self.categories if c.category is category)


@dataclass(frozen=True)
class TaxIncentive:
    id: str
    name: str
    description: str
    region: str
    category: IncentiveCategory
    percentage_credit: float
    max_credit: float
    estimated_value: float
    eligibility_criteria: tuple[str, ...] = ()


@dataclass(frozen=True)
class Recommendation:
    category: ImpactCategory
    action: str
    savings_kg: float
    savings_percent: float
    effort: int

    @property
    def priority(self) -> float:
        """Savings per unit of effort; the ranking key."""
        return self.savings_kg / self.effort


@dataclass(frozen=True)
class Alternative:
    """A concrete swap for one part of the configuration."""

    id: str
    category: ImpactCategory
    current: str
    suggestion: str
    impact_percent: int
    cost: CostDirection
    difficulty: Difficulty


@dataclass(frozen=True)
class OffsetCost:
    tier: OffsetTier
    price_per_tonne: float
    cost: float


@dataclass(frozen=True)
class AnnualProjection:
    events_per_year: int
    carbon_kg: float
    water_liters: float
    waste_kg: float


@dataclass(frozen=True)
class ImpactReport:
    """Everything the engine produces for one configuration.

    On a validation failure the result fields are None/empty and
    ``issues`` explains why.
    """

    footprint: Optional[FootprintResult] = None
    formats: list[FormatComparisonResult] = field(default_factory=list)
    recommended_format: Optional[EventFormat] = None
    cost_savings: Optional[CostSavingsResult] = None
    incentives: list[TaxIncentive] = field(default_factory=list)
    recommendations: list[Recommendation] = field(default_factory=list)
    alternatives: list[Alternative] = field(default_factory=list)
    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.issues
