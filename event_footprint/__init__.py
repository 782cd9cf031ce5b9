"""Carbon, water and waste estimation and scoring for planned events."""

from .engine import (
    EventImpactEngine,
    assess_catering_materials,
    assess_event_profile,
    assess_venue,
    calculate_cost_savings,
    calculate_footprint,
    compare_formats,
    generate_recommendations,
    get_applicable_tax_incentives,
    recommend_format,
    suggest_alternatives,
)
from .models import (
    AttendeeCohort,
    AttendeeTravelProfile,
    CateringProfile,
    CostInputs,
    DistributionError,
    EstimationError,
    EventConfiguration,
    EventProfile,
    InvalidConfiguration,
    MaterialsProfile,
    ValidationIssue,
    VenueProfile,
    VirtualEventProfile,
)

__version__ = "0.1.0"

__all__ = [
    "EventImpactEngine",
    "calculate_footprint",
    "calculate_cost_savings",
    "compare_formats",
    "recommend_format",
    "get_applicable_tax_incentives",
    "generate_recommendations",
    "suggest_alternatives",
    "assess_event_profile",
    "assess_venue",
    "assess_catering_materials",
    "EventConfiguration",
    "EventProfile",
    "VenueProfile",
    "CateringProfile",
    "AttendeeCohort",
    "AttendeeTravelProfile",
    "MaterialsProfile",
    "VirtualEventProfile",
    "CostInputs",
    "EstimationError",
    "InvalidConfiguration",
    "DistributionError",
    "ValidationIssue",
]
