from .assessment import assess_event_profile
from .calculator import EventImpactEngine
from .costs import calculate_cost_savings
from .footprint import (
    assess_catering_materials,
    assess_venue,
    calculate_footprint,
    travel_breakdown,
)
from .formats import compare_formats, composite_score, recommend_format
from .incentives import get_applicable_tax_incentives, total_incentive_value
from .recommendations import generate_recommendations, suggest_alternatives
from .scoring import (
    annual_projection,
    calculate_green_score,
    carbon_offset_costs,
    percentile_rank,
    score_to_grade,
)

__all__ = [
    "EventImpactEngine",
    "calculate_footprint",
    "travel_breakdown",
    "assess_venue",
    "assess_catering_materials",
    "assess_event_profile",
    "compare_formats",
    "composite_score",
    "recommend_format",
    "calculate_cost_savings",
    "get_applicable_tax_incentives",
    "total_incentive_value",
    "generate_recommendations",
    "suggest_alternatives",
    "calculate_green_score",
    "score_to_grade",
    "percentile_rank",
    "carbon_offset_costs",
    "annual_projection",
]
