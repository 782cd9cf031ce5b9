"""Core estimation engine.

Takes an event configuration (and optionally its costs) -> produces an
ImpactReport. Validation failures come back as ``ValidationIssue`` values
on the report instead of exceptions.
"""

from __future__ import annotations

import logging
from typing import Optional

from event_footprint.config.settings import Settings, get_settings
from event_footprint.engine.costs import calculate_cost_savings
from event_footprint.engine.footprint import calculate_footprint
from event_footprint.engine.formats import compare_formats, recommend_format
from event_footprint.engine.incentives import get_applicable_tax_incentives
from event_footprint.engine.recommendations import (
    generate_recommendations,
    suggest_alternatives,
)
from event_footprint.engine.result import (
    AnnualProjection,
    CostSavingsResult,
    FootprintResult,
    FormatComparisonResult,
    ImpactReport,
)
from event_footprint.engine.scoring import annual_projection
from event_footprint.models.errors import EstimationError
from event_footprint.models.profiles import CostInputs, EventConfiguration

logger = logging.getLogger(__name__)


class EventImpactEngine:
    """Stateless engine that runs the full estimation pipeline."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    def evaluate(
        self,
        config: EventConfiguration,
        costs: Optional[CostInputs] = None,
    ) -> ImpactReport:
        """Footprint -> formats -> costs -> incentives -> recommendations."""
        try:
            return self._run(config, costs)
        except EstimationError as e:
            logger.warning("Event configuration rejected (%s): %s", e.field, e.message)
            return ImpactReport(issues=[e.to_issue()])

    def _run(
        self,
        config: EventConfiguration,
        costs: Optional[CostInputs],
    ) -> ImpactReport:
        footprint = self.footprint(config)
        logger.debug(
            "Footprint: %.1f kg CO2e, score %d (%s)",
            footprint.carbon_kg, footprint.green_score, footprint.grade.value,
        )

        formats = self.formats(config)
        recommended = recommend_format(formats)
        logger.debug("Recommended format: %s", recommended.format.value)

        cost_savings: Optional[CostSavingsResult] = None
        region = self.settings.default_region
        if costs is not None:
            cost_savings = calculate_cost_savings(config, footprint, costs)
            region = costs.region
            logger.debug("Cost savings: %.2f", cost_savings.total_savings)

        incentives = get_applicable_tax_incentives(region, footprint)
        recommendations = generate_recommendations(
            footprint.breakdown, config.event_type, config.event_format
        )
        logger.debug(
            "%d incentives, %d recommendations", len(incentives), len(recommendations)
        )

        return ImpactReport(
            footprint=footprint,
            formats=formats,
            recommended_format=recommended.format,
            cost_savings=cost_savings,
            incentives=incentives,
            recommendations=recommendations,
            alternatives=suggest_alternatives(config),
        )

    def footprint(self, config: EventConfiguration) -> FootprintResult:
        return calculate_footprint(config, self.settings.cohort_tolerance_percent)

    def formats(self, config: EventConfiguration) -> list[FormatComparisonResult]:
        return compare_formats(
            attendees=config.attendee_count,
            avg_travel_distance_km=config.travel.average_distance_km,
            duration_days=config.duration_days,
            in_person_ratio=self.settings.hybrid_in_person_ratio,
        )

    def annual(self, footprint: FootprintResult) -> AnnualProjection:
        return annual_projection(footprint, self.settings.events_per_year)
