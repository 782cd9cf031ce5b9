"""Regression tests for reference events -- guards against factor drift."""

import pytest

from event_footprint import EventImpactEngine
from event_footprint.engine.incentives import (
    get_applicable_tax_incentives,
    total_incentive_value,
)
from event_footprint.models.enums import Grade, ImpactCategory, Region


class TestBasicConferenceRegression:
    """Baselines for a one-day, 100-person conference with everyone driving."""

    def _run(self, config, costs, settings):
        return EventImpactEngine(settings=settings).evaluate(config, costs)

    def test_total_carbon(self, basic_config, basic_costs, settings):
        report = self._run(basic_config, basic_costs, settings)
        # 134.4 venue + 1100 catering + 1710 travel + 612.5 materials
        assert report.footprint.carbon_kg == pytest.approx(3556.9), (
            f"Carbon {report.footprint.carbon_kg:,.1f} kg drifted from baseline"
        )

    def test_transport_is_largest_category(self, basic_config, basic_costs, settings):
        breakdown = self._run(basic_config, basic_costs, settings).footprint.breakdown
        assert max(breakdown, key=breakdown.get) is ImpactCategory.TRANSPORT

    def test_score_and_grade(self, basic_config, basic_costs, settings):
        footprint = self._run(basic_config, basic_costs, settings).footprint
        assert footprint.green_score == 58
        assert footprint.grade is Grade.D

    def test_cost_savings_in_expected_range(self, basic_config, basic_costs, settings):
        savings = self._run(basic_config, basic_costs, settings).cost_savings
        assert savings.traditional_total == pytest.approx(24_100)
        # Only base venue, LED, no-swag and recycling measures apply here
        assert 5 < savings.savings_percent < 20, (
            f"Savings {savings.savings_percent:.1f}% outside the plausible range"
        )
        assert savings.roi_percent > 100, f"ROI {savings.roi_percent:.1f}% too low"

    def test_recommendations_lead_with_quick_win(self, basic_config, basic_costs, settings):
        recommendations = self._run(basic_config, basic_costs, settings).recommendations
        # 1100 * 0.45 / 1 = 495 edges out 612.5 * 0.8 / 1 = 490
        assert [r.category for r in recommendations] == [
            ImpactCategory.FOOD_BEVERAGE,
            ImpactCategory.MATERIALS,
            ImpactCategory.TRANSPORT,
            ImpactCategory.VENUE,
        ]


class TestGreenConferenceRegression:
    """Baselines for the same conference with every sustainable option."""

    def test_score_clamped_at_maximum(self, green_config, settings):
        footprint = EventImpactEngine(settings=settings).evaluate(green_config).footprint
        assert footprint.green_score == 100
        assert footprint.grade is Grade.A_PLUS

    def test_category_values(self, green_config, settings):
        breakdown = EventImpactEngine(settings=settings).evaluate(green_config).footprint.breakdown
        # 500 m2 * 0.02 * 8 h * 0.01 * 0.75 * 0.95
        assert breakdown[ImpactCategory.VENUE] == pytest.approx(0.57)
        # 200 vegan meals * 1.5 kg * (1 - 0.20 local sourcing)
        assert breakdown[ImpactCategory.FOOD_BEVERAGE] == pytest.approx(240.0)
        # 100 * 50 km * 2 * 0.089 by bus, shuttle x 0.6
        assert breakdown[ImpactCategory.TRANSPORT] == pytest.approx(534.0)

    def test_us_incentives_reach_caps(self, green_config, settings):
        footprint = EventImpactEngine(settings=settings).evaluate(green_config).footprint
        incentives = get_applicable_tax_incentives(Region.US, footprint)
        assert total_incentive_value(incentives) == pytest.approx(
            10_000 + 5_000 + 3_000 + 2_500
        )
