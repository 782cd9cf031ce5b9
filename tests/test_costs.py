"""Tests for the cost-savings model and financial metrics."""

import pytest

from event_footprint.engine.costs import (
    calculate_cost_savings,
    category_reductions,
    net_present_value,
    payback_months,
    simplified_irr,
)
from event_footprint.engine.footprint import calculate_footprint
from event_footprint.factors.costs import REDUCTION_CEILINGS
from event_footprint.models.enums import AdoptionTier, CostCategory, Region
from event_footprint.models.errors import InvalidConfiguration
from event_footprint.models.profiles import CostInputs


class TestCategoryReductions:
    def test_basic_config(self, basic_config, basic_costs):
        reductions = category_reductions(basic_config, basic_costs)
        # venue: base 0.15 * moderate 0.7
        assert reductions[CostCategory.VENUE] == pytest.approx(0.105)
        # energy: $20/head > $15 -> full LED potential 0.35 * 0.7
        assert reductions[CostCategory.ENERGY] == pytest.approx(0.245)
        # catering: no plant-forward signals
        assert reductions[CostCategory.CATERING] == 0.0
        # transport: car, no shuttle
        assert reductions[CostCategory.TRANSPORT] == 0.0
        # materials: no swag 0.49 * (25/20 = 1.25) * 0.7
        assert reductions[CostCategory.MATERIALS] == pytest.approx(0.49 * 1.25 * 0.7)
        # waste: base 0.175 * min(6/5, 1.5) * 0.7
        assert reductions[CostCategory.WASTE] == pytest.approx(0.175 * 1.2 * 0.7)

    def test_green_config_clamped_to_ceilings(self, green_config, basic_costs):
        costs = basic_costs.model_copy(update={"adoption_tier": AdoptionTier.COMPREHENSIVE})
        reductions = category_reductions(green_config, costs)
        for category, value in reductions.items():
            assert 0.0 <= value <= REDUCTION_CEILINGS[category]
        assert reductions[CostCategory.MATERIALS] == REDUCTION_CEILINGS[CostCategory.MATERIALS]

    def test_adoption_tier_scales(self, green_config, basic_costs):
        basic = category_reductions(
            green_config, basic_costs.model_copy(update={"adoption_tier": AdoptionTier.BASIC})
        )
        advanced = category_reductions(
            green_config, basic_costs.model_copy(update={"adoption_tier": AdoptionTier.ADVANCED})
        )
        assert basic[CostCategory.VENUE] < advanced[CostCategory.VENUE]

    def test_attendee_count_override(self, basic_config, basic_costs):
        fewer = basic_costs.model_copy(update={"attendee_count": 50})
        # $40/head energy still above the high threshold; materials scale hits 1.4 cap
        reductions = category_reductions(basic_config, fewer)
        assert reductions[CostCategory.MATERIALS] == pytest.approx(0.49 * 1.4 * 0.7)


class TestCalculateCostSavings:
    @pytest.fixture
    def result(self, basic_config, basic_costs):
        footprint = calculate_footprint(basic_config)
        return calculate_cost_savings(basic_config, footprint, basic_costs)

    def test_totals(self, result, basic_costs):
        assert result.traditional_total == pytest.approx(basic_costs.traditional_total)
        assert result.total_savings == pytest.approx(
            result.traditional_total - result.sustainable_total
        )
        assert result.total_savings > 0

    def test_every_category_no_more_expensive(self, result):
        assert [c.category for c in result.categories] == list(CostCategory)
        for category in result.categories:
            assert category.sustainable <= category.traditional

    def test_environmental_value_us(self, result, basic_config):
        footprint = calculate_footprint(basic_config)
        assert result.carbon_value == pytest.approx(footprint.carbon_kg * (0.025 + 0.051))
        assert result.water_value == pytest.approx(footprint.water_liters * 0.004)
        assert result.waste_value == pytest.approx(footprint.waste_kg * 0.12)
        assert result.environmental_value == pytest.approx(
            result.carbon_value + result.water_value + result.waste_value
        )

    def test_brand_and_risk(self, result):
        # green score 58
        assert result.brand_value == pytest.approx(24_100 * 0.03 * 0.58)
        assert result.risk_mitigation_value == pytest.approx(24_100 * 0.02)

    def test_financial_metrics(self, result):
        assert result.implementation_cost == pytest.approx(result.sustainable_total * 0.10)
        assert result.roi_percent == pytest.approx(
            result.total_benefit / result.implementation_cost * 100
        )
        assert result.irr_percent == pytest.approx(result.roi_percent - 100)
        assert result.payback_months >= 1

    def test_region_changes_carbon_price(self, basic_config, basic_costs):
        footprint = calculate_footprint(basic_config)
        us = calculate_cost_savings(basic_config, footprint, basic_costs)
        eu = calculate_cost_savings(
            basic_config, footprint, basic_costs.model_copy(update={"region": Region.EU})
        )
        assert eu.carbon_value > us.carbon_value

    def test_savings_per_attendee_hour(self, result):
        # 100 attendees over the configuration's 8 hours
        assert result.savings_per_attendee_hour == pytest.approx(result.total_savings / 800)

    def test_duration_override(self, basic_config, basic_costs):
        footprint = calculate_footprint(basic_config)
        longer = calculate_cost_savings(
            basic_config, footprint, basic_costs.model_copy(update={"duration_hours": 16})
        )
        assert longer.savings_per_attendee_hour == pytest.approx(longer.total_savings / 1600)

    def test_zero_hours_has_no_hourly_rate(self, basic_config, basic_costs):
        footprint = calculate_footprint(basic_config)
        result = calculate_cost_savings(
            basic_config, footprint, basic_costs.model_copy(update={"duration_hours": 0})
        )
        assert result.savings_per_attendee_hour == 0.0
        assert result.total_savings > 0

    def test_for_category(self, result):
        assert result.for_category(CostCategory.VENUE).traditional == 10_000

    def test_zero_attendees_raises(self, basic_config, basic_costs):
        footprint = calculate_footprint(basic_config)
        with pytest.raises(InvalidConfiguration, match="attendee_count"):
            calculate_cost_savings(
                basic_config, footprint, basic_costs.model_copy(update={"attendee_count": 0})
            )

    def test_unknown_region_raises(self, basic_config, basic_costs):
        footprint = calculate_footprint(basic_config)
        costs = CostInputs.model_construct(**{**basic_costs.model_dump(), "region": "mars"})
        with pytest.raises(InvalidConfiguration, match="Unrecognized costs.region"):
            calculate_cost_savings(basic_config, footprint, costs)

    def test_negative_cost_raises(self, basic_config, basic_costs):
        footprint = calculate_footprint(basic_config)
        costs = CostInputs.model_construct(**{**basic_costs.model_dump(), "venue_cost": -5})
        with pytest.raises(InvalidConfiguration, match="cannot be negative"):
            calculate_cost_savings(basic_config, footprint, costs)


class TestFinancialHelpers:
    def test_npv(self):
        expected = -100 + 100 / 1.05 + 100 / 1.05**2 + 100 / 1.05**3
        assert net_present_value(100, 100) == pytest.approx(expected)

    def test_simplified_irr(self):
        # ((300 / 100) - 1) * 100
        assert simplified_irr(300, 100) == pytest.approx(200.0)

    def test_irr_without_implementation_cost(self):
        assert simplified_irr(300, 0) == 0.0

    def test_payback_minimum_one_month(self):
        assert payback_months(1_000_000, 10) == 1

    def test_payback_rounding(self):
        # 1200 / (1200 / 12) = 12 months
        assert payback_months(1200, 1200) == 12

    def test_payback_without_benefit(self):
        assert payback_months(0, 1000) == 0
