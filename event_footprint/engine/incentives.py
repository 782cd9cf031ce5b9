"""Estimate tax incentives an event can claim in its region."""

from __future__ import annotations

from typing import Iterable, Optional

from event_footprint.engine.result import FootprintResult, TaxIncentive
from event_footprint.factors.costs import INCENTIVE_TIERS
from event_footprint.factors.incentives import IncentiveCatalog, get_default_catalog
from event_footprint.factors.lookup import coerce_enum
from event_footprint.models.enums import Region


def incentive_tier_fraction(green_score: float) -> float:
    """Share of each programme's cap the event is expected to secure."""
    for minimum, fraction in INCENTIVE_TIERS:
        if green_score >= minimum:
            return fraction
    return INCENTIVE_TIERS[-1][1]


def get_applicable_tax_incentives(
    region: Region | str,
    footprint: FootprintResult,
    catalog: Optional[IncentiveCatalog] = None,
) -> list[TaxIncentive]:
    """Programmes for ``region`` (and global ones), in catalogue order.

    estimated value = min(cap, cap x tier fraction), with the tier taken
    from the footprint's green score.
    """
    region = coerce_enum(Region, region, "region")
    if catalog is None:
        catalog = get_default_catalog()
    fraction = incentive_tier_fraction(footprint.green_score)

    return [
        TaxIncentive(
            id=program.id,
            name=program.name,
            description=program.description,
            region=program.region,
            category=program.category,
            percentage_credit=program.percentage_credit,
            max_credit=program.max_credit,
            estimated_value=min(program.max_credit, program.max_credit * fraction),
            eligibility_criteria=program.eligibility_criteria,
        )
        for program in catalog.for_region(region)
    ]


def total_incentive_value(incentives: Iterable[TaxIncentive]) -> float:
    return sum(i.estimated_value for i in incentives)
