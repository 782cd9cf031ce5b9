"""Benchmark-based pre-assessment for events still in planning."""

from __future__ import annotations

import logging

from event_footprint.engine.result import PreAssessmentResult
from event_footprint.engine.scoring import percentile_rank
from event_footprint.factors.benchmarks import (
    EVENT_BENCHMARKS,
    FORMAT_MULTIPLIERS,
    INDUSTRY_MULTIPLIERS,
    INTERNATIONAL_MULTIPLIER,
    SCALE_THRESHOLDS,
)
from event_footprint.factors.lookup import coerce_enum, lookup
from event_footprint.models.enums import EventFormat, EventScale, EventType
from event_footprint.models.errors import require_non_negative, require_positive
from event_footprint.models.profiles import EventProfile

logger = logging.getLogger(__name__)

LARGE_IN_PERSON_ATTENDEES = 500
LONG_EVENT_DAYS = 3

_SCALE_POTENTIAL: dict[EventScale, str] = {
    EventScale.SMALL: "great",
    EventScale.MEDIUM: "good",
    EventScale.LARGE: "good",
    EventScale.MEGA: "significant",
}


def event_scale(attendees: int) -> EventScale:
    require_non_negative(attendees, "expected_attendees")
    for scale, upper in SCALE_THRESHOLDS.items():
        if attendees <= upper:
            return scale
    return EventScale.MEGA


def industry_multiplier(industry: str) -> float:
    """Sector multiplier; sectors without data count as 'other'."""
    multiplier = INDUSTRY_MULTIPLIERS.get(industry.strip().lower())
    if multiplier is None:
        logger.debug("No industry multiplier for '%s', using 'other'", industry)
        return INDUSTRY_MULTIPLIERS["other"]
    return multiplier


def assess_event_profile(profile: EventProfile) -> PreAssessmentResult:
    """Estimate emissions from the event type's benchmark.

    per attendee = benchmark average x format x industry (x1.5 if
    international). The best case keeps only the format multiplier; the
    worst case applies every multiplier to the benchmark's worst value.
    """
    attendees = require_positive(profile.expected_attendees, "expected_attendees")
    benchmark = lookup(EVENT_BENCHMARKS, EventType, profile.event_type, "event_type")
    event_format = coerce_enum(EventFormat, profile.event_format, "event_format")
    format_multiplier = lookup(FORMAT_MULTIPLIERS, EventFormat, event_format, "event_format")
    sector = industry_multiplier(profile.industry)
    international = INTERNATIONAL_MULTIPLIER if profile.is_international else 1.0

    formatted = benchmark.scaled(format_multiplier)
    per_attendee = formatted.average * sector * international
    best_per_attendee = formatted.best
    worst_per_attendee = formatted.worst * sector * international
    scale = event_scale(attendees)

    risks: list[str] = []
    if profile.is_international:
        risks.append("International travel significantly increases emissions")
    if event_format is EventFormat.IN_PERSON and attendees > LARGE_IN_PERSON_ATTENDEES:
        risks.append("Large in-person events have substantial carbon footprints")
    if profile.duration_days > LONG_EVENT_DAYS:
        risks.append("Multi-day events require accommodation, increasing impact")

    opportunities: list[str] = []
    if event_format is EventFormat.IN_PERSON:
        opportunities.append("Consider hybrid format to reduce travel by 40-60%")
    if sector > 1.0:
        opportunities.append(
            "Your industry has above-average impact - sustainability can differentiate"
        )
    opportunities.append(
        f"{scale.value.capitalize()} events have {_SCALE_POTENTIAL[scale]} optimization potential"
    )

    return PreAssessmentResult(
        emissions_per_attendee_kg=per_attendee,
        total_emissions_kg=per_attendee * attendees,
        best_case_kg=best_per_attendee * attendees,
        worst_case_kg=worst_per_attendee * attendees,
        industry_benchmark_kg=benchmark.average,
        percentile=percentile_rank(per_attendee, benchmark),
        scale=scale,
        risks=risks,
        opportunities=opportunities,
    )
