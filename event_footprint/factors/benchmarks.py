"""Industry benchmark ranges and pre-assessment multipliers."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from event_footprint.models.enums import EventFormat, EventScale, EventType


class BenchmarkRange(BaseModel):
    """Per-attendee emissions triple (kg CO2e) for one event type."""

    model_config = ConfigDict(frozen=True)

    best: float = Field(ge=0, description="Best-practice events")
    average: float = Field(ge=0, description="Industry average")
    worst: float = Field(ge=0, description="Worst-case events")

    @model_validator(mode="after")
    def best_le_average_le_worst(self) -> BenchmarkRange:
        if not (self.best <= self.average <= self.worst):
            raise ValueError(
                f"Benchmark must be ordered: best ({self.best}) "
                f"<= average ({self.average}) <= worst ({self.worst})"
            )
        if self.best == self.worst:
            raise ValueError("Benchmark best and worst must differ")
        return self

    def scaled(self, factor: float) -> BenchmarkRange:
        return BenchmarkRange(
            best=self.best * factor,
            average=self.average * factor,
            worst=self.worst * factor,
        )


# Industry data is published in tonnes per attendee; stored here in kg.
EVENT_BENCHMARKS: dict[EventType, BenchmarkRange] = {
    EventType.CONFERENCE: BenchmarkRange(best=400, average=1800, worst=3500),
    EventType.CORPORATE_MEETING: BenchmarkRange(best=200, average=800, worst=1800),
    EventType.TRADE_SHOW: BenchmarkRange(best=800, average=2500, worst=5000),
    EventType.WORKSHOP: BenchmarkRange(best=100, average=500, worst=1200),
    EventType.GALA: BenchmarkRange(best=400, average=1200, worst=2500),
    EventType.PRODUCT_LAUNCH: BenchmarkRange(best=500, average=1500, worst=3000),
    EventType.TRAINING: BenchmarkRange(best=100, average=400, worst=1000),
    EventType.NETWORKING: BenchmarkRange(best=200, average=600, worst=1400),
}

# Share of in-person emissions each format produces
FORMAT_MULTIPLIERS: dict[EventFormat, float] = {
    EventFormat.IN_PERSON: 1.0,
    EventFormat.VIRTUAL: 0.06,
    EventFormat.HYBRID: 0.33,
}

INDUSTRY_MULTIPLIERS: dict[str, float] = {
    "technology": 0.9,
    "finance": 1.1,
    "healthcare": 0.95,
    "manufacturing": 1.2,
    "retail": 1.0,
    "education": 0.85,
    "government": 0.95,
    "nonprofit": 0.80,
    "entertainment": 1.15,
    "other": 1.0,
}

INTERNATIONAL_MULTIPLIER = 1.5

# Upper attendee bound per scale, checked in order
SCALE_THRESHOLDS: dict[EventScale, int] = {
    EventScale.SMALL: 50,
    EventScale.MEDIUM: 250,
    EventScale.LARGE: 1000,
    EventScale.MEGA: 100_000,
}
