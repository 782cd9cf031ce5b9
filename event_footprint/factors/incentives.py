"""Load and validate the tax-incentive catalogue from JSON."""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from event_footprint.models.enums import IncentiveCategory, Region

# Default catalogue shipped with the package
_DATA_DIR = Path(__file__).parent / "data"

GLOBAL_REGION = "global"


class IncentiveProgram(BaseModel):
    """A credit or grant programme, before any event-specific estimate."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str = ""
    region: str = Field(description="Region code, or 'global' for every region")
    category: IncentiveCategory
    percentage_credit: float = Field(ge=0, le=100)
    max_credit: float = Field(ge=0, description="Cap on the credit value")
    eligibility_criteria: tuple[str, ...] = ()

    @field_validator("region")
    @classmethod
    def region_must_be_known(cls, v: str) -> str:
        if v != GLOBAL_REGION and v not in {r.value for r in Region}:
            raise ValueError(f"Unknown incentive region '{v}'")
        return v


class IncentiveCatalog(BaseModel):
    model_config = ConfigDict(frozen=True)

    version: str
    incentives: tuple[IncentiveProgram, ...] = Field(min_length=1)

    @model_validator(mode="after")
    def ids_unique(self) -> IncentiveCatalog:
        ids = [i.id for i in self.incentives]
        if len(ids) != len(set(ids)):
            raise ValueError("Incentive ids must be unique")
        return self

    def for_region(self, region: Region) -> list[IncentiveProgram]:
        return [
            i for i in self.incentives
            if i.region == region.value or i.region == GLOBAL_REGION
        ]


def load_incentive_catalog(file_path: Optional[Path] = None) -> IncentiveCatalog:
    """Load and validate an incentive catalogue from a JSON file.

    If no path is provided, loads the packaged default catalogue.
    """
    if file_path is None:
        file_path = _DATA_DIR / "incentives.json"

    if not file_path.exists():
        raise FileNotFoundError(f"Incentive catalogue not found: {file_path}")

    with open(file_path, "r") as f:
        raw = json.load(f)

    return IncentiveCatalog.model_validate(raw)


@lru_cache(maxsize=1)
def get_default_catalog() -> IncentiveCatalog:
    """The packaged catalogue, read once per process."""
    return load_incentive_catalog()
