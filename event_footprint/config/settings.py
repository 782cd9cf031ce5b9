from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from event_footprint.models.enums import Region


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="EVENT_FOOTPRINT_",
        env_file=".env",
        extra="ignore",
    )

    log_level: str = "INFO"
    # Allowed deviation of cohort percentages from 100, in percentage points
    cohort_tolerance_percent: float = Field(default=1.0, gt=0)
    hybrid_in_person_ratio: float = Field(default=0.5, ge=0, le=1)
    default_region: Region = Region.US
    events_per_year: int = Field(default=4, ge=1)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
