from .errors import (
    DistributionError,
    EstimationError,
    InvalidConfiguration,
    ValidationIssue,
    parse_model,
)
from .profiles import (
    AttendeeCohort,
    AttendeeTravelProfile,
    CateringProfile,
    CostInputs,
    EventConfiguration,
    EventProfile,
    MaterialsProfile,
    VenueProfile,
    VirtualEventProfile,
)

__all__ = [
    "EstimationError",
    "InvalidConfiguration",
    "DistributionError",
    "ValidationIssue",
    "parse_model",
    "VenueProfile",
    "CateringProfile",
    "AttendeeCohort",
    "AttendeeTravelProfile",
    "MaterialsProfile",
    "VirtualEventProfile",
    "EventConfiguration",
    "EventProfile",
    "CostInputs",
]
