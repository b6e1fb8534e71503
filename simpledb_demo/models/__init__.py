# Item models and the sample records
from .items import (
    EMAIL_ATTR,
    FIRST_NAME_ATTR,
    LAST_NAME_ATTR,
    ReplaceableAttribute,
    ReplaceableItem,
    build_sample_records,
)

# Run results
from .results import (
    DomainListing,
    RunReport,
    StepOutcome,
)

__all__ = [
    "EMAIL_ATTR",
    "FIRST_NAME_ATTR",
    "LAST_NAME_ATTR",
    "ReplaceableAttribute",
    "ReplaceableItem",
    "build_sample_records",
    "DomainListing",
    "RunReport",
    "StepOutcome",
]
