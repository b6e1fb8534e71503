"""
SimpleDB Demo

A small demonstration of Amazon SimpleDB through boto3: create a domain,
list domains with their item counts, batch-insert sample customers, select
them back and delete the domain. Configuration is read with pydantic from
the environment, and service failures surface as ServiceError.
"""

from .config import SimpleDBConfig
from .exceptions import (
    AuthorizationError,
    ConflictError,
    ConnectionError,
    DomainNotFoundError,
    InvalidRequestError,
    LimitExceededError,
    RetryableError,
    ServiceError,
    SimpleDBDemoError,
    ValidationError,
)
from .models import (
    DomainListing,
    ReplaceableAttribute,
    ReplaceableItem,
    RunReport,
    StepOutcome,
    build_sample_records,
)
from .core import (
    DomainGateway,
    create_domain_gateway,
    map_sdb_error,
)
from .runner import DemoRunner

__version__ = "1.0.0"
__all__ = [
    # Configuration
    "SimpleDBConfig",

    # Exceptions
    "AuthorizationError",
    "ConflictError",
    "ConnectionError",
    "DomainNotFoundError",
    "InvalidRequestError",
    "LimitExceededError",
    "RetryableError",
    "ServiceError",
    "SimpleDBDemoError",
    "ValidationError",

    # Models
    "DomainListing",
    "ReplaceableAttribute",
    "ReplaceableItem",
    "RunReport",
    "StepOutcome",
    "build_sample_records",

    # Gateway
    "DomainGateway",
    "create_domain_gateway",
    "map_sdb_error",

    # Orchestration
    "DemoRunner",
]
