"""
Core infrastructure for SimpleDB operations.

- DomainGateway: thin wrapper over the boto3 SimpleDB client
- map_sdb_error: ClientError to ServiceError mapping
"""

from .domain_gateway import (
    MAX_BATCH_ITEMS,
    DomainGateway,
    create_domain_gateway,
    map_sdb_error,
)

__all__ = [
    "MAX_BATCH_ITEMS",
    "DomainGateway",
    "create_domain_gateway",
    "map_sdb_error",
]
