from .service_errors import (
    SimpleDBDemoError,
    AuthorizationError,
    ConflictError,
    ConnectionError,
    DomainNotFoundError,
    InvalidRequestError,
    LimitExceededError,
    RetryableError,
    ServiceError,
    ValidationError,
)

__all__ = [
    # Base exception
    "SimpleDBDemoError",

    # Remote service errors
    "AuthorizationError",
    "ConflictError",
    "DomainNotFoundError",
    "InvalidRequestError",
    "LimitExceededError",
    "RetryableError",
    "ServiceError",

    # Local errors
    "ConnectionError",
    "ValidationError",
]
