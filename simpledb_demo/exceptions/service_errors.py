"""
Service and Local Exceptions for the SimpleDB demo

SimpleDB reports every failure as an error response carrying a message,
an HTTP status code, a service error code and a request id. This module
keeps those four fields together on ``ServiceError`` and groups the
service error codes into a handful of subclasses.

Organized by category:
1. Remote Service Errors (the kind the demo runner handles)
2. Local Errors (client construction and record validation)
"""

from typing import Any, Dict, List, Optional


class SimpleDBDemoError(Exception):
    """Root of every error raised by simpledb_demo.

    ``context`` holds key/value detail rendered after the message by ``str()``.
    """

    def __init__(self, message: str, original_error: Optional[Exception] = None, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error
        self.context = dict(context or {})

    def _details(self) -> List[str]:
        return [f"{key}={value}" for key, value in self.context.items()]

    def __str__(self) -> str:
        details = self._details()
        if not details:
            return self.message
        return f"{self.message} [{', '.join(details)}]"


# =============================================================================
# Remote Service Errors
# =============================================================================

class ServiceError(SimpleDBDemoError):
    """Raised when SimpleDB rejects a request.

    Attributes:
        status_code: HTTP status code of the error response
        error_code: SimpleDB error code (e.g. ``NoSuchDomain``)
        request_id: Request identifier assigned by the service
        operation: SimpleDB operation that failed (e.g. ``BatchPutAttributes``)
        domain_name: Domain the request targeted, when there is one
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        error_code: Optional[str] = None,
        request_id: Optional[str] = None,
        operation: Optional[str] = None,
        domain_name: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.status_code = status_code
        self.error_code = error_code
        self.request_id = request_id
        self.operation = operation
        self.domain_name = domain_name
        context: Dict[str, Any] = {}
        if operation:
            context['operation'] = operation
        if domain_name:
            context['domain_name'] = domain_name
        super().__init__(message, original_error, context)

    def diagnostics(self) -> Dict[str, Any]:
        """Return the four diagnostic fields reported for a failed request."""
        return {
            'message': self.message,
            'status_code': self.status_code,
            'error_code': self.error_code,
            'request_id': self.request_id,
        }

    def _details(self) -> List[str]:
        # Service fields first, then operation/domain context
        fields = (('error_code', self.error_code), ('status_code', self.status_code), ('request_id', self.request_id))
        return [f"{name}={value}" for name, value in fields if value is not None] + super()._details()


class DomainNotFoundError(ServiceError):
    """Raised when the target domain does not exist (``NoSuchDomain``)."""


class ConflictError(ServiceError):
    """Raised when a request conflicts with existing data.

    Used for:
    - DuplicateItemName in a batch request
    - ConditionalCheckFailed on conditional puts/deletes
    - AttributeDoesNotExist for expected attributes
    """


class LimitExceededError(ServiceError):
    """Raised when a SimpleDB quota is exceeded.

    Used for:
    - NumberDomainsExceeded
    - NumberSubmittedItemsExceeded / NumberSubmittedAttributesExceeded
    - NumberItemAttributesExceeded / NumberDomainAttributesExceeded
    """


class InvalidRequestError(ServiceError):
    """Raised when SimpleDB refuses a malformed request or query expression."""


class AuthorizationError(ServiceError):
    """Raised when credentials are missing, expired or not allowed."""


class RetryableError(ServiceError):
    """Raised for throttling and transient service failures.

    The demo never retries; the class exists so callers can tell these apart.
    """


# =============================================================================
# Local Errors
# =============================================================================

class ConnectionError(SimpleDBDemoError):
    """Raised when the SimpleDB client cannot be constructed.

    Used for:
    - Invalid endpoint or region configuration
    - Unknown AWS profile
    """


class ValidationError(SimpleDBDemoError):
    """Raised when local data is rejected before any request is sent.

    Used for:
    - Pydantic model validation failures for records
    - Empty or oversized batch requests
    """

    def __init__(self, message: str, errors: Optional[Dict[str, Any]] = None, original_error: Optional[Exception] = None):
        """Initialize validation error.

        Args:
            message: Human-readable error message
            errors: Dictionary of field-level validation errors
            original_error: The original exception that caused this error
        """
        self.errors = errors or {}
        context = {
            'validation_errors': self.errors
        }
        super().__init__(message, original_error, context)
