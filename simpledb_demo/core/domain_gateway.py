"""
Thin SimpleDB Domain Gateway

This module provides a lightweight wrapper around the boto3 ``sdb`` client.
The gateway:

1. Creates the boto3 client lazily, once, from SimpleDBConfig
2. Exposes each SimpleDB operation the demo needs as a direct passthrough
3. Maps botocore ClientErrors into ServiceError subclasses that keep the
   message, HTTP status code, error code and request id together

There is no caching, retrying or pagination beyond what botocore does itself;
callers get the raw SimpleDB response back.
"""

import logging
from typing import Any, Dict, Iterable, Optional

import boto3
from botocore.config import Config
from botocore.exceptions import ClientError

from ..config import SimpleDBConfig
from ..exceptions import (
    AuthorizationError,
    ConflictError,
    ConnectionError,
    DomainNotFoundError,
    InvalidRequestError,
    LimitExceededError,
    RetryableError,
    ServiceError,
)
from ..models import ReplaceableItem

logger = logging.getLogger(__name__)

# Hard limit SimpleDB places on a single BatchPutAttributes call
MAX_BATCH_ITEMS = 25

_ERROR_CLASSES = {
    'NoSuchDomain': DomainNotFoundError,

    'DuplicateItemName': ConflictError,
    'ConditionalCheckFailed': ConflictError,
    'AttributeDoesNotExist': ConflictError,

    'NumberDomainsExceeded': LimitExceededError,
    'NumberDomainAttributesExceeded': LimitExceededError,
    'NumberDomainBytesExceeded': LimitExceededError,
    'NumberItemAttributesExceeded': LimitExceededError,
    'NumberSubmittedItemsExceeded': LimitExceededError,
    'NumberSubmittedAttributesExceeded': LimitExceededError,
    'TooManyRequestedAttributes': LimitExceededError,

    'InvalidParameterValue': InvalidRequestError,
    'InvalidParameterCombination': InvalidRequestError,
    'MissingParameter': InvalidRequestError,
    'InvalidNextToken': InvalidRequestError,
    'InvalidNumberPredicates': InvalidRequestError,
    'InvalidNumberValueTests': InvalidRequestError,
    'InvalidQueryExpression': InvalidRequestError,
    'InvalidSortExpression': InvalidRequestError,
    'InvalidAction': InvalidRequestError,

    'AuthFailure': AuthorizationError,
    'AccessFailure': AuthorizationError,
    'AccessDenied': AuthorizationError,
    'InvalidClientTokenId': AuthorizationError,
    'SignatureDoesNotMatch': AuthorizationError,
    'OptInRequired': AuthorizationError,
    'ExpiredToken': AuthorizationError,

    'ServiceUnavailable': RetryableError,
    'InternalError': RetryableError,
    'RequestTimeout': RetryableError,
    'Throttling': RetryableError,
    'ThrottlingException': RetryableError,
}


def _request_id(response: Dict[str, Any]) -> Optional[str]:
    # SimpleDB returns <RequestID>, which botocore leaves at the top level
    metadata = response.get('ResponseMetadata', {})
    return metadata.get('RequestId') or response.get('RequestID') or response.get('RequestId')


def map_sdb_error(
    error: ClientError,
    operation: str,
    domain_name: Optional[str] = None
) -> ServiceError:
    """Map a SimpleDB ClientError to a ServiceError subclass.

    Args:
        error: The botocore ClientError
        operation: The operation that failed (e.g. "CreateDomain", "Select")
        domain_name: The domain the request targeted, if any

    Returns:
        ServiceError (or subclass) carrying message, status code, error code
        and request id
    """
    response = error.response
    error_body = response.get('Error', {})
    error_code = error_body.get('Code')
    error_message = error_body.get('Message') or str(error)

    context = operation
    if domain_name:
        context += f" on {domain_name}"

    error_class = _ERROR_CLASSES.get(error_code)
    if error_class is None:
        logger.warning(f"Unknown SimpleDB error code '{error_code}' mapped to ServiceError")
        error_class = ServiceError

    return error_class(
        f"{context}: {error_message}",
        status_code=response.get('ResponseMetadata', {}).get('HTTPStatusCode'),
        error_code=error_code,
        request_id=_request_id(response),
        operation=operation,
        domain_name=domain_name,
        original_error=error,
    )


class DomainGateway:
    """
    Thin gateway for SimpleDB domain operations.

    Holds the single boto3 client used for a run. Each method issues exactly
    one SimpleDB request and returns the raw response.
    """

    def __init__(self, config: SimpleDBConfig):
        """Initialize domain gateway.

        Args:
            config: SimpleDB configuration
        """
        self.config = config
        self._client = None

    @property
    def client(self):
        """Lazy initialization of the SimpleDB client."""
        if self._client is None:
            try:
                session = boto3.Session(
                    aws_access_key_id=self.config.aws_access_key_id,
                    aws_secret_access_key=self.config.aws_secret_access_key,
                    profile_name=self.config.profile_name,
                    region_name=self.config.region_name
                )

                client_kwargs = {
                    'region_name': self.config.region_name
                }

                if self.config.endpoint_url:
                    client_kwargs['endpoint_url'] = self.config.endpoint_url

                client_kwargs['config'] = Config(
                    retries={'max_attempts': self.config.retries},
                    max_pool_connections=self.config.max_pool_connections,
                    read_timeout=self.config.timeout_seconds,
                    connect_timeout=self.config.timeout_seconds
                )

                self._client = session.client('sdb', **client_kwargs)
            except Exception as e:
                logger.error(f"Failed to create SimpleDB client: {e}")
                raise ConnectionError(f"Failed to connect to SimpleDB: {e}", e) from e
        return self._client

    def create_domain(self, domain_name: str) -> Dict[str, Any]:
        """Create a domain. SimpleDB treats re-creating an existing domain as a no-op."""
        try:
            response = self.client.create_domain(DomainName=domain_name)
            logger.info(f"Created domain {domain_name}")
            return response
        except ClientError as e:
            raise map_sdb_error(e, "CreateDomain", domain_name) from e

    def delete_domain(self, domain_name: str) -> Dict[str, Any]:
        """Delete a domain and every item in it."""
        try:
            response = self.client.delete_domain(DomainName=domain_name)
            logger.info(f"Deleted domain {domain_name}")
            return response
        except ClientError as e:
            raise map_sdb_error(e, "DeleteDomain", domain_name) from e

    def list_domains(
        self,
        max_number_of_domains: int = 100,
        next_token: Optional[str] = None
    ) -> Dict[str, Any]:
        """
        Execute a single ListDomains call.

        Args:
            max_number_of_domains: Upper bound on names returned (1-100)
            next_token: Token from a previous call to continue listing

        Returns:
            Raw response; ``DomainNames`` is absent when there are no domains
        """
        request = {'MaxNumberOfDomains': max_number_of_domains}
        if next_token:
            request['NextToken'] = next_token
        try:
            return self.client.list_domains(**request)
        except ClientError as e:
            raise map_sdb_error(e, "ListDomains") from e

    def domain_metadata(self, domain_name: str) -> Dict[str, Any]:
        """Fetch DomainMetadata (ItemCount, AttributeNameCount, ...) for one domain."""
        try:
            return self.client.domain_metadata(DomainName=domain_name)
        except ClientError as e:
            raise map_sdb_error(e, "DomainMetadata", domain_name) from e

    def batch_put_attributes(self, domain_name: str, items: Iterable[ReplaceableItem]) -> Dict[str, Any]:
        """
        Put the attributes of several items in one BatchPutAttributes call.

        Args:
            domain_name: Target domain
            items: Items to write; rendered with ReplaceableItem.to_request()

        Returns:
            Raw response
        """
        request_items = [item.to_request() for item in items]
        try:
            response = self.client.batch_put_attributes(
                DomainName=domain_name,
                Items=request_items
            )
            logger.info(f"Put {len(request_items)} items in {domain_name}")
            return response
        except ClientError as e:
            raise map_sdb_error(e, "BatchPutAttributes", domain_name) from e

    def select(
        self,
        select_expression: str,
        consistent_read: bool = False,
        next_token: Optional[str] = None
    ) -> Dict[str, Any]:
        """
        Execute a single Select call.

        Args:
            select_expression: SimpleDB select expression
            consistent_read: Read only fully propagated writes
            next_token: Token from a previous call to continue the result set

        Returns:
            Raw response with ``Items`` and, when truncated, ``NextToken``
        """
        request: Dict[str, Any] = {'SelectExpression': select_expression}
        if consistent_read:
            request['ConsistentRead'] = True
        if next_token:
            request['NextToken'] = next_token
        try:
            response = self.client.select(**request)
            logger.debug(f"Select returned {len(response.get('Items', []))} items: {select_expression}")
            return response
        except ClientError as e:
            raise map_sdb_error(e, "Select") from e


def create_domain_gateway(config: SimpleDBConfig) -> DomainGateway:
    """
    Factory function to create a DomainGateway instance.

    Args:
        config: SimpleDB configuration

    Returns:
        Configured DomainGateway instance
    """
    return DomainGateway(config)
