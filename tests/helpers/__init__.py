"""
Test helpers for the SimpleDB demo.
"""

from botocore.exceptions import ClientError


def create_client_error(
    error_code: str,
    message: str = "Test error",
    status_code: int = 400,
    request_id: str = "req-123",
    operation: str = "TestOperation"
) -> ClientError:
    """Helper to create a SimpleDB ClientError for testing."""
    return ClientError(
        error_response={
            'Error': {
                'Code': error_code,
                'Message': message
            },
            'ResponseMetadata': {
                'RequestId': request_id,
                'HTTPStatusCode': status_code
            }
        },
        operation_name=operation
    )


__all__ = ['create_client_error']
