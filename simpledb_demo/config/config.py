import os
import re
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Load environment variables from .env file if it exists
load_dotenv()

_DOMAIN_NAME_PATTERN = re.compile(r'^[a-zA-Z0-9_.-]{3,255}$')


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() == "true"


class SimpleDBConfig(BaseModel):
    """Configuration for the SimpleDB connection and the demo run."""

    # Credentials are optional; boto3 falls back to ~/.aws/credentials
    aws_access_key_id: Optional[str] = Field(
        default_factory=lambda: os.getenv("AWS_ACCESS_KEY_ID"),
        description="AWS access key ID"
    )

    aws_secret_access_key: Optional[str] = Field(
        default_factory=lambda: os.getenv("AWS_SECRET_ACCESS_KEY"),
        description="AWS secret access key"
    )

    profile_name: Optional[str] = Field(
        default_factory=lambda: os.getenv("AWS_PROFILE"),
        description="Named profile from the shared AWS credentials file"
    )

    region_name: str = Field(
        default_factory=lambda: os.getenv("AWS_REGION", "us-east-1"),
        description="AWS region name"
    )

    endpoint_url: Optional[str] = Field(
        default_factory=lambda: os.getenv("SIMPLEDB_ENDPOINT_URL"),
        description="SimpleDB endpoint URL override"
    )

    # Demo settings
    domain_name: str = Field(
        default_factory=lambda: os.getenv("SIMPLEDB_DOMAIN_NAME", "customer"),
        description="Domain created, populated and deleted by the demo"
    )

    propagation_delay_seconds: float = Field(
        default_factory=lambda: float(os.getenv("SIMPLEDB_PROPAGATION_DELAY", "1.0")),
        ge=0,
        description="Pause between the batch insert and the select query"
    )

    max_number_of_domains: int = Field(
        default=100,
        ge=1,
        le=100,
        description="MaxNumberOfDomains sent with ListDomains"
    )

    consistent_read: bool = Field(
        default_factory=lambda: _env_flag("SIMPLEDB_CONSISTENT_READ"),
        description="Request a consistent read for the select query"
    )

    # Connection settings
    max_pool_connections: int = Field(
        default=10,
        description="Maximum number of connections in the connection pool"
    )

    retries: int = Field(
        default=3,
        description="Number of retry attempts botocore makes for failed requests"
    )

    timeout_seconds: float = Field(
        default=30.0,
        description="Request timeout in seconds"
    )

    # Logging settings
    enable_debug_logging: bool = Field(
        default_factory=lambda: _env_flag("SIMPLEDB_DEBUG_LOGGING"),
        description="Enable debug logging for SimpleDB operations"
    )

    @field_validator('region_name')
    @classmethod
    def validate_region(cls, v):
        """Validate AWS region name."""
        if not v:
            raise ValueError("AWS region name is required")
        return v

    @field_validator('domain_name')
    @classmethod
    def validate_domain_name(cls, v):
        """SimpleDB domain names are 3-255 characters of a-z, A-Z, 0-9, '_', '-' and '.'."""
        if not _DOMAIN_NAME_PATTERN.match(v):
            raise ValueError(f"Invalid SimpleDB domain name: {v!r}")
        return v

    def select_expression(self) -> str:
        """Select-all query for the configured domain."""
        return f"SELECT * FROM {self.domain_name}"

    @classmethod
    def from_env(cls) -> 'SimpleDBConfig':
        """Create configuration from environment variables.

        Returns:
            SimpleDBConfig instance
        """
        return cls()

    model_config = ConfigDict(
        validate_assignment=True,
    )
