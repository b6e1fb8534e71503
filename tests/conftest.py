"""
Test configuration and fixtures for the SimpleDB demo.

Provides a fixed configuration, a mocked boto3 SimpleDB client patched into
DomainGateway, and a DemoRunner that records its console output.
"""

import sys
from pathlib import Path
from typing import List
from unittest.mock import Mock, patch

# Add parent directory to path so we can import simpledb_demo
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from simpledb_demo import DemoRunner, DomainGateway, SimpleDBConfig


@pytest.fixture
def mock_config():
    """SimpleDB configuration for testing."""
    return SimpleDBConfig(
        aws_access_key_id="fake_key",
        aws_secret_access_key="fake_secret",
        profile_name=None,
        region_name="us-east-1",
        endpoint_url=None,
        domain_name="customer",
        propagation_delay_seconds=1.0,
        consistent_read=False
    )


@pytest.fixture
def mock_sdb_client():
    """Mock boto3 SimpleDB client with empty, successful responses."""
    client = Mock()
    client.create_domain.return_value = {
        'ResponseMetadata': {'RequestId': 'req-create', 'HTTPStatusCode': 200}
    }
    client.list_domains.return_value = {'DomainNames': []}
    client.domain_metadata.return_value = {'ItemCount': 0}
    client.batch_put_attributes.return_value = {}
    client.select.return_value = {'Items': []}
    client.delete_domain.return_value = {}
    return client


@pytest.fixture
def gateway(mock_config, mock_sdb_client):
    """DomainGateway whose client property returns the mock client."""
    with patch.object(DomainGateway, 'client', mock_sdb_client):
        yield DomainGateway(mock_config)


@pytest.fixture
def printed() -> List[str]:
    """Lines the runner printed."""
    return []


@pytest.fixture
def mock_sleep():
    return Mock()


@pytest.fixture
def runner(mock_config, gateway, mock_sleep, printed):
    """DemoRunner wired to the mocked gateway."""
    return DemoRunner(mock_config, gateway=gateway, sleep=mock_sleep, echo=printed.append)
