import os
from unittest.mock import patch

import pytest

from simpledb_demo.config import SimpleDBConfig


class TestSimpleDBConfig:
    """Test cases for SimpleDBConfig."""

    def test_default_config(self):
        """Test default configuration values."""
        with patch.dict(os.environ, {"AWS_REGION": "us-west-2"}):
            for name in ("SIMPLEDB_DOMAIN_NAME", "SIMPLEDB_PROPAGATION_DELAY",
                         "SIMPLEDB_CONSISTENT_READ", "SIMPLEDB_DEBUG_LOGGING"):
                os.environ.pop(name, None)
            config = SimpleDBConfig()

            assert config.region_name == "us-west-2"
            assert config.domain_name == "customer"
            assert config.propagation_delay_seconds == 1.0
            assert config.max_number_of_domains == 100
            assert config.consistent_read is False
            assert config.enable_debug_logging is False
            assert config.retries == 3
            assert config.timeout_seconds == 30.0

    def test_config_from_env_vars(self):
        """Test configuration from environment variables."""
        env_vars = {
            "AWS_ACCESS_KEY_ID": "test_key",
            "AWS_SECRET_ACCESS_KEY": "test_secret",
            "AWS_PROFILE": "demo",
            "AWS_REGION": "eu-west-1",
            "SIMPLEDB_ENDPOINT_URL": "https://sdb.eu-west-1.amazonaws.com",
            "SIMPLEDB_DOMAIN_NAME": "customer_test",
            "SIMPLEDB_PROPAGATION_DELAY": "0.25",
            "SIMPLEDB_CONSISTENT_READ": "true",
            "SIMPLEDB_DEBUG_LOGGING": "TRUE",
        }

        with patch.dict(os.environ, env_vars):
            config = SimpleDBConfig.from_env()

            assert config.aws_access_key_id == "test_key"
            assert config.aws_secret_access_key == "test_secret"
            assert config.profile_name == "demo"
            assert config.region_name == "eu-west-1"
            assert config.endpoint_url == "https://sdb.eu-west-1.amazonaws.com"
            assert config.domain_name == "customer_test"
            assert config.propagation_delay_seconds == 0.25
            assert config.consistent_read is True
            assert config.enable_debug_logging is True

    def test_select_expression(self):
        config = SimpleDBConfig(domain_name="customer")

        assert config.select_expression() == "SELECT * FROM customer"

    def test_region_validation(self):
        """Test region validation."""
        with pytest.raises(ValueError, match="AWS region name is required"):
            SimpleDBConfig(region_name="")

    @pytest.mark.parametrize("domain_name", ["ab", "has space", "semi;colon", "x" * 256])
    def test_domain_name_validation(self, domain_name):
        with pytest.raises(ValueError, match="Invalid SimpleDB domain name"):
            SimpleDBConfig(domain_name=domain_name)

    @pytest.mark.parametrize("domain_name", ["abc", "customer", "my-domain.v2_test"])
    def test_valid_domain_names(self, domain_name):
        assert SimpleDBConfig(domain_name=domain_name).domain_name == domain_name

    def test_negative_delay_rejected(self):
        with pytest.raises(ValueError):
            SimpleDBConfig(propagation_delay_seconds=-1)

    @pytest.mark.parametrize("value", [0, 101])
    def test_max_number_of_domains_bounds(self, value):
        with pytest.raises(ValueError):
            SimpleDBConfig(max_number_of_domains=value)

    def test_validate_assignment(self):
        config = SimpleDBConfig(domain_name="customer")

        with pytest.raises(ValueError):
            config.domain_name = "no"
