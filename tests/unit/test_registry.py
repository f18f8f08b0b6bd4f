"""Tests for the strategy registry."""

import pytest

from snowflake_loader.core.exceptions import StrategyError
from snowflake_loader.core.registry import (
    clear_registry,
    get_strategy,
    list_strategy_types,
    register_strategy,
    resolve_strategy,
)
from snowflake_loader.core.strategy import DestinationType


class MockLoader:
    """Mock loading handler for testing."""

    def __init__(self, name, config):
        self.name = name
        self.config = config


@pytest.fixture(autouse=True)
def clean_registry():
    """Clear registry before and after each test."""
    clear_registry()
    yield
    clear_registry()


class TestRegistry:
    """Tests for strategy registration and lookup."""

    def test_register_direct(self):
        """Test registering a factory with a direct call."""
        register_strategy(DestinationType.COPY_S3, lambda config: MockLoader("s3", config))
        assert list_strategy_types() == ["COPY_S3"]

    def test_register_decorator(self):
        """Test registering a factory as a decorator."""

        @register_strategy(DestinationType.COPY_GCS)
        def create_gcs_loader(config):
            return MockLoader("gcs", config)

        loader = get_strategy(DestinationType.COPY_GCS, {})
        assert loader.name == "gcs"
        assert create_gcs_loader({}).name == "gcs"

    def test_register_by_value(self):
        """String values are accepted in place of the enum."""
        register_strategy("INTERNAL_STAGING", lambda config: MockLoader("internal", config))
        assert get_strategy(DestinationType.INTERNAL_STAGING, {}).name == "internal"

    def test_duplicate_registration(self):
        """Test that registering the same type twice raises."""
        register_strategy(DestinationType.COPY_S3, lambda config: None)
        with pytest.raises(StrategyError) as exc_info:
            register_strategy(DestinationType.COPY_S3, lambda config: None)
        assert "already registered" in str(exc_info.value)

    def test_unknown_strategy(self):
        """Test lookup of an unregistered type."""
        register_strategy(DestinationType.COPY_S3, lambda config: None)
        with pytest.raises(StrategyError) as exc_info:
            get_strategy(DestinationType.COPY_GCS, {})
        assert "COPY_GCS" in str(exc_info.value)
        assert exc_info.value.context["available_types"] == "COPY_S3"

    def test_empty_registry_message(self):
        """Lookup on an empty registry lists no types."""
        with pytest.raises(StrategyError) as exc_info:
            get_strategy(DestinationType.COPY_S3, {})
        assert exc_info.value.context["available_types"] == "(none)"


class TestResolveStrategy:
    """Tests for resolve_strategy."""

    @pytest.fixture(autouse=True)
    def register_all(self):
        register_strategy(DestinationType.COPY_GCS, lambda config: MockLoader("gcs", config))
        register_strategy(DestinationType.COPY_S3, lambda config: MockLoader("s3", config))
        register_strategy(DestinationType.INTERNAL_STAGING, lambda config: MockLoader("internal", config))

    def test_resolves_gcs(self):
        config = {"loading_method": {"bucket_name": "b", "credentials_json": "c"}}
        loader = resolve_strategy(config)
        assert loader.name == "gcs"
        assert loader.config is config

    def test_resolves_s3(self):
        assert resolve_strategy({"loading_method": {"s3_bucket_name": "b"}}).name == "s3"

    def test_resolves_default(self):
        assert resolve_strategy({}).name == "internal"
