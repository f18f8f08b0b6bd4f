"""Tests for the public API."""

import json

import pytest

from snowflake_loader import (
    ConnectionStatus,
    DestinationType,
    check_config,
    resolve_destination_type,
)
from snowflake_loader.core.exceptions import ConfigError, SpecError
from snowflake_loader.models.spec import ConnectorSpecification

VALID_HOST = "ab12345.us-east-2.aws.snowflakecomputing.com"


class TestResolveDestinationType:
    """Tests for resolve_destination_type."""

    def test_from_mapping(self):
        config = {"loading_method": {"s3_bucket_name": "fake-bucket"}}
        assert resolve_destination_type(config) == DestinationType.COPY_S3

    def test_from_path(self, config_dir):
        config_file = config_dir / "config.json"
        config_file.write_text(
            json.dumps({"loading_method": {"bucket_name": "b", "credentials_json": "c"}})
        )
        assert resolve_destination_type(str(config_file)) == DestinationType.COPY_GCS

    def test_from_pathlib_path(self, config_dir):
        config_file = config_dir / "config.json"
        config_file.write_text(json.dumps({"loading_method": {"s3_bucket_name": "b"}}))
        assert resolve_destination_type(config_file) == DestinationType.COPY_S3

    def test_missing_path(self, config_dir):
        with pytest.raises(ConfigError):
            resolve_destination_type(str(config_dir / "missing.json"))


class TestCheckConfig:
    """Tests for check_config."""

    def test_valid_host(self):
        status = check_config({"host": VALID_HOST})
        assert status == ConnectionStatus(status="SUCCEEDED")
        assert status.succeeded is True

    def test_invalid_host(self):
        status = check_config({"host": f"https://{VALID_HOST}"})
        assert status.status == "FAILED"
        assert status.succeeded is False
        assert "does not match" in status.message

    def test_missing_host(self):
        status = check_config({"loading_method": {}})
        assert status.status == "FAILED"
        assert status.message == "Configuration has no host"

    def test_non_string_host(self):
        assert check_config({"host": 1234}).status == "FAILED"

    def test_custom_spec(self):
        spec = ConnectorSpecification(
            connection_specification={"properties": {"host": {"pattern": r"^localhost$"}}}
        )
        assert check_config({"host": "localhost"}, spec).succeeded is True
        assert check_config({"host": VALID_HOST}, spec).succeeded is False

    def test_invalid_spec_pattern_raises(self):
        spec = ConnectorSpecification(
            connection_specification={"properties": {"host": {"pattern": "(unclosed"}}}
        )
        with pytest.raises(SpecError):
            check_config({"host": VALID_HOST}, spec)
