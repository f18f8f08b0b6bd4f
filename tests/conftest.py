"""Pytest configuration and shared fixtures."""

import tempfile
from pathlib import Path

import pytest

from snowflake_loader.models.spec import load_spec

EXAMPLES_DIR = Path(__file__).parent.parent / "examples" / "configs"


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def config_dir(temp_dir):
    """Create a configs subdirectory in temp_dir."""
    configs_dir = temp_dir / "configs"
    configs_dir.mkdir()
    return configs_dir


@pytest.fixture
def examples_dir():
    """Directory holding the example destination configurations."""
    return EXAMPLES_DIR


@pytest.fixture
def host_pattern():
    """Host pattern from the packaged connector specification."""
    return load_spec().host_pattern()


@pytest.fixture
def env_vars(monkeypatch):
    """Fixture to set environment variables for testing."""
    test_vars = {
        "SNOWFLAKE_HOST": "ab12345.us-east-2.aws.snowflakecomputing.com",
        "S3_BUCKET": "fake-bucket",
        "AWS_ACCESS_KEY_ID": "test",
        "AWS_SECRET_ACCESS_KEY": "test key",
    }
    for key, value in test_vars.items():
        monkeypatch.setenv(key, value)
    return test_vars
