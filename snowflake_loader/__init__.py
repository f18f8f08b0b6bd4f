"""Snowflake Loader - loading strategy resolution for Snowflake destinations.

Decides from a destination configuration whether data is loaded by COPY from
GCS, COPY from S3, or through Snowflake internal staging, and checks
destination hostnames against the connector specification.
"""

__version__ = "0.1.0"

# Public API
from snowflake_loader.api import ConnectionStatus, check_config, resolve_destination_type

# Exceptions
from snowflake_loader.core.exceptions import (
    ConfigError,
    SnowflakeLoaderError,
    SpecError,
    StrategyError,
)
from snowflake_loader.core.host_pattern import HostValidator, matches
from snowflake_loader.core.strategy import (
    DestinationType,
    classify,
    get_type_from_config,
    is_gcs_copy,
    is_s3_copy,
)
from snowflake_loader.models.loader import load_config
from snowflake_loader.models.spec import ConnectorSpecification, load_spec

__all__ = [
    # Version
    "__version__",
    # Public API
    "resolve_destination_type",
    "check_config",
    "ConnectionStatus",
    "load_config",
    "load_spec",
    # Core
    "DestinationType",
    "classify",
    "get_type_from_config",
    "is_gcs_copy",
    "is_s3_copy",
    "HostValidator",
    "matches",
    "ConnectorSpecification",
    # Exceptions
    "SnowflakeLoaderError",
    "ConfigError",
    "SpecError",
    "StrategyError",
]
