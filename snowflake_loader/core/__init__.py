"""Core module for snowflake_loader package."""

from snowflake_loader.core.exceptions import (
    ConfigError,
    SnowflakeLoaderError,
    SpecError,
    StrategyError,
)
from snowflake_loader.core.host_pattern import HostValidator, compile_host_pattern, matches
from snowflake_loader.core.registry import (
    clear_registry,
    get_strategy,
    list_strategy_types,
    register_strategy,
    resolve_strategy,
)
from snowflake_loader.core.strategy import (
    DestinationType,
    classify,
    get_type_from_config,
    is_gcs_copy,
    is_s3_copy,
)

__all__ = [
    "DestinationType",
    "classify",
    "get_type_from_config",
    "is_gcs_copy",
    "is_s3_copy",
    "HostValidator",
    "compile_host_pattern",
    "matches",
    "register_strategy",
    "get_strategy",
    "resolve_strategy",
    "list_strategy_types",
    "clear_registry",
    "SnowflakeLoaderError",
    "ConfigError",
    "SpecError",
    "StrategyError",
]
