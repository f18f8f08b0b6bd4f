"""Public Python API for snowflake_loader package.

This module provides the entry points for resolving the loading strategy of a
destination configuration and for checking it before a connection is made.
"""

import logging
import os
from typing import Any, Literal, Mapping, Optional

from pydantic import BaseModel, Field

from snowflake_loader.core.config_access import HOST
from snowflake_loader.core.host_pattern import HostValidator
from snowflake_loader.core.strategy import DestinationType, get_type_from_config
from snowflake_loader.models.loader import load_config
from snowflake_loader.models.spec import ConnectorSpecification, load_spec

logger = logging.getLogger(__name__)


class ConnectionStatus(BaseModel):
    """Outcome of a configuration check."""

    status: Literal["SUCCEEDED", "FAILED"]
    message: Optional[str] = Field(default=None, description="Reason for a failed check")

    @property
    def succeeded(self) -> bool:
        return self.status == "SUCCEEDED"


def resolve_destination_type(config: Mapping[str, Any] | str | os.PathLike) -> DestinationType:
    """Resolve the loading strategy for a configuration.

    Args:
        config: Configuration mapping, or path to a YAML/JSON configuration file

    Returns:
        The DestinationType selected by the configuration's loading method

    Raises:
        ConfigError: If ``config`` is a path that cannot be loaded

    Example:
        >>> resolve_destination_type({"loading_method": {"s3_bucket_name": "b"}})
        <DestinationType.COPY_S3: 'COPY_S3'>
    """
    if isinstance(config, (str, os.PathLike)):
        config = load_config(os.fspath(config))
    return get_type_from_config(config)


def check_config(
    config: Mapping[str, Any],
    spec: ConnectorSpecification | None = None,
) -> ConnectionStatus:
    """Check a configuration's host against the specification's host pattern.

    No network connection is attempted. A missing or mismatching host yields a
    FAILED status; an invalid pattern in the specification raises.

    Args:
        config: Destination configuration document
        spec: Connector specification (defaults to the packaged one)

    Returns:
        ConnectionStatus describing the result

    Raises:
        SpecError: If the specification's host pattern is missing or invalid
    """
    validator = HostValidator.from_spec(spec or load_spec())

    host = config.get(HOST)
    if not isinstance(host, str) or not host:
        return ConnectionStatus(status="FAILED", message="Configuration has no host")

    if not validator(host):
        logger.info("Host rejected", extra={"context": {"host": host}})
        return ConnectionStatus(
            status="FAILED",
            message=f"Host '{host}' does not match pattern {validator.pattern}",
        )

    return ConnectionStatus(status="SUCCEEDED")
