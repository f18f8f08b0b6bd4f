"""Loading strategy classification for Snowflake destination configurations.

The ``loading_method`` section of a destination configuration decides how
records reach Snowflake:

- ``COPY_GCS``: files are staged in a Google Cloud Storage bucket and loaded
  with COPY. Requires both ``bucket_name`` and ``credentials_json``.
- ``COPY_S3``: files are staged in an S3 bucket and loaded with COPY.
  Triggered by ``s3_bucket_name`` alone; the S3 credentials are checked by
  whoever performs the upload.
- ``INTERNAL_STAGING``: the default, records go through a Snowflake internal
  stage.

Only key presence matters. Values are never inspected, so an empty bucket
name still selects its strategy.
"""

import logging
from enum import Enum
from typing import Any, Mapping

from snowflake_loader.core.config_access import (
    BUCKET_NAME,
    CREDENTIALS_JSON,
    LOADING_METHOD,
    S3_BUCKET_NAME,
    get_section,
    has_keys,
)

logger = logging.getLogger(__name__)


class DestinationType(str, Enum):
    """Supported data loading strategies."""

    COPY_GCS = "COPY_GCS"
    COPY_S3 = "COPY_S3"
    INTERNAL_STAGING = "INTERNAL_STAGING"


def is_gcs_copy(config: Mapping[str, Any]) -> bool:
    """Return True if the loading method names a GCS bucket and its credentials."""
    loading_method = get_section(config, LOADING_METHOD)
    return has_keys(loading_method, BUCKET_NAME, CREDENTIALS_JSON)


def is_s3_copy(config: Mapping[str, Any]) -> bool:
    """Return True if the loading method names an S3 bucket."""
    loading_method = get_section(config, LOADING_METHOD)
    return has_keys(loading_method, S3_BUCKET_NAME)


def get_type_from_config(config: Mapping[str, Any]) -> DestinationType:
    """Classify a destination configuration into its loading strategy.

    Checks run in order and the first match wins: GCS COPY, then S3 COPY,
    then internal staging. Any mapping resolves to a strategy; incomplete
    credentials are left for the loading code to reject.

    Args:
        config: Destination configuration document (read only)

    Returns:
        The DestinationType to use for loading
    """
    if is_gcs_copy(config):
        destination_type = DestinationType.COPY_GCS
    elif is_s3_copy(config):
        destination_type = DestinationType.COPY_S3
    else:
        destination_type = DestinationType.INTERNAL_STAGING

    logger.debug(
        "Resolved destination type",
        extra={"destination_type": destination_type.value},
    )
    return destination_type


classify = get_type_from_config
