"""Read-only helpers for loosely-typed configuration documents.

Configuration documents arrive as plain nested mappings (parsed JSON or YAML).
These helpers look up keys without assuming a schema and never mutate the
document they are given.
"""

from types import MappingProxyType
from typing import Any, Mapping

LOADING_METHOD = "loading_method"
HOST = "host"

# GCS staging
BUCKET_NAME = "bucket_name"
CREDENTIALS_JSON = "credentials_json"

# S3 staging
S3_BUCKET_NAME = "s3_bucket_name"

_EMPTY: Mapping[str, Any] = MappingProxyType({})
_MISSING = object()


def get_section(config: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    """Return the nested mapping stored under ``key``.

    A missing key, a ``None`` value or a non-mapping value all yield an empty
    mapping, so callers can probe the section without guarding.
    """
    section = config.get(key) if isinstance(config, Mapping) else None
    if isinstance(section, Mapping):
        return section
    return _EMPTY


def has_keys(section: Mapping[str, Any], *keys: str) -> bool:
    """Return True if every key is present in ``section``, whatever its value."""
    return all(key in section for key in keys)


def get_path(document: Mapping[str, Any], path: str, default: Any = _MISSING) -> Any:
    """Walk a dotted path such as ``properties.host.pattern``.

    Args:
        document: Nested mapping to read from
        path: Dot-separated key path
        default: Value returned when a segment is missing. If omitted, a
            missing segment raises KeyError.

    Returns:
        The value found at the end of the path

    Raises:
        KeyError: If a segment is missing and no default was given
    """
    current: Any = document
    for part in path.split("."):
        if not isinstance(current, Mapping) or part not in current:
            if default is _MISSING:
                raise KeyError(path)
            return default
        current = current[part]
    return current
