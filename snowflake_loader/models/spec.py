"""Connector specification model and loader."""

import json
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from snowflake_loader.core.config_access import get_path
from snowflake_loader.core.exceptions import SpecError

HOST_PATTERN_PATH = "properties.host.pattern"


class ConnectorSpecification(BaseModel):
    """Connector specification document.

    Field names follow the snake_case Python convention; the camelCase keys
    used in ``spec.json`` files are accepted as aliases.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow", frozen=True)

    documentation_url: Optional[str] = Field(
        default=None, alias="documentationUrl", description="Connector documentation URL"
    )
    connection_specification: Dict[str, Any] = Field(
        alias="connectionSpecification",
        description="JSON schema describing the destination configuration",
    )
    supports_incremental: bool = Field(default=False, alias="supportsIncremental")
    supported_destination_sync_modes: List[str] = Field(default_factory=list)

    def host_pattern(self) -> str:
        """Return the regular expression at ``properties.host.pattern``.

        Raises:
            SpecError: If the pattern is missing or not a string
        """
        try:
            pattern = get_path(self.connection_specification, HOST_PATTERN_PATH)
        except KeyError as e:
            raise SpecError(
                "Connector specification has no host pattern",
                context={"path": HOST_PATTERN_PATH},
            ) from e
        if not isinstance(pattern, str):
            raise SpecError(
                "Host pattern must be a string",
                context={"path": HOST_PATTERN_PATH, "type": type(pattern).__name__},
            )
        return pattern


def load_spec(path: str | None = None) -> ConnectorSpecification:
    """Load a connector specification from ``path`` or the packaged default.

    Args:
        path: Path to a spec.json file. If omitted, the specification shipped
              with the package is used.

    Returns:
        ConnectorSpecification instance

    Raises:
        SpecError: If the file is missing or unreadable, not valid JSON, or fails validation
    """
    if path is None:
        return _load_default_spec()

    spec_path = Path(path)
    try:
        text = spec_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise SpecError(f"Specification file not found: {path}", context={"path": path})
    except (OSError, UnicodeDecodeError) as e:
        raise SpecError(f"Cannot read specification file: {e}", context={"path": path}) from e
    return _parse_spec(text, source=path)


@lru_cache(maxsize=1)
def _load_default_spec() -> ConnectorSpecification:
    spec_file = resources.files("snowflake_loader").joinpath("resources").joinpath("spec.json")
    text = spec_file.read_text(encoding="utf-8")
    return _parse_spec(text, source="snowflake_loader/resources/spec.json")


def _parse_spec(text: str, source: str) -> ConnectorSpecification:
    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise SpecError(
            f"Invalid JSON in specification: {e}", context={"path": source}
        ) from e

    try:
        return ConnectorSpecification.model_validate(document)
    except ValidationError as e:
        raise SpecError(
            f"Specification validation failed: {e}", context={"path": source}
        ) from e
