"""Configuration loader with YAML/JSON parsing and template rendering."""

import logging
from pathlib import Path
from typing import Any, Dict

import yaml

from snowflake_loader.core.exceptions import ConfigError
from snowflake_loader.models.templates import render_templates

logger = logging.getLogger(__name__)


def load_config(path: str, cli_vars: Dict[str, str] | None = None) -> Dict[str, Any]:
    """
    Load a destination configuration document from a YAML or JSON file.

    JSON files are read with the YAML parser, which accepts them as-is.

    Args:
        path: Path to the configuration file
        cli_vars: Variables passed via CLI (e.g., --vars key=value)

    Returns:
        Configuration dictionary with templates rendered

    Raises:
        ConfigError: If file not found or unreadable, invalid YAML/JSON, or not a mapping
    """
    config_path = Path(path)
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except FileNotFoundError:
        raise ConfigError(f"Configuration file not found: {path}", context={"path": path})
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(
            f"Cannot read configuration file: {e}", context={"path": path}
        ) from e
    except yaml.YAMLError as e:
        raise ConfigError(
            f"Invalid YAML/JSON in configuration file: {e}", context={"path": path}
        ) from e

    if config is None:
        config = {}
    if not isinstance(config, dict):
        raise ConfigError(
            "Configuration file must contain a mapping",
            context={"path": path, "type": type(config).__name__},
        )

    logger.debug("Loaded configuration", extra={"config_path": path})
    return render_templates(config, cli_vars)
