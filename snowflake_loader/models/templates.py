"""Template rendering for configuration values with Jinja2-style syntax."""

import os
import re
from typing import Any, Dict

from snowflake_loader.core.exceptions import ConfigError

_TEMPLATE_PATTERN = re.compile(r"\{\{\s*([^}]+?)\s*\}\}")
_CALL_PATTERN = re.compile(r"(\w+)\(['\"]([^'\"]+)['\"]\)$")


def render_templates(
    config: Dict[str, Any], cli_vars: Dict[str, str] | None = None
) -> Dict[str, Any]:
    """
    Render Jinja2-style templates in a configuration dictionary.

    Supports:
    - {{ env_var('VAR_NAME') }} - environment variable lookup
    - {{ var('VAR_NAME') }} - CLI variable lookup

    Keys are left untouched; only string values are rendered. The input is not
    modified.

    Args:
        config: Configuration dictionary (may contain template expressions)
        cli_vars: Variables passed via CLI (e.g., --vars key=value)

    Returns:
        New configuration dictionary with templates rendered
    """
    functions = {
        "env_var": _get_env_var,
        "var": lambda key: _get_cli_var(key, cli_vars or {}),
    }
    return _render_dict(config, functions)


def _get_env_var(key: str) -> str:
    """Get environment variable or raise error if not found."""
    value = os.environ.get(key)
    if value is None:
        raise ConfigError(
            f"Environment variable '{key}' not found",
            context={"key": key},
        )
    return value


def _get_cli_var(key: str, cli_vars: Dict[str, str]) -> str:
    """Get CLI variable or raise error if not found."""
    if key not in cli_vars:
        raise ConfigError(
            f"CLI variable '{key}' not provided",
            context={"key": key, "available": list(cli_vars.keys())},
        )
    return cli_vars[key]


def _render_dict(data: Dict[str, Any], functions: Dict[str, Any]) -> Dict[str, Any]:
    return {key: _render_value(value, functions) for key, value in data.items()}


def _render_value(value: Any, functions: Dict[str, Any]) -> Any:
    if isinstance(value, dict):
        return _render_dict(value, functions)
    elif isinstance(value, list):
        return [_render_value(item, functions) for item in value]
    elif isinstance(value, str):
        return _render_string(value, functions)
    else:
        return value


def _render_string(text: str, functions: Dict[str, Any]) -> str:
    def replace(match):
        expr = match.group(1).strip()
        call = _CALL_PATTERN.match(expr)
        if call is None:
            raise ConfigError(
                f"Unsupported template expression: {expr}",
                context={"expression": expr},
            )
        func_name, arg = call.group(1), call.group(2)
        if func_name not in functions:
            raise ConfigError(
                f"Unknown function: {func_name}",
                context={"expression": expr, "available": sorted(functions)},
            )
        return str(functions[func_name](arg))

    return _TEMPLATE_PATTERN.sub(replace, text)
