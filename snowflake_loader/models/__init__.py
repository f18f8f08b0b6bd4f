"""Models module for configuration and specification documents."""

from snowflake_loader.models.loader import load_config
from snowflake_loader.models.spec import ConnectorSpecification, load_spec
from snowflake_loader.models.templates import render_templates

__all__ = [
    "ConnectorSpecification",
    "load_config",
    "load_spec",
    "render_templates",
]
