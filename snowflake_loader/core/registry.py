"""Strategy registry mapping destination types to loading handlers.

Code that performs the actual upload or insert registers one factory per
DestinationType. ``resolve_strategy`` classifies a configuration and hands it
to the matching factory, so callers never branch on the type themselves.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, overload

from snowflake_loader.core.exceptions import StrategyError
from snowflake_loader.core.strategy import DestinationType, get_type_from_config

StrategyFactory = Callable[[Mapping[str, Any]], Any]

_strategy_registry: dict[DestinationType, StrategyFactory] = {}


@overload
def register_strategy(
    destination_type: DestinationType,
) -> Callable[[StrategyFactory], StrategyFactory]: ...


@overload
def register_strategy(destination_type: DestinationType, factory: StrategyFactory) -> None: ...


def register_strategy(
    destination_type: DestinationType,
    factory: StrategyFactory | None = None,
) -> Callable[[StrategyFactory], StrategyFactory] | None:
    """Register a loading strategy factory.

    Can be used as a decorator or called directly:

        # As decorator
        @register_strategy(DestinationType.COPY_S3)
        def create_s3_copy(config):
            return S3StreamCopier(config)

        # Direct call
        register_strategy(DestinationType.COPY_S3, create_s3_copy)

    Args:
        destination_type: The DestinationType handled by the factory.
        factory: Factory function (optional if used as decorator).

    Raises:
        StrategyError: If a factory is already registered for the type.
    """
    destination_type = DestinationType(destination_type)

    def _register(f: StrategyFactory) -> StrategyFactory:
        if destination_type in _strategy_registry:
            raise StrategyError(
                f"Strategy '{destination_type.value}' is already registered",
                context={"destination_type": destination_type.value},
            )
        _strategy_registry[destination_type] = f
        return f

    if factory is not None:
        _register(factory)
        return None

    return _register


def get_strategy(destination_type: DestinationType, config: Mapping[str, Any]) -> Any:
    """Create a loading handler using the registered factory.

    Raises:
        StrategyError: If no factory is registered for the type.
    """
    destination_type = DestinationType(destination_type)
    factory = _strategy_registry.get(destination_type)
    if factory is None:
        available = ", ".join(list_strategy_types()) or "(none)"
        raise StrategyError(
            f"No strategy registered for destination type: '{destination_type.value}'",
            context={"destination_type": destination_type.value, "available_types": available},
        )
    return factory(config)


def resolve_strategy(config: Mapping[str, Any]) -> Any:
    """Classify ``config`` and create the handler registered for its type."""
    return get_strategy(get_type_from_config(config), config)


def list_strategy_types() -> list[str]:
    """Return the registered destination types."""
    return sorted(t.value for t in _strategy_registry)


def clear_registry() -> None:
    """Clear all registered strategies. Intended for testing only."""
    _strategy_registry.clear()
