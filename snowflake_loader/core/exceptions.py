"""Exception hierarchy for the snowflake_loader package."""


class SnowflakeLoaderError(Exception):
    """Base exception for all snowflake_loader errors."""

    def __init__(self, message: str, context: dict | None = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class ConfigError(SnowflakeLoaderError):
    """Raised when a configuration document cannot be loaded or rendered."""

    pass


class SpecError(SnowflakeLoaderError):
    """Raised when the connector specification is unreadable or inconsistent."""

    pass


class StrategyError(SnowflakeLoaderError):
    """Raised when strategy handler registration or lookup fails."""

    pass
