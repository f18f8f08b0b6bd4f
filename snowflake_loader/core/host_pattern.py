"""Hostname validation against the connector specification's host pattern."""

import re
from dataclasses import dataclass, field
from functools import lru_cache
from re import Pattern
from typing import TYPE_CHECKING

from snowflake_loader.core.exceptions import SpecError

if TYPE_CHECKING:
    from snowflake_loader.models.spec import ConnectorSpecification


@lru_cache(maxsize=32)
def compile_host_pattern(host_pattern: str) -> Pattern[str]:
    """Compile a host pattern once and reuse it for later calls.

    Raises:
        SpecError: If the pattern is not a valid regular expression
    """
    try:
        return re.compile(host_pattern)
    except re.error as e:
        raise SpecError(
            f"Invalid host pattern in connector specification: {e}",
            context={"pattern": host_pattern},
        ) from e


def matches(host_pattern: str, candidate: str) -> bool:
    """Return True if any part of ``candidate`` matches ``host_pattern``.

    The match is not anchored to the whole string, so the pattern has to
    carry its own ``^``/``$`` anchors to reject schemes, ports and paths.

    Raises:
        SpecError: If the pattern is not a valid regular expression
    """
    return compile_host_pattern(host_pattern).search(candidate) is not None


@dataclass(frozen=True)
class HostValidator:
    """Host check bound to a single pattern.

    Example:
        >>> validator = HostValidator.from_spec(load_spec())
        >>> validator("ab12345.us-east-2.aws.snowflakecomputing.com")
        True
    """

    pattern: str
    _compiled: Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        # Fail at construction rather than on first use
        object.__setattr__(self, "_compiled", compile_host_pattern(self.pattern))

    @classmethod
    def from_spec(cls, spec: "ConnectorSpecification") -> "HostValidator":
        """Build a validator from the specification's ``properties.host.pattern``."""
        return cls(spec.host_pattern())

    def __call__(self, candidate: str) -> bool:
        return self._compiled.search(candidate) is not None
