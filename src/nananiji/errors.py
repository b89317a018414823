"""
Exception hierarchy for the expression generator.

Division by zero during the search is *not* represented here: it is an
expected branch and ``Operator.invoke`` simply returns ``None``.
"""

from __future__ import annotations

__all__ = [
    "NananijiError",
    "SeedArityError",
    "PersistedStateError",
    "GenerationError",
    "NoMatchingRuleError",
    "GenerationDepthError",
    "RequestError",
]


class NananijiError(Exception):
    """Base class for every error raised by this package."""


class SeedArityError(NananijiError, ValueError):
    """A seed grouping has an arity other than 1, 2 or 3."""


class PersistedStateError(NananijiError, ValueError):
    """A persisted generator payload could not be decoded."""


class GenerationError(NananijiError, RuntimeError):
    """The generator's precomputed state cannot answer a target."""


class NoMatchingRuleError(GenerationError):
    """No rule in the search ordering matches the target."""

    def __init__(self, target: int):
        super().__init__(f"no decomposition rule matches {target}")
        self.target = target


class GenerationDepthError(GenerationError):
    """Recursive generation exceeded its step budget."""

    def __init__(self, target: int, max_depth: int):
        super().__init__(f"generation of {target} exceeded {max_depth} recursive steps")
        self.target = target
        self.max_depth = max_depth


class RequestError(NananijiError, ValueError):
    """A handler request could not be parsed."""
