"""
Configuration errors raised while building noise graphs and modules.

Every error carries the name of the offending configuration entry and, when
relevant, the name it referenced, so callers can report exactly which part of
a graph description is broken.
"""

from typing import Optional


class ConfigError(ValueError):
    """Base class for invalid noise graph or module configuration."""

    def __init__(self, message: str, name: Optional[str] = None, reference: Optional[str] = None):
        super().__init__(message)
        self.name = name
        self.reference = reference


class UnknownSeedError(ConfigError):
    """A source referenced a seed name that is not defined."""


class UnknownTypeError(ConfigError):
    """A source or generator declared a type with no registered builder."""


class ReferenceNotFoundError(ConfigError):
    """A generator referenced a source or generator that has not been built."""


class InsufficientReferencesError(ConfigError, IndexError):
    """A generator listed fewer references than its type consumes."""


__all__ = [
    "ConfigError",
    "UnknownSeedError",
    "UnknownTypeError",
    "ReferenceNotFoundError",
    "InsufficientReferencesError",
]
