"""
Exception types for the RDF graph core.

Graph operations (import, merge, replace, shortening, serialization) signal
failure by returning ``None`` or an empty result. The exceptions below are
reserved for programmer and configuration errors detected up front.
"""


class RdfGraphError(Exception):
    """Base class for errors raised by the package."""


class ConfigError(RdfGraphError, ValueError):
    """Raised when a configuration file or mapping is malformed."""

    def __init__(self, message: str, source: str = "") -> None:
        self.source = source
        if source:
            message = f"{source}: {message}"
        super().__init__(message)


class RegistryFrozenError(RdfGraphError, RuntimeError):
    """Raised when registering an ontology factory into a frozen registry."""
