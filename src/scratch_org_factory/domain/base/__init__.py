"""Base domain layer - shared kernel for all bounded contexts."""

from .exceptions import (
    ConfigurationError,
    DomainException,
    ValidationError,
)

__all__ = [
    "DomainException",
    "ValidationError",
    "ConfigurationError",
]
