"""Domain-level exceptions.

Only construction-time invariant violations are raised as exceptions.
Recoverable conditions (missing product, empty cart, ...) are reported
through the application Reporter instead and never reach this module.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A value or entity could not be constructed because an invariant failed."""
