"""Domain-level exceptions.

Every rule violation in the shop is a subclass of DomainException so the
CLI layer can catch them in one place and show a readable message.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""
