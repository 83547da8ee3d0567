"""Domain-level exceptions.

Value objects and entities raise these when a business rule is broken.
The store facade catches them at its boundary and reports a result code
instead, so nothing here ever reaches a caller of ``GroceryStore``.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""
