"""Domain-level exceptions.

Every rejected request is expressed as a subclass of DomainException so the
CLI layer can catch them uniformly and display user-friendly messages.
None of them are fatal: the stores are never left half-updated.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class InvalidArgumentError(DomainException):
    """A quantity, price or other input value is out of range."""


class ProductNotFoundError(DomainException):
    """The requested product is not in the catalog."""


class InsufficientInventoryError(DomainException):
    """Available inventory is lower than the requested quantity."""
