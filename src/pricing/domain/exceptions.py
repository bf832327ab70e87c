"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the API and CLI layers can catch them uniformly and translate them into
HTTP status codes or user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidPriceError(ValidationError):
    """A price was zero, negative or not a number."""


class InvalidDiscountError(ValidationError):
    """A discount percentage fell outside the 0-100 range."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ProductNotFoundError(EntityNotFoundError):
    """No product matched the requested ID, or the catalog is empty."""
