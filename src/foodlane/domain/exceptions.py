"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the HTTP and CLI layers can catch them uniformly and translate them
into status codes or user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class SelfPurchaseError(ValidationError):
    """A seller tried to buy their own food."""


class InsufficientStockError(ValidationError):
    """The requested quantity exceeds the available stock."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class DuplicateOrderError(DomainException):
    """An order with the same idempotency key was already recorded."""


class AuthenticationError(DomainException):
    """The credential is missing, malformed, expired or forged."""


class ForbiddenError(DomainException):
    """The caller is authenticated but not entitled to the requested scope."""
