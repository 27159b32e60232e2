"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
Draft composition errors are recoverable: the caller shows them inline and
lets the user try again.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class DuplicateProductError(ValidationError):
    """The product already has a line in the draft."""


class InvalidQuantityError(ValidationError):
    """A line quantity is not a positive number."""


class DraftNotEditableError(ValidationError):
    """The draft was already submitted and can no longer change."""


class UnknownProductError(EntityNotFoundError):
    """The product is not part of the catalog."""


class UnknownLineError(EntityNotFoundError):
    """The draft has no line for the product."""
