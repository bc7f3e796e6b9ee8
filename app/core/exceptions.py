"""Domain error types shared by services and the HTTP layer."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for callers that only care that the input was rejected.
    """


class ValidationError(DomainError):
    """Malformed or missing required fields."""


class DuplicateKeyError(DomainError):
    """Unique constraint violation, such as a reused tax id or username."""


class NotFoundError(DomainError):
    """Requested entity does not exist."""


class ForbiddenError(DomainError):
    """Shared delete password did not match."""


class InvalidCredentialsError(DomainError):
    """Login or password change with wrong credentials."""


class UnsupportedUserTypeError(DomainError):
    """Login attempted for a user type the service does not know."""


class UnauthorizedError(DomainError):
    """Missing, unknown or insufficiently privileged session token."""


class StorageError(DomainError):
    """Unexpected persistence failure."""


def business_not_found(business_id: int) -> str:
    return f"Business {business_id} not found"


def document_not_found(transaction_id: int) -> str:
    return f"Document transaction {transaction_id} not found"


def duplicate_tax_id(tax_id: str) -> str:
    return f"Tax id '{tax_id}' already exists"
