"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error.

    Raised for malformed or missing input before any persistence access.
    """

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str, message: str | None = None):
        self.resource = resource
        self.identifier = identifier
        super().__init__(message or f"{resource} not found: {identifier}")


class ContentDeletedError(DomainError):
    """Raised when attempting to change the content of deleted content."""

    def __init__(self, resource: str, resource_id: str):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(f"Cannot edit deleted {resource} {resource_id}")


class ConflictError(DomainError):
    """Transient conflict reported by the persistence layer.

    Raised for serialization failures and deadlocks. The message service
    retries the operation; callers never see this error directly.
    """

    pass


class OperationFailedError(DomainError):
    """Raised when an operation still conflicts after all retries."""

    def __init__(self, operation: str, attempts: int):
        self.operation = operation
        self.attempts = attempts
        super().__init__(f"Operation {operation} failed after {attempts} attempts")
