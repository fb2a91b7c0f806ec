class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    retryable: bool = False

    def __init__(self, message: str, status_code: int = 500) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class ValidationError(DomainError):
    """Malformed or missing request fields, rejected before any store mutation."""

    def __init__(self, message: str) -> None:
        super().__init__(message, 400)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class CapacityError(DomainError):
    """Not enough `available` stock on a ticket type for the requested quantity."""

    def __init__(self, *, ticket_type_id: int, ticket_type_name: str, requested: int) -> None:
        super().__init__(f'Not enough tickets available for {ticket_type_name}', 409)
        self.ticket_type_id = ticket_type_id
        self.ticket_type_name = ticket_type_name
        self.requested = requested


class StateConflictError(DomainError):
    """Operation is not valid for the entity's current status."""

    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


class IntegrityConflictError(CustomBaseError):
    """Unique or foreign-key constraint violation; the transaction was rolled back."""

    retryable = True

    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


class TransientError(CustomBaseError):
    """Store unavailable, lock timeout or deadlock; the transaction was rolled back."""

    retryable = True

    def __init__(self, message: str) -> None:
        super().__init__(message, 503)
