"""
Domain error taxonomy

Business errors raised by the booking, payment and catalogue services.
The HTTP layer maps each kind to a status code in
``shared.infrastructure.exception_handler``.
"""


class DomainError(Exception):
    """Base class for errors the caller is expected to render."""

    default_message = "Domain error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class NotFoundError(DomainError):
    """A referenced unit, user, booking or payment does not exist."""

    default_message = "Resource not found"


class InvalidArgumentError(DomainError, ValueError):
    """Malformed input, e.g. an end date before the start date."""

    default_message = "Invalid argument"


class ConflictError(DomainError):
    """The requested resource is taken, e.g. a unit is already booked."""

    default_message = "Conflict"


class InvalidStateError(DomainError):
    """Illegal lifecycle transition."""

    default_message = "Invalid state"


class PaymentWindowClosedError(InvalidStateError):
    """The booking's payment window elapsed before payment arrived."""

    default_message = "Payment window closed"


class ForbiddenError(DomainError):
    """The caller does not own the resource it tries to mutate."""

    default_message = "Forbidden"


class UnavailableError(DomainError):
    """Infrastructure degradation. Absorbed at the cache boundary."""

    default_message = "Backing store unavailable"
