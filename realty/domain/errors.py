"""Error taxonomy shared by use cases and routes."""


class ValidationError(ValueError):
    """Missing or malformed input; surfaced as a rejected request."""


class ConflictError(ValueError):
    """A uniqueness rule would be violated by the requested write."""


class AuthenticationError(ValueError):
    """Credentials did not match the stored password hash."""


class NotFoundError(LookupError):
    """The referenced record does not exist."""


class DeliveryFailure(RuntimeError):
    """A live push could not be transmitted; logged and never surfaced."""

    def __init__(self, broker_email: str, reason: BaseException | str) -> None:
        super().__init__(f"Delivery to {broker_email} failed: {reason}")
        self.broker_email = broker_email
        self.reason = reason


__all__ = [
    "AuthenticationError",
    "ConflictError",
    "DeliveryFailure",
    "NotFoundError",
    "ValidationError",
]
