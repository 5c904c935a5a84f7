"""
StripeKit exceptions.

One hierarchy for everything the client can raise: encoding failures,
configuration errors, and anything surfaced by the transport.
"""

from typing import Any


class StripeKitError(Exception):
    """Base exception for all StripeKit errors."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        original_error: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.original_error = original_error

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, details={self.details})"


class UnsupportedValueKind(StripeKitError, TypeError):
    """Raised when a parameter value cannot be form-encoded.

    Attributes:
        key_path: Bracketed key of the offending value (e.g. "metadata[when]")
        value: The value that failed to encode
    """

    def __init__(self, key_path: str, value: Any, reason: str | None = None):
        self.key_path = key_path
        self.value = value
        message = reason or f"cannot encode value of type {type(value).__name__}"
        super().__init__(
            f"{message} at {key_path!r}",
            details={"key_path": key_path, "value_type": type(value).__name__},
        )


class StripeConfigError(StripeKitError, ValueError):
    """Invalid configuration provided."""

    pass


class InvalidParamsError(StripeKitError, ValueError):
    """Route method arguments do not fit the operation's parameter schema.

    Raised before anything is sent. `details["errors"]` lists each failing
    field as {"field": "recurring.interval", "message": ...}.
    """

    pass


class TransportError(StripeKitError):
    """Any failure surfaced by the transport (network, HTTP status, body)."""

    pass


class APIConnectionError(TransportError):
    """Unable to reach the Stripe API."""

    pass


class APIStatusError(TransportError):
    """Stripe answered with a non-2xx status.

    Carries the fields of Stripe's error envelope when present.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        error_type: str | None = None,
        code: str | None = None,
        param: str | None = None,
        request_id: str | None = None,
        body: Any = None,
        original_error: Exception | None = None,
    ):
        self.status_code = status_code
        self.error_type = error_type
        self.code = code
        self.param = param
        self.request_id = request_id
        self.body = body
        details: dict[str, Any] = {"status_code": status_code}
        if error_type:
            details["type"] = error_type
        if code:
            details["code"] = code
        if param:
            details["param"] = param
        if request_id:
            details["request_id"] = request_id
        super().__init__(message, details=details, original_error=original_error)


class InvalidRequestError(APIStatusError):
    """Raised for 400 responses (bad parameters)."""

    pass


class AuthenticationError(APIStatusError):
    """Raised for 401 responses."""

    pass


class CardError(APIStatusError):
    """Raised for 402 responses (card declined, payment failed)."""

    pass


class PermissionDeniedError(APIStatusError):
    """Raised for 403 responses."""

    pass


class ResourceNotFoundError(APIStatusError):
    """Raised for 404 responses."""

    pass


class IdempotencyError(APIStatusError):
    """Raised for 409 responses (idempotency key reused with other params)."""

    pass


class RateLimitError(APIStatusError):
    """Raised for 429 responses."""

    pass


class APIError(APIStatusError):
    """Raised for 5xx responses, unexpected statuses and malformed bodies."""

    pass
