from typing import Any, Mapping, Optional


class MenuBotError(Exception):
    """Base class for errors raised by MenuBot services.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context (field errors, validation info)
        code: optional machine-readable error code
        http_status: suggested HTTP status code for handlers
    """

    http_status = 500
    default_message = "Unexpected error"

    def __init__(self, message: Optional[str] = None, details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"message": self.message}
        if self.code:
            payload["code"] = self.code
        if self.details:
            payload["details"] = self.details
        return payload

    def __str__(self) -> str:
        return self.message


class ServiceValidationError(MenuBotError):
    """Raised when input data is invalid or a call contract is violated
    (non-positive recommendation count, rating outside 1-5, blank menu name).

    This is distinct from "no result" outcomes such as a failed meal
    extraction, which are reported by returning ``None``.
    """

    http_status = 400
    default_message = "Invalid input"


class NotFoundError(MenuBotError):
    """Raised when a requested resource was not found. http_status is 404."""

    http_status = 404
    default_message = "Not found"


class ConflictError(MenuBotError):
    """Raised when a resource conflict occurs (e.g., duplicate menu name). http_status is 409."""

    http_status = 409
    default_message = "Conflict"
