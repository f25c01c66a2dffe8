"""Exception types raised by the SDK."""

from __future__ import annotations


class GetuiError(Exception):
    """Base class of every error raised by the SDK."""

    default_message = "getui error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message if message is not None else self.default_message
        super().__init__(self.message)


class ConfigError(GetuiError, ValueError):
    """A configuration field is missing or invalid."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(message)

    def __str__(self) -> str:
        return f"config error: field={self.field}, message={self.message}"


class ValidationError(GetuiError, ValueError):
    """A request was rejected before being sent."""

    default_message = "invalid request"


class InvalidRequestIDError(ValidationError):
    default_message = "request_id must be between 10-32 characters"


class EmptyAudienceError(ValidationError):
    default_message = "audience cannot be empty"


class EmptyPushMessageError(ValidationError):
    default_message = "push_message cannot be empty"


class InvalidCIDError(ValidationError):
    default_message = "cid cannot be empty"


class InvalidAliasError(ValidationError):
    default_message = "alias cannot be empty"


class HTTPRequestFailedError(GetuiError):
    default_message = "http request failed"


class InvalidResponseError(GetuiError):
    default_message = "invalid response"


class UnauthorizedError(GetuiError):
    default_message = "unauthorized"


class RateLimitedError(GetuiError):
    default_message = "rate limited"


class TokenExpiredError(GetuiError):
    default_message = "token expired"


class InvalidTokenError(GetuiError):
    default_message = "invalid token"


class APIError(GetuiError):
    """The service answered with a non-zero result code."""

    def __init__(self, code: int, message: str) -> None:
        self.code = code
        super().__init__(message)

    def __str__(self) -> str:
        return f"API error: code={self.code}, message={self.message}"


class NetworkError(GetuiError):
    """Sending a request or reading its response failed."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        self.cause = cause
        super().__init__(message)
        self.__cause__ = cause

    def __str__(self) -> str:
        if self.cause is not None:
            return f"network error: {self.message}, cause: {self.cause}"
        return f"network error: {self.message}"