"""
Centralized exception definitions for the translator client.

Every failure surfaced by the library inherits from TranslationError so
callers can catch a single type. Subclasses mirror the stage that failed:

Groups:
-------
1. Argument Errors   (raised before any I/O)
2. HTTP Errors       (transport, status, body)
3. Decoding Errors   (unexpected response shape)
"""


class TranslationError(Exception):
    """Root translator error, base for all custom exceptions."""
    description = "Translation failed"

    def __init__(self, message=None, details=None):
        super().__init__(message or self.description)
        self.message = message or self.description
        self.details = details or {}

    def to_dict(self):
        """Serialize error info into a JSON-safe dictionary."""
        return {
            "status": "error",
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details
        }


# ==============================================================================
# 1. ARGUMENT ERRORS
# ==============================================================================

class InvalidArgumentError(TranslationError, ValueError):
    description = "Invalid translation argument"


class UnknownLanguageError(TranslationError, LookupError):
    description = "Unknown language"

    def __init__(self, value, message=None):
        super().__init__(
            message or f"No language matches {value!r}",
            {"value": value},
        )
        self.value = value


# ==============================================================================
# 2. HTTP ERRORS
# ==============================================================================

class TransportError(TranslationError):
    """
    Raised when the HTTP request could not be completed at all
    (connection refused, DNS failure, timeout, broken stream).
    The original exception is kept on ``cause`` and chained.
    """
    description = "Exception caught from HTTP request"

    def __init__(self, message=None, cause=None):
        details = {"cause": repr(cause)} if cause is not None else None
        super().__init__(message, details)
        self.cause = cause


class HttpStatusError(TranslationError):
    description = "Error caught from HTTP request"

    def __init__(self, status_code, message=None):
        super().__init__(
            message or f"{self.description}: {status_code}",
            {"status_code": status_code},
        )
        self.status_code = status_code


class EmptyBodyError(TranslationError):
    description = "Response body was empty"


# ==============================================================================
# 3. DECODING ERRORS
# ==============================================================================

class MalformedResponseError(TranslationError):
    description = "Unexpected response format"
