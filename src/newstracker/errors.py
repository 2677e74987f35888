"""Search error kinds and the exceptions that carry them."""

from enum import StrEnum


class ErrorKind(StrEnum):
    """Categories of search failure surfaced to the user."""

    MISSING_CREDENTIAL = "missing_credential"
    INVALID_CREDENTIAL = "invalid_credential"
    QUOTA_EXCEEDED = "quota_exceeded"
    RATE_LIMITED = "rate_limited"
    API_ERROR = "api_error"
    TRANSPORT_FAILURE = "transport_failure"
    EMPTY_RESULT = "empty_result"


class SearchError(Exception):
    """Base class for every failure a search can end in.

    Args:
        message: User-visible description of the failure.
        status: HTTP status code, when the failure came from a response.
    """

    kind: ErrorKind = ErrorKind.API_ERROR
    default_message: str = "Search failed."

    def __init__(self, message: str | None = None, *, status: int | None = None) -> None:
        self.message = message or self.default_message
        self.status = status
        super().__init__(self.message)


class MissingCredentialError(SearchError):
    kind = ErrorKind.MISSING_CREDENTIAL
    default_message = "Please enter your World News API key first"


class InvalidCredentialError(SearchError):
    kind = ErrorKind.INVALID_CREDENTIAL
    default_message = "Invalid API key. Please check your World News API key."


class QuotaExceededError(SearchError):
    kind = ErrorKind.QUOTA_EXCEEDED
    default_message = "API quota exceeded. Please check your World News API plan."


class RateLimitedError(SearchError):
    kind = ErrorKind.RATE_LIMITED
    default_message = "Rate limit exceeded. Please wait a moment and try again."


class ApiError(SearchError):
    """Any other non-success response from the news API."""

    kind = ErrorKind.API_ERROR


class TransportFailureError(SearchError):
    """The API could not be reached on any attempt."""

    kind = ErrorKind.TRANSPORT_FAILURE
    default_message = (
        "Network error: the news API could not be reached directly or through the relay."
    )


class EmptyResultError(SearchError):
    """The call succeeded but produced no articles."""

    kind = ErrorKind.EMPTY_RESULT
    default_message = "No articles found for this search. Try different keywords or filters."


def error_for_status(status: int, reason: str = "") -> SearchError:
    """Map a non-success HTTP status to the matching search error.

    Args:
        status: HTTP status code of the response.
        reason: Reason phrase reported with the status.

    Returns:
        The exception to raise for this status.
    """
    if status == 401:
        return InvalidCredentialError(status=status)
    if status == 403:
        return QuotaExceededError(status=status)
    if status == 429:
        return RateLimitedError(status=status)
    return ApiError(f"API Error: {status} - {reason}", status=status)
