"""Custom exception hierarchy for the festival organizer.

All application exceptions inherit from :class:`FestivalOrganizerError`,
which carries an optional ``provider_name`` so error handlers can identify
which upstream service (e.g. "festivals_api") caused the failure.

    FestivalOrganizerError  (base -- catch-all for any application error)
    +-- ResponseParsingError      (festivals API body is not a festival list)
    +-- ProviderUnavailableError  (festivals API unreachable / network fault)
    +-- ConfigurationError        (startup / invalid config)

None of these are retried by the cache or the service layer.  The only
retries in the system live inside the REST provider's backoff loop.
"""

from __future__ import annotations


class FestivalOrganizerError(Exception):
    """Base exception for all festival organizer errors.

    Every subclass carries a human-readable ``message`` and an optional
    ``provider_name``.  ``__str__`` prefixes the provider name in brackets
    for structured log output, e.g. ``[festivals_api] Invalid response``.
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        provider_name: str | None = None,
    ) -> None:
        self._message = message
        self._provider_name = provider_name
        super().__init__(self._message)

    @property
    def message(self) -> str:
        return self._message

    @property
    def provider_name(self) -> str | None:
        return self._provider_name

    def __str__(self) -> str:
        if self._provider_name:
            return f"[{self._provider_name}] {self._message}"
        return self._message


class ResponseParsingError(FestivalOrganizerError):
    """Raised when a festivals API response body cannot be decoded.

    ``status_code`` holds the HTTP status of the response that was decoded,
    when known.  A non-200 value means the backoff loop gave up and the
    body was most likely an error page rather than a malformed festival
    list.
    """

    def __init__(
        self,
        message: str = "Exception while parsing response string",
        provider_name: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)
        self._status_code = status_code

    @property
    def status_code(self) -> int | None:
        return self._status_code


class ProviderUnavailableError(FestivalOrganizerError):
    """Raised when the festivals API cannot be reached at the network level."""

    def __init__(
        self,
        message: str = "External service is unavailable",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


class ConfigurationError(FestivalOrganizerError):
    """Raised when configuration is invalid or missing at startup."""

    def __init__(
        self,
        message: str = "Invalid or missing configuration",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)
