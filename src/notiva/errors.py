"""Exception hierarchy for notiva.

Orchestrator operations turn every one of these into a user-facing reply;
clients and the chat session raise them to their callers.
"""


class NotivaError(Exception):
    """Base class for all notiva errors."""


class CredentialMissingError(NotivaError):
    """No API key is configured for the backend."""


class LocationNotFoundError(NotivaError):
    """Geocoding returned nothing usable for the requested place."""


class BackendUnavailableError(NotivaError):
    """A backend answered with a non-success status or an empty payload."""

    def __init__(self, backend: str, status_code: int | None = None, detail: str | None = None):
        self.backend = backend
        self.status_code = status_code
        message = f"{backend} backend unavailable"
        if status_code is not None:
            message += f" (HTTP {status_code})"
        if detail:
            message += f": {detail}"
        super().__init__(message)


class GenerativeChatError(NotivaError):
    """The generative model failed or produced no text."""


class RetryExhaustedError(NotivaError):
    """All attempts against a backend failed."""

    def __init__(self, attempts: int, last_error: BaseException | None):
        self.attempts = attempts
        self.last_error = last_error
        super().__init__(f"Gave up after {attempts} attempts: {last_error}")


class SessionBusyError(NotivaError):
    """A message was submitted while the previous one is still being answered."""
