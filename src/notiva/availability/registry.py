"""Backend availability tracking.

A backend is available when it has a credential and is not cooling down
after a failure. Failures are recorded by the orchestrator; the classifier
only reads. The cooldown acts as a fixed-window circuit breaker.
"""

import logging
import threading
import time
from collections.abc import Callable

from .credentials import CredentialStore
from .models import BackendStatus, BackendType

logger = logging.getLogger(__name__)

ERROR_COOLDOWN_SECONDS = 30 * 60


class AvailabilityRegistry:
    """Per-backend credential presence and error cooldown state.

    Args:
        credentials: Source of API keys
        clock: Returns the current time in seconds (injectable for tests)
        cooldown_seconds: How long a failed backend stays unavailable
    """

    def __init__(
        self,
        credentials: CredentialStore | None = None,
        clock: Callable[[], float] = time.time,
        cooldown_seconds: float = ERROR_COOLDOWN_SECONDS,
    ):
        self._credentials = credentials or CredentialStore()
        self._clock = clock
        self._cooldown = cooldown_seconds
        self._lock = threading.Lock()
        self._statuses: dict[BackendType, BackendStatus] = {
            backend: BackendStatus() for backend in BackendType
        }

    @property
    def credentials(self) -> CredentialStore:
        return self._credentials

    def is_available(self, backend: BackendType) -> bool:
        """Check whether a backend may be selected right now."""
        status = self._statuses[backend]
        if status.has_recent_error and self._clock() - status.last_error_time < self._cooldown:
            return False
        return self._credentials.has_credential(backend)

    def mark_error(self, backend: BackendType) -> None:
        """Record a failure, starting (or restarting) the cooldown window."""
        with self._lock:
            status = self._statuses[backend]
            self._statuses[backend] = BackendStatus(
                has_recent_error=True,
                last_error_time=self._clock(),
                error_count=status.error_count + 1,
            )
        logger.warning(
            "Backend %s marked unavailable for %ds (errors: %d)",
            backend.value, self._cooldown, status.error_count + 1,
        )

    def reset(self, backend: BackendType) -> None:
        """Clear all error state for a backend."""
        with self._lock:
            self._statuses[backend] = BackendStatus()

    def status(self, backend: BackendType) -> BackendStatus:
        """Return a copy of the backend's error bookkeeping."""
        return self._statuses[backend].model_copy()

    def snapshot(self) -> dict[BackendType, bool]:
        """Availability of every backend at the current clock reading."""
        return {backend: self.is_available(backend) for backend in BackendType}
