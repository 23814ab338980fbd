"""Credential storage for backends that need an API key.

Hides where keys come from (environment, settings, runtime updates).
The encyclopedia backend is keyless and never has an entry here.
"""

import threading

from ..errors import CredentialMissingError
from .models import BackendType

_KEYED_BACKENDS = (BackendType.WEATHER, BackendType.GENERATIVE_CHAT)


class CredentialStore:
    """In-memory holder for per-backend API keys.

    Blank keys are treated the same as missing ones.
    """

    def __init__(self, weather_key: str | None = None, generative_key: str | None = None):
        self._lock = threading.Lock()
        self._keys: dict[BackendType, str | None] = {
            BackendType.WEATHER: weather_key,
            BackendType.GENERATIVE_CHAT: generative_key,
        }

    @classmethod
    def from_settings(cls, settings) -> "CredentialStore":
        """Build a store from a ``notiva.config.Settings`` instance."""
        return cls(
            weather_key=settings.weather_api_key,
            generative_key=settings.gemini_api_key,
        )

    def get(self, backend: BackendType) -> str | None:
        """Return the configured key, or None when missing or blank."""
        key = self._keys.get(backend)
        if key is None or not key.strip():
            return None
        return key

    def require(self, backend: BackendType) -> str:
        """Return the configured key for a keyed backend.

        Raises:
            CredentialMissingError: If the key is missing or blank
        """
        key = self.get(backend)
        if key is None:
            raise CredentialMissingError(f"No API key configured for {backend.value}")
        return key

    def set(self, backend: BackendType, key: str | None) -> None:
        """Store (or clear, with None) the key for a keyed backend.

        Raises:
            ValueError: If the backend does not take a key
        """
        if backend not in _KEYED_BACKENDS:
            raise ValueError(f"Backend {backend.value} does not use a credential")
        with self._lock:
            self._keys[backend] = key

    def has_credential(self, backend: BackendType) -> bool:
        if backend == BackendType.ENCYCLOPEDIA:
            return True
        return self.get(backend) is not None
