"""Backend availability module for notiva.

Tracks which backends have credentials and which are cooling down after errors.
"""

from .credentials import CredentialStore
from .models import BackendStatus, BackendType
from .registry import ERROR_COOLDOWN_SECONDS, AvailabilityRegistry

__all__ = [
    "AvailabilityRegistry",
    "BackendStatus",
    "BackendType",
    "CredentialStore",
    "ERROR_COOLDOWN_SECONDS",
]
