"""
Notiva: routes chat messages to weather, encyclopedia or generative-chat backends.

Each subpackage hides one design decision: availability bookkeeping,
message history, routing rules, backend clients, and orchestration.
"""

__version__ = "0.1.0"

from .availability import AvailabilityRegistry, BackendType, CredentialStore
from .chat import ChatSession
from .config import Settings, load_settings
from .factory import create_chat_session, create_orchestrator
from .history import Message, MessageHistoryTracker
from .orchestrator import BackendOrchestrator, BackendResponse
from .routing import QueryClassification, classify

__all__ = [
    "AvailabilityRegistry",
    "BackendOrchestrator",
    "BackendResponse",
    "BackendType",
    "ChatSession",
    "CredentialStore",
    "Message",
    "MessageHistoryTracker",
    "QueryClassification",
    "Settings",
    "classify",
    "create_chat_session",
    "create_orchestrator",
    "load_settings",
]
