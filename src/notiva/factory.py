"""Assembles a ready-to-use chat stack from settings."""

from .availability import AvailabilityRegistry, CredentialStore
from .backends import BackendClients, create_backend_clients
from .chat import ChatSession
from .config import Settings
from .history import MessageHistoryTracker
from .orchestrator import BackendOrchestrator


def create_orchestrator(
    settings: Settings,
    clients: BackendClients | None = None,
) -> BackendOrchestrator:
    """Wire registry, history and clients into an orchestrator.

    Args:
        settings: Credentials and client configuration
        clients: Pre-built clients (default: built from settings)

    Returns:
        BackendOrchestrator with fresh registry and history
    """
    registry = AvailabilityRegistry(CredentialStore.from_settings(settings))
    return BackendOrchestrator(
        clients=clients or create_backend_clients(settings),
        registry=registry,
        history=MessageHistoryTracker(),
    )


def create_chat_session(settings: Settings, clients: BackendClients | None = None) -> ChatSession:
    return ChatSession(create_orchestrator(settings, clients))
