"""Provider factory functions for CLI.

Centralizes creation of settings and the chat stack from environment variables.
Hides configuration details from command implementations.
"""

from rich.console import Console

from ..availability import BackendType
from ..chat import ChatSession
from ..config import Settings, load_settings
from ..factory import create_chat_session

# Default console for output
_console = Console()


def get_settings() -> Settings:
    """Load settings from the environment (and ``.env``)."""
    return load_settings()


def get_session(console: Console | None = None) -> ChatSession:
    """Create a chat session from environment variables.

    Warns about every backend that is disabled for lack of a key.

    Args:
        console: Optional Rich console for output

    Returns:
        ChatSession wired to the default backend clients
    """
    con = console or _console
    session = create_chat_session(get_settings())
    credentials = session.orchestrator.registry.credentials

    if not credentials.has_credential(BackendType.GENERATIVE_CHAT):
        con.print("[yellow]Warning: GEMINI_API_KEY not set, generative chat disabled[/yellow]")
    if not credentials.has_credential(BackendType.WEATHER):
        con.print("[yellow]Warning: WEATHER_API_KEY not set, weather queries disabled[/yellow]")
    return session
