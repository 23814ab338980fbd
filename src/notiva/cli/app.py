"""Main CLI application using Typer."""
import asyncio
from contextlib import contextmanager

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..availability import BackendType
from ..chat import ChatSession
from ..logging import setup_logging
from ..orchestrator import BackendResponse
from .providers import get_session

# Create Typer app
app = typer.Typer(
    name="notiva",
    help="Chat assistant that routes questions to weather, Wikipedia or Gemini",
    no_args_is_help=True,
    add_completion=False,
)

# Console for rich output
console = Console()

_STYLES = {
    "standard": "white",
    "weather": "cyan",
    "encyclopedia": "yellow",
    "generative_chat": "magenta",
}


@app.callback()
def main(
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        envvar="NOTIVA_LOG_LEVEL",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)"
    )
):
    """Notiva chat assistant."""
    setup_logging(log_level)


def _print_response(response: BackendResponse) -> None:
    kind = response.classification.value if response.classification else "standard"
    border = _STYLES.get(kind, "white") if response.succeeded else "red"
    console.print(Panel(response.text, title=kind, border_style=border))


@app.command()
def ask(text: str = typer.Argument(..., help="Message to answer")):
    """Answer a single message."""
    async def _ask():
        session = get_session(console)
        try:
            response = await session.handle_user_message(text)
            if response is None:
                console.print("[yellow]Empty message[/yellow]")
                raise typer.Exit(code=1)
            _print_response(response)
        finally:
            await session.orchestrator.clients.close()

    asyncio.run(_ask())


@contextmanager
def _offline_session():
    """Session for commands that never call a backend; clients are closed on exit."""
    session = get_session(console)
    try:
        yield session
    finally:
        asyncio.run(session.orchestrator.clients.close())


@app.command()
def classify(text: str = typer.Argument(..., help="Message to route")):
    """Show which backend would answer a message, without calling it."""
    with _offline_session() as session:
        decision = session.orchestrator.classify(text)
    console.print(f"[bold]{decision.value}[/bold]")


@app.command()
def status():
    """Show backend availability."""
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Backend", style="cyan")
    table.add_column("Credential")
    table.add_column("Errors", width=8)
    table.add_column("Available")

    with _offline_session() as session:
        registry = session.orchestrator.registry
        for backend in BackendType:
            backend_status = registry.status(backend)
            has_key = registry.credentials.has_credential(backend)
            available = registry.is_available(backend)
            table.add_row(
                backend.value,
                "[green]yes[/green]" if has_key else "[red]no[/red]",
                str(backend_status.error_count),
                "[green]yes[/green]" if available else "[red]no[/red]",
            )

    console.print(table)


async def _chat_loop(session: ChatSession) -> None:
    while True:
        try:
            text = await asyncio.to_thread(console.input, "[bold green]> [/bold green]")
        except (EOFError, KeyboardInterrupt):
            console.print()
            return

        command = text.strip().lower()
        if command in ("/quit", "/exit"):
            return
        if command == "/clear":
            session.clear()
            console.print("[dim]History cleared.[/dim]")
            continue
        if command == "/topic":
            console.print(f"[dim]Topic: {session.orchestrator.history.detect_topic()}[/dim]")
            continue

        with console.status("[dim]Thinking...[/dim]"):
            response = await session.handle_user_message(text)
        if response is not None:
            _print_response(response)


@app.command()
def chat():
    """Start an interactive chat (/clear, /topic, /quit)."""
    async def _chat():
        session = get_session(console)
        console.print("[dim]Type a message, or /quit to exit.[/dim]")
        try:
            await _chat_loop(session)
        finally:
            await session.orchestrator.clients.close()

    asyncio.run(_chat())


if __name__ == "__main__":
    app()
