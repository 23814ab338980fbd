"""Conversation front-end for the orchestrator.

Owns the full transcript and the loading flag. Each submitted message is
recorded in the shared history before routing, and the reply after.
"""

import logging

from ..errors import SessionBusyError
from ..history import Message
from ..orchestrator import BackendOrchestrator, BackendResponse

logger = logging.getLogger(__name__)


class ChatSession:
    """One conversation with the assistant.

    Only one message may be in flight at a time; ``is_loading`` is True
    while a reply is pending.
    """

    def __init__(self, orchestrator: BackendOrchestrator):
        self._orchestrator = orchestrator
        self._messages: list[Message] = []
        self._is_loading = False

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def messages(self) -> list[Message]:
        """Full transcript, oldest first."""
        return list(self._messages)

    @property
    def orchestrator(self) -> BackendOrchestrator:
        return self._orchestrator

    def _record(self, message: Message) -> None:
        self._messages.append(message)
        self._orchestrator.history.append(message)

    async def handle_user_message(self, text: str) -> BackendResponse | None:
        """Answer a user message.

        Args:
            text: Raw user input

        Returns:
            The reply, or None when the input is blank

        Raises:
            SessionBusyError: If a previous message is still being answered
        """
        if not text.strip():
            return None
        if self._is_loading:
            raise SessionBusyError("A reply is still pending")

        self._record(Message(text=text, is_from_user=True))
        self._is_loading = True
        try:
            response = await self._orchestrator.answer(text)
        finally:
            self._is_loading = False

        self._record(Message(text=response.text, is_from_user=False))
        logger.debug("Answered via %s (succeeded=%s)", response.classification, response.succeeded)
        return response

    def clear(self) -> None:
        """Forget the transcript and the shared history."""
        self._messages.clear()
        self._orchestrator.history.clear()
