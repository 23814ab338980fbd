"""Unit tests for the chat session and the stack factory."""
import asyncio

import pytest

from notiva.availability import BackendType
from notiva.chat import ChatSession
from notiva.config import Settings
from notiva.errors import SessionBusyError
from notiva.factory import create_chat_session, create_orchestrator
from notiva.routing import QueryClassification

from conftest import FakeGenerativeClient


@pytest.fixture
def session(orchestrator):
    return ChatSession(orchestrator)


class TestChatSession:
    """Tests for ChatSession."""

    @pytest.mark.asyncio
    async def test_records_user_and_bot_messages(self, session, orchestrator):
        response = await session.handle_user_message("merhaba")

        assert response.classification == QueryClassification.STANDARD
        assert [m.is_from_user for m in session.messages] == [True, False]
        assert session.messages[0].text == "merhaba"
        assert session.messages[1].text == response.text
        assert len(orchestrator.history) == 2
        assert not session.is_loading

    @pytest.mark.asyncio
    async def test_blank_input_is_ignored(self, session, generative_client):
        assert await session.handle_user_message("   \n ") is None
        assert session.messages == []
        assert generative_client.prompts == []

    @pytest.mark.asyncio
    async def test_transcript_outlives_history_window(self, session, orchestrator):
        for _ in range(4):
            await session.handle_user_message("teşekkürler")

        assert len(session.messages) == 8
        assert len(orchestrator.history) == 5

    @pytest.mark.asyncio
    async def test_user_message_not_repeated_in_prompt(self, session, generative_client):
        await session.handle_user_message("fotosentez nedir")

        assert generative_client.prompts == ["Human: fotosentez nedir\nAssistant:"]

    @pytest.mark.asyncio
    async def test_busy_while_reply_pending(self, orchestrator):
        gate = asyncio.Event()
        orchestrator.clients.generative_chat = FakeGenerativeClient(["tamam"], gate=gate)
        session = ChatSession(orchestrator)

        pending = asyncio.create_task(session.handle_user_message("fotosentez nedir"))
        while not orchestrator.clients.generative_chat.prompts:
            await asyncio.sleep(0)

        assert session.is_loading
        with pytest.raises(SessionBusyError):
            await session.handle_user_message("ikinci soru")

        gate.set()
        response = await pending

        assert response.text == "tamam"
        assert not session.is_loading
        assert [m.text for m in session.messages] == ["fotosentez nedir", "tamam"]

    @pytest.mark.asyncio
    async def test_loading_reset_after_failure(self, session, orchestrator):
        async def broken_answer(text):
            raise RuntimeError("boom")

        orchestrator.answer = broken_answer

        with pytest.raises(RuntimeError):
            await session.handle_user_message("fotosentez nedir")

        assert not session.is_loading
        assert len(session.messages) == 1

    @pytest.mark.asyncio
    async def test_clear(self, session, orchestrator):
        await session.handle_user_message("merhaba")

        session.clear()

        assert session.messages == []
        assert len(orchestrator.history) == 0


class TestFactory:
    """Tests for create_orchestrator / create_chat_session."""

    def test_credentials_from_settings(self, clients):
        orchestrator = create_orchestrator(Settings(gemini_api_key="g"), clients)

        assert orchestrator.clients is clients
        assert orchestrator.registry.is_available(BackendType.GENERATIVE_CHAT)
        assert not orchestrator.registry.is_available(BackendType.WEATHER)
        assert orchestrator.registry.is_available(BackendType.ENCYCLOPEDIA)

    def test_create_chat_session(self, clients):
        session = create_chat_session(Settings(), clients)

        assert isinstance(session, ChatSession)
        assert session.messages == []
        assert session.orchestrator.classify("Atatürk kimdir") == QueryClassification.ENCYCLOPEDIA
