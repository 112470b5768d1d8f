"""Unit tests for the companion orchestration."""
import asyncio

import pytest

from teddyai.companion import TeddyCompanion, result_to_text
from teddyai.llm import EmptyChoice, HttpError, NetworkError, Success
from teddyai.prompts import EMPTY_CHOICE_TEXT, NETWORK_ERROR_TEXT
from teddyai.session import Origin, Session
from teddyai.speech import ScriptedRecognizer, SilentSpeaker


class ClosingRecognizer(ScriptedRecognizer):
    closed = False

    def close(self):
        self.closed = True


class BrokenSpeaker(SilentSpeaker):
    def speak(self, text, locale=None):
        raise OSError("no audio device")


class TestResultToText:
    """Tests for result to message text conversion."""

    def test_success(self):
        assert result_to_text(Success(text="hello!")) == "hello!"

    def test_http_error_is_prefixed(self):
        text = result_to_text(HttpError(status=429, body="rate limited"))
        assert text == "OpenRouter API Error: 429 - rate limited"

    def test_empty_choice(self):
        assert result_to_text(EmptyChoice()) == EMPTY_CHOICE_TEXT

    def test_network_error(self):
        assert result_to_text(NetworkError(cause="dns")) == NETWORK_ERROR_TEXT


class TestSend:
    """Tests for TeddyCompanion.send."""

    @pytest.mark.asyncio
    async def test_success_appends_and_speaks(self, session, fake_client):
        speaker = SilentSpeaker()
        companion = TeddyCompanion(session, fake_client, speaker=speaker)

        reply = await companion.send("hi")

        assert reply.text == "hello!"
        assert [(m.origin, m.text) for m in session.snapshot()] == [
            (Origin.USER, "hi"),
            (Origin.ASSISTANT, "hello!"),
        ]
        assert speaker.spoken == ["hello!"]
        assert companion.last_result == Success(text="hello!")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "result",
        [
            HttpError(status=500, body="boom"),
            EmptyChoice(),
            NetworkError(cause="unreachable"),
        ],
    )
    async def test_failures_append_text_without_speaking(self, session, make_fake_client, result):
        speaker = SilentSpeaker()
        companion = TeddyCompanion(session, make_fake_client([result]), speaker=speaker)

        reply = await companion.send("hi")

        assert len(session) == 2
        assert reply.origin is Origin.ASSISTANT
        assert reply.text == result_to_text(result)
        assert speaker.spoken == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", ["", "   ", None, 42])
    async def test_blank_input_ignored(self, session, fake_client, text):
        companion = TeddyCompanion(session, fake_client)

        assert await companion.send(text) is None
        assert len(session) == 0
        assert fake_client.requests == []

    @pytest.mark.asyncio
    async def test_request_built_from_transcript(self, session, fake_client):
        companion = TeddyCompanion(session, fake_client)

        await companion.send("hi")
        await companion.send("again")

        first, second = fake_client.requests
        assert len(first) == 2
        assert [m.content for m in second[1:]] == ["hi", "hello!", "again"]
        assert second[0].role == "system"

    @pytest.mark.asyncio
    async def test_user_message_updates_timestamp(self, session, clock, fake_client):
        companion = TeddyCompanion(session, fake_client)
        clock.advance(3)
        await companion.send("hi")
        assert session.last_user_message_at == 3

    @pytest.mark.asyncio
    async def test_speaker_failure_is_not_fatal(self, session, fake_client):
        companion = TeddyCompanion(session, fake_client, speaker=BrokenSpeaker())

        reply = await companion.send("hi")

        assert reply.text == "hello!"

    @pytest.mark.asyncio
    async def test_close_closes_client(self, session, fake_client):
        async with TeddyCompanion(session, fake_client):
            pass
        assert fake_client.closed

    @pytest.mark.asyncio
    async def test_close_closes_recognizer(self, session, fake_client):
        recognizer = ClosingRecognizer()
        async with TeddyCompanion(session, fake_client, recognizer=recognizer):
            pass
        assert recognizer.closed


class TestOverlappingSends:
    """Interleaving of concurrent sends on one session."""

    @pytest.mark.asyncio
    async def test_serialized_sends(self, make_fake_client):
        session = Session()
        gate = asyncio.Event()
        client = make_fake_client([Success(text="one"), Success(text="two")], gate=gate)
        companion = TeddyCompanion(session, client)

        first = asyncio.create_task(companion.send("a"))
        second = asyncio.create_task(companion.send("b"))
        await asyncio.sleep(0.01)

        # Both user messages are visible, one request in flight
        assert [m.text for m in session.snapshot()] == ["a", "b"]
        assert client.max_in_flight == 1

        gate.set()
        await asyncio.gather(first, second)

        assert [m.text for m in session.snapshot()] == ["a", "b", "one", "two"]
        assert [m.content for m in client.requests[1][1:]] == ["a", "b", "one"]

    @pytest.mark.asyncio
    async def test_unserialized_sends_interleave(self, make_fake_client):
        session = Session()
        gate = asyncio.Event()
        client = make_fake_client([Success(text="one"), Success(text="two")], gate=gate)
        companion = TeddyCompanion(session, client, serialize_sends=False)

        first = asyncio.create_task(companion.send("a"))
        second = asyncio.create_task(companion.send("b"))
        await asyncio.sleep(0.01)

        assert client.max_in_flight == 2
        assert [m.content for m in client.requests[0][1:]] == ["a"]
        assert [m.content for m in client.requests[1][1:]] == ["a", "b"]

        gate.set()
        await asyncio.gather(first, second)

        texts = [m.text for m in session.snapshot()]
        assert texts[:2] == ["a", "b"]
        assert sorted(texts[2:]) == ["one", "two"]


class TestListen:
    """Speech input through the companion."""

    @pytest.mark.asyncio
    async def test_listen_without_recognizer(self, session, fake_client):
        companion = TeddyCompanion(session, fake_client)
        assert companion.listen() is False
        assert companion.is_listening is False

    @pytest.mark.asyncio
    async def test_transcript_is_sent(self, session, fake_client):
        recognizer = ScriptedRecognizer(["tell me a story"])
        companion = TeddyCompanion(session, fake_client, recognizer=recognizer)

        assert companion.listen() is True
        assert companion.is_listening
        await asyncio.sleep(0)
        await companion.wait_pending()

        assert [m.text for m in session.snapshot()] == ["tell me a story", "hello!"]
        assert not companion.is_listening

    @pytest.mark.asyncio
    async def test_recognition_error_appends_nothing(self, session, fake_client):
        recognizer = ScriptedRecognizer([RuntimeError("not-allowed")])
        companion = TeddyCompanion(session, fake_client, recognizer=recognizer)

        companion.listen()
        await asyncio.sleep(0)
        await companion.wait_pending()

        assert len(session) == 0
        assert not companion.is_listening
