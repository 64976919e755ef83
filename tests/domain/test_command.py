"""Tests for prefix command parsing and CommandDispatcher."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest

from gemini_bridge.domain.command import CommandDispatcher, parse_command
from gemini_bridge.domain.models import RelayOutcome
from gemini_bridge.ports.inbound import IncomingMessage


def _msg(content: str, *, is_bot: bool = False) -> IncomingMessage:
    return IncomingMessage(
        content=content,
        channel_id=100,
        author_name="alice",
        is_bot=is_bot,
        created_at=datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc),
    )


def _make_dispatcher(outcome=RelayOutcome.DELIVERED):
    relay = MagicMock()
    relay.relay = AsyncMock(return_value=outcome)
    return CommandDispatcher(relay), relay


# ---------------------------------------------------------------------------
# parse_command
# ---------------------------------------------------------------------------

class TestParseCommand:
    def test_prompt_with_text(self):
        inv = parse_command(_msg("!prompt hello"))
        assert inv is not None
        assert inv.prefix == "!prompt"
        assert inv.prompt_text == "hello"

    def test_surrounding_whitespace_trimmed(self):
        inv = parse_command(_msg("!prompt    what is 2+2?  \n"))
        assert inv.prompt_text == "what is 2+2?"

    def test_bare_prefix_gives_empty_prompt(self):
        inv = parse_command(_msg("!prompt"))
        assert inv is not None
        assert inv.prompt_text == ""

    def test_raw_prefix_match_without_boundary(self):
        inv = parse_command(_msg("!promptfoo"))
        assert inv is not None
        assert inv.prompt_text == "foo"

    def test_no_prefix(self):
        assert parse_command(_msg("hello")) is None

    def test_prefix_not_at_start(self):
        assert parse_command(_msg(" !prompt hi")) is None
        assert parse_command(_msg("say !prompt hi")) is None

    def test_case_sensitive(self):
        assert parse_command(_msg("!PROMPT hi")) is None

    def test_custom_prefix(self):
        inv = parse_command(_msg("/ask  why?"), prefix="/ask")
        assert inv.prompt_text == "why?"

    def test_keeps_original_message(self):
        msg = _msg("!prompt hi")
        assert parse_command(msg).message is msg


# ---------------------------------------------------------------------------
# CommandDispatcher
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_bot_messages_are_discarded():
    dispatcher, relay = _make_dispatcher()
    sender = MagicMock()
    sender.send = AsyncMock()

    result = await dispatcher.dispatch(_msg("!prompt hello", is_bot=True), sender)

    assert result is None
    relay.relay.assert_not_awaited()
    sender.send.assert_not_awaited()


@pytest.mark.asyncio
async def test_unrecognized_text_logs_diagnostic(capsys):
    dispatcher, relay = _make_dispatcher()
    sender = MagicMock()
    sender.send = AsyncMock()

    result = await dispatcher.dispatch(_msg("hello"), sender)

    assert result is None
    relay.relay.assert_not_awaited()
    sender.send.assert_not_awaited()
    assert "Invalid command: hello" in capsys.readouterr().err


@pytest.mark.asyncio
async def test_command_is_relayed():
    dispatcher, relay = _make_dispatcher(RelayOutcome.EMPTY_NOTICE_SENT)
    sender = MagicMock()

    result = await dispatcher.dispatch(_msg("!prompt   hello "), sender)

    assert result is RelayOutcome.EMPTY_NOTICE_SENT
    relay.relay.assert_awaited_once()
    invocation, passed_sender = relay.relay.call_args[0]
    assert invocation.prompt_text == "hello"
    assert passed_sender is sender


@pytest.mark.asyncio
async def test_relay_crash_is_contained(capsys):
    dispatcher, relay = _make_dispatcher()
    relay.relay.side_effect = RuntimeError("boom")

    result = await dispatcher.dispatch(_msg("!prompt hi"), MagicMock())

    assert result is None
    assert "boom" in capsys.readouterr().err


@pytest.mark.asyncio
async def test_dispatcher_uses_configured_prefix():
    relay = MagicMock()
    relay.relay = AsyncMock(return_value=RelayOutcome.DELIVERED)
    dispatcher = CommandDispatcher(relay, prefix="!ask")

    assert await dispatcher.dispatch(_msg("!prompt hi"), MagicMock()) is None
    assert await dispatcher.dispatch(_msg("!ask hi"), MagicMock()) is RelayOutcome.DELIVERED
