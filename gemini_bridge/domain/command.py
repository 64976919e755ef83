"""Prefix command parsing and dispatch.

Pure Python, no framework dependencies.
"""

import sys
from typing import Optional

from gemini_bridge.config import DEFAULT_PREFIX
from gemini_bridge.domain.models import RelayOutcome
from gemini_bridge.domain.relay import ResponseRelay
from gemini_bridge.ports.inbound import CommandInvocation, IncomingMessage
from gemini_bridge.ports.outbound import ChannelSender


def _log(msg: str):
    print(msg, file=sys.stderr)


def parse_command(
    message: IncomingMessage, prefix: str = DEFAULT_PREFIX
) -> Optional[CommandInvocation]:
    """Build an invocation if the message text starts with ``prefix``.

    Matching is on the raw string prefix, so ``!promptfoo`` yields ``foo``.
    """
    if not message.content.startswith(prefix):
        return None
    return CommandInvocation(
        prefix=prefix,
        prompt_text=message.content[len(prefix):].strip(),
        message=message,
    )


class CommandDispatcher:
    """Filters inbound messages and hands recognized commands to the relay.

    Stateless per message; one instance serves every channel.
    """

    def __init__(self, relay: ResponseRelay, prefix: str = DEFAULT_PREFIX):
        self._relay = relay
        self.prefix = prefix

    async def dispatch(
        self, message: IncomingMessage, sender: ChannelSender
    ) -> Optional[RelayOutcome]:
        # Ignore other bots, including ourselves
        if message.is_bot:
            return None

        invocation = parse_command(message, self.prefix)
        if invocation is None:
            _log(f"[dispatcher] Invalid command: {message.content}")
            return None

        try:
            return await self._relay.relay(invocation, sender)
        except Exception as e:
            _log(f"[dispatcher] relay failed in ch={message.channel_id}: {e!r}")
            return None
