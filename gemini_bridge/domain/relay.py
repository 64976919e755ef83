"""Runs one prompt invocation and reports back to the channel."""

import asyncio
import sys
from typing import Set

from gemini_bridge.config import DEFAULT_MAX_LENGTH
from gemini_bridge.domain.models import RelayOutcome
from gemini_bridge.ports.inbound import CommandInvocation
from gemini_bridge.ports.outbound import ChannelSender, LLMPort, WebhookRecord, WebhookSink

ACK_NOTICE = "Processing prompt..."
TOO_LONG_NOTICE = "Sorry, the response is too long to send."
EMPTY_NOTICE = "Sorry, the response is empty."
ERROR_NOTICE = "Sorry, something went wrong while generating the response."


def _log(msg: str):
    print(msg, file=sys.stderr)


class ResponseRelay:
    """Acknowledge, generate, classify, send; then mirror to the webhook sink."""

    def __init__(
        self,
        llm: LLMPort,
        webhook: WebhookSink,
        max_length: int = DEFAULT_MAX_LENGTH,
    ):
        self._llm = llm
        self._webhook = webhook
        self.max_length = max_length
        # Keeps detached webhook posts alive until they finish
        self._pending: Set[asyncio.Task] = set()

    async def relay(self, invocation: CommandInvocation, sender: ChannelSender) -> RelayOutcome:
        channel_id = invocation.message.channel_id

        try:
            await sender.send(ACK_NOTICE)
        except Exception as e:
            _log(f"[relay] ack failed in ch={channel_id}: {e}")

        try:
            response = await self._llm.generate(invocation.prompt_text)
        except Exception as e:
            _log(f"[relay] generation failed in ch={channel_id}: {e}")
            return await self._notify(sender, ERROR_NOTICE, RelayOutcome.ERROR_NOTICE_SENT)

        if len(response) > self.max_length:
            _log(f"[relay] response too long ({len(response)} > {self.max_length})")
            return await self._notify(sender, TOO_LONG_NOTICE, RelayOutcome.TOO_LONG_NOTICE_SENT)

        if len(response) == 0:
            return await self._notify(sender, EMPTY_NOTICE, RelayOutcome.EMPTY_NOTICE_SENT)

        outcome = await self._notify(sender, response, RelayOutcome.DELIVERED)
        if outcome is RelayOutcome.DELIVERED and self._webhook.is_enabled:
            self._schedule_webhook(invocation, response)
        return outcome

    async def _notify(self, sender: ChannelSender, text: str, outcome: RelayOutcome) -> RelayOutcome:
        try:
            await sender.send(text)
        except Exception as e:
            _log(f"[relay] send failed ({outcome.value}): {e}")
            return RelayOutcome.SEND_FAILED
        return outcome

    @staticmethod
    def build_record(invocation: CommandInvocation, response: str) -> WebhookRecord:
        message = invocation.message
        return WebhookRecord(
            title=invocation.prompt_text,
            description=response,
            timestamp=message.created_at.isoformat(),
            username=message.author_name,
            avatar=message.author_avatar_url,
        )

    def _schedule_webhook(self, invocation: CommandInvocation, response: str) -> None:
        record = self.build_record(invocation, response)
        task = asyncio.create_task(self._post_webhook(record))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _post_webhook(self, record: WebhookRecord) -> None:
        try:
            await self._webhook.post(record)
        except Exception as e:
            _log(f"[relay] webhook post failed: {e}")

    async def drain(self) -> None:
        """Wait for webhook posts still in flight."""
        if self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)
