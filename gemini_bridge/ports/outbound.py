"""Outbound ports — interfaces for external system adapters."""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional, Protocol, runtime_checkable


@dataclass(frozen=True)
class WebhookRecord:
    """Log copy of one delivered exchange."""

    title: str
    description: str
    timestamp: str
    username: str
    avatar: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        return asdict(self)


@runtime_checkable
class LLMPort(Protocol):
    """Interface for text generation backends."""

    async def generate(self, prompt: str) -> str: ...


@runtime_checkable
class ChannelSender(Protocol):
    """The one write primitive back to a chat channel."""

    async def send(self, text: str) -> Any: ...


@runtime_checkable
class WebhookSink(Protocol):
    """Destination for best-effort exchange logs."""

    @property
    def is_enabled(self) -> bool: ...

    async def post(self, record: WebhookRecord) -> None: ...
