"""Inbound port — platform-agnostic message representation."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class IncomingMessage:
    """Discord/CLI-agnostic message representation."""

    content: str
    channel_id: int
    author_name: str
    is_bot: bool
    created_at: datetime
    author_avatar_url: Optional[str] = None


@dataclass(frozen=True)
class CommandInvocation:
    """A recognized prefix command and its trimmed argument."""

    prefix: str
    prompt_text: str
    message: IncomingMessage
