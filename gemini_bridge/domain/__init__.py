"""Domain layer — pure Python, no framework dependencies."""

from gemini_bridge.domain.command import CommandDispatcher, parse_command
from gemini_bridge.domain.models import RelayOutcome
from gemini_bridge.domain.relay import (
    ACK_NOTICE,
    EMPTY_NOTICE,
    ERROR_NOTICE,
    TOO_LONG_NOTICE,
    ResponseRelay,
)

__all__ = [
    "CommandDispatcher",
    "parse_command",
    "RelayOutcome",
    "ResponseRelay",
    "ACK_NOTICE",
    "EMPTY_NOTICE",
    "ERROR_NOTICE",
    "TOO_LONG_NOTICE",
]
