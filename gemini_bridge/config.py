"""Configuration loaded from the environment (.env supported)."""

__version__ = "0.1.0"

import os
import sys
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

_stderr_print = lambda *a, **kw: print(*a, **kw, file=sys.stderr)

DEFAULT_MODEL = "gemini-1.5-flash"
DEFAULT_MAX_LENGTH = 2000
DEFAULT_PORT = 3000
DEFAULT_PREFIX = "!prompt"


def _parse_max_length(raw: str) -> int:
    try:
        value = int(raw)
    except (TypeError, ValueError):
        _stderr_print(
            f"Invalid DISCORD_MAX_LENGTH={raw!r}, falling back to {DEFAULT_MAX_LENGTH}"
        )
        return DEFAULT_MAX_LENGTH
    if value < 0:
        _stderr_print(
            f"Negative DISCORD_MAX_LENGTH={value}, falling back to {DEFAULT_MAX_LENGTH}"
        )
        return DEFAULT_MAX_LENGTH
    return value


def _parse_port(raw: str) -> int:
    try:
        value = int(raw)
    except (TypeError, ValueError):
        _stderr_print(f"Invalid PORT={raw!r}, falling back to {DEFAULT_PORT}")
        return DEFAULT_PORT
    if not 0 < value < 65536:
        _stderr_print(f"Out-of-range PORT={value}, falling back to {DEFAULT_PORT}")
        return DEFAULT_PORT
    return value


@dataclass
class AppConfig:
    """Typed runtime configuration."""

    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    discord_bot_token: str = ""
    gemini_api_key: str = ""
    gemini_model: str = DEFAULT_MODEL
    max_length: int = DEFAULT_MAX_LENGTH
    webhook_url: str = ""
    command_prefix: str = DEFAULT_PREFIX

    @property
    def discord_enabled(self) -> bool:
        return bool(self.discord_bot_token) and self.discord_bot_token != "your_token_here"

    @property
    def webhook_enabled(self) -> bool:
        return bool(self.webhook_url)

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create AppConfig from environment variables."""
        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=_parse_port(os.getenv("PORT", str(DEFAULT_PORT))),
            discord_bot_token=os.getenv("DISCORD_BOT_TOKEN", "").strip(),
            gemini_api_key=os.getenv("GEMINI_API_KEY", "").strip(),
            gemini_model=os.getenv("GEMINI_MODEL", DEFAULT_MODEL).strip() or DEFAULT_MODEL,
            max_length=_parse_max_length(os.getenv("DISCORD_MAX_LENGTH", str(DEFAULT_MAX_LENGTH))),
            webhook_url=os.getenv("DISCORD_WEBHOOK_URL", "").strip(),
            command_prefix=os.getenv("COMMAND_PREFIX", DEFAULT_PREFIX) or DEFAULT_PREFIX,
        )
