"""Gemini generative-text client using aiohttp — implements LLMPort."""

import json
import sys
from datetime import datetime
from typing import Any, Dict, Optional

import aiohttp

from gemini_bridge.config import DEFAULT_MODEL

GEMINI_API_BASE = "https://generativelanguage.googleapis.com/v1beta"

# Finish reasons for which the candidate text must not be used
BLOCKED_FINISH_REASONS = ("SAFETY", "RECITATION", "LANGUAGE")


def _log(msg: str):
    print(msg, file=sys.stderr)


class GeminiError(RuntimeError):
    """Provider-side failure (bad key, quota, blocked or malformed prompt)."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class GeminiClient:
    """Single-shot ``generateContent`` calls. No retries."""

    def __init__(self, api_key: str, model: str = DEFAULT_MODEL, api_base: str = GEMINI_API_BASE):
        self._api_key = api_key
        self.model = model
        self._api_base = api_base.rstrip("/")

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key)

    @property
    def endpoint(self) -> str:
        return f"{self._api_base}/models/{self.model}:generateContent"

    @staticmethod
    def build_payload(prompt: str) -> Dict[str, Any]:
        return {"contents": [{"role": "user", "parts": [{"text": prompt}]}]}

    @staticmethod
    def extract_text(data: Dict[str, Any]) -> str:
        """Concatenate the text parts of the first candidate.

        Raises GeminiError when the prompt or the candidate was blocked.
        """
        candidates = data.get("candidates") or []
        if not candidates:
            feedback = data.get("promptFeedback") or {}
            reason = feedback.get("blockReason")
            if reason:
                raise GeminiError(f"Prompt blocked: {reason}")
            return ""

        first = candidates[0]
        finish_reason = first.get("finishReason")
        if finish_reason in BLOCKED_FINISH_REASONS:
            raise GeminiError(f"Candidate blocked: {finish_reason}")

        parts = (first.get("content") or {}).get("parts") or []
        return "".join(part.get("text", "") for part in parts)

    async def generate(self, prompt: str) -> str:
        headers = {
            "Content-Type": "application/json",
            "x-goog-api-key": self._api_key,
        }
        _log(f"[{datetime.now().isoformat()}] Generating with {self.model}")

        async with aiohttp.ClientSession() as session:
            async with session.post(self.endpoint, json=self.build_payload(prompt), headers=headers) as resp:
                if resp.status >= 400:
                    body = await resp.text()
                    raise GeminiError(self._error_message(resp.status, body), status=resp.status)
                data = await resp.json()

        text = self.extract_text(data)
        _log(f"[{datetime.now().isoformat()}] Completed ({len(text)} chars)")
        return text

    @staticmethod
    def _error_message(status: int, body: str) -> str:
        try:
            error = json.loads(body).get("error", {})
            message = error.get("message") or body
        except (ValueError, AttributeError):
            message = body
        return f"Gemini API error (HTTP {status}): {message}"
