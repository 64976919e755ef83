"""LLM adapters — Gemini REST client."""

from gemini_bridge.adapters.llm.gemini import GEMINI_API_BASE, GeminiClient, GeminiError

__all__ = [
    "GEMINI_API_BASE",
    "GeminiClient",
    "GeminiError",
]
