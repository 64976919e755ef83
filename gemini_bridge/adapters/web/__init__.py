"""HTTP facade — FastAPI application."""

from gemini_bridge.adapters.web.server import create_app, gemini_router

__all__ = [
    "create_app",
    "gemini_router",
]
