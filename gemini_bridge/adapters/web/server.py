"""FastAPI application, routes, models, and startup."""

import asyncio
import sys
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import APIRouter, FastAPI, HTTPException, Request
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from gemini_bridge.adapters.llm.gemini import GeminiError
from gemini_bridge.container import Container


def _log(msg: str):
    print(msg, file=sys.stderr)


gemini_router = APIRouter(tags=["Gemini"])


# Request/Response models
class PromptRequest(BaseModel):
    prompt: str


class StatusResponse(BaseModel):
    model: str
    discordConnected: bool
    webhookEnabled: bool


def _container(request: Request) -> Container:
    return request.app.state.container


@gemini_router.post("/gemini", response_class=PlainTextResponse)
async def generate(req: PromptRequest, request: Request):
    """Run one prompt through Gemini, bypassing Discord."""
    gemini = _container(request).gemini
    try:
        return await gemini.generate(req.prompt)
    except GeminiError as e:
        raise HTTPException(status_code=502, detail={"error": str(e), "status": e.status})
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@gemini_router.get("/status", response_model=StatusResponse)
async def status(request: Request):
    """Server status endpoint"""
    container = _container(request)
    bot = container.bot
    return StatusResponse(
        model=container.gemini.model,
        discordConnected=bool(bot and bot.is_ready()),
        webhookEnabled=container.webhook.is_enabled,
    )


async def _run_discord(container: Container):
    try:
        await container.bot.start(container.config.discord_bot_token)
    except Exception as e:
        _log(f"Discord bot failed to start: {e}")


def create_app(container: Container, start_discord: bool = True) -> FastAPI:
    """Build the app; the Discord session shares the server's event loop."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        discord_task: Optional[asyncio.Task] = None
        if start_discord and container.bot is not None:
            _log("Starting Discord bot...")
            discord_task = asyncio.create_task(_run_discord(container))
        elif start_discord:
            _log("Discord bot not configured (set DISCORD_BOT_TOKEN in .env)")
        _log("Ready!")
        try:
            yield
        finally:
            if container.bot is not None and not container.bot.is_closed():
                await container.bot.close()
            if discord_task is not None:
                await discord_task
            # Closed bot schedules no new posts; flush the ones in flight
            await container.relay.drain()

    app = FastAPI(title="Gemini Bridge", lifespan=lifespan)
    app.state.container = container
    app.include_router(gemini_router)
    return app
