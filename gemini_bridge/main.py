"""Process entry point: HTTP listener plus Discord session."""

import uvicorn

from gemini_bridge.adapters.web.server import create_app
from gemini_bridge.config import AppConfig
from gemini_bridge.container import build_container


def main():
    config = AppConfig.from_env()
    app = create_app(build_container(config))
    uvicorn.run(app, host=config.host, port=config.port, log_level="info")


if __name__ == "__main__":
    main()
