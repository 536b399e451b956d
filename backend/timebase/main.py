"""
timebase service: framerate construction and diagnostics over HTTP
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from timebase.config import ServiceConfig, configure_logging
from timebase.persistence import PersistenceManager
from timebase.routes import framerates

logger = logging.getLogger(__name__)


def create_app(config: Optional[ServiceConfig] = None) -> FastAPI:
    """Build the FastAPI app. Configuration defaults to ServiceConfig.from_env()."""
    if config is None:
        config = ServiceConfig.from_env()

    configure_logging(config)

    app = FastAPI(title="timebase", version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.config = config
    app.state.persistence = PersistenceManager(db_path=config.db_path)
    logger.info(f"Framerate store: {config.db_path}")

    app.include_router(framerates.router)

    @app.get("/")
    async def root():
        return {"service": "timebase", "status": "running"}

    return app


DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8090


def run_server(host: str = DEFAULT_HOST, port: int = DEFAULT_PORT) -> None:
    """
    Run the timebase API server.

    Args:
        host: Host to bind to.
        port: Port to listen on.
    """
    import uvicorn

    app = create_app()
    logger.info(f"Starting timebase API on {host}:{port}")
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run_server()
