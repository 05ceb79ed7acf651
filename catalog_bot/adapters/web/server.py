"""FastAPI application: readiness route and Slack startup."""

import sys
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import APIRouter, FastAPI
from pydantic import BaseModel

from catalog_bot.adapters.catalog.client import CatalogClient
from catalog_bot.config import AppConfig
from catalog_bot.ports.outbound import DirectoryPort


def _log(msg: str):
    print(msg, file=sys.stderr)


class HealthResponse(BaseModel):
    status: str


def health_router(config: AppConfig) -> APIRouter:
    router = APIRouter(tags=["health"])

    @router.get("/health", response_model=HealthResponse)
    async def health():
        """Healthy only when every Slack credential is configured."""
        _log("PONG!")
        return HealthResponse(status="healthy" if config.slack.is_configured else "unhealthy")

    return router


def create_app(
    config: Optional[AppConfig] = None,
    directory: Optional[DirectoryPort] = None,
) -> FastAPI:
    config = config or AppConfig.from_env()
    directory = directory or CatalogClient(config.catalog)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        handler = None
        if config.slack.is_configured:
            from catalog_bot.adapters.slack.app import start_socket_mode

            try:
                handler = await start_socket_mode(config, directory)
            except Exception as e:
                _log(f"Slackbot failed to start: {e}")
        else:
            _log(
                "Configuration for Slackbot is missing or invalid. "
                "Continuing without contacting Slack."
            )
        yield
        if handler is not None:
            await handler.close_async()

    app = FastAPI(title="Catalog Bot", lifespan=lifespan)
    app.include_router(health_router(config))
    app.state.config = config
    return app
