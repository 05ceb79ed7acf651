"""Unit tests for the readiness route."""

import pytest
from httpx import AsyncClient, ASGITransport

from catalog_bot.adapters.web.server import create_app
from catalog_bot.config import AppConfig, SlackConfig


class NoopDirectory:
    async def get_entities(self, filter):
        return []


def _transport(slack):
    app = create_app(AppConfig(slack=slack), directory=NoopDirectory())
    return ASGITransport(app=app)


@pytest.mark.asyncio
async def test_healthy_when_configured():
    slack = SlackConfig(bot_token="xoxb", signing_secret="s", app_token="xapp")
    async with AsyncClient(transport=_transport(slack), base_url="http://test") as ac:
        resp = await ac.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "healthy"}


@pytest.mark.asyncio
async def test_unhealthy_when_credentials_missing():
    slack = SlackConfig(bot_token="xoxb", signing_secret="s", app_token="")
    async with AsyncClient(transport=_transport(slack), base_url="http://test") as ac:
        resp = await ac.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "unhealthy"}
