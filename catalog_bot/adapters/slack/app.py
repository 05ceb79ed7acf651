"""Slack Bolt app — bridges app_mention events to MentionPipeline.

Converts Bolt payloads to MentionEvent, resolves the sender's directory
identity in a global middleware, and delegates everything else to the
transport-agnostic pipeline.
"""

import sys

from slack_bolt.adapter.socket_mode.async_handler import AsyncSocketModeHandler
from slack_bolt.async_app import AsyncApp

from catalog_bot.adapters.slack.chat import SlackChatAdapter
from catalog_bot.config import AppConfig
from catalog_bot.domain.pipeline import MentionPipeline
from catalog_bot.domain.renderer import RenderSettings
from catalog_bot.ports.inbound import MentionEvent
from catalog_bot.ports.outbound import DirectoryPort

CONTEXT_KEY = "directory_context"


def _log(msg: str):
    print(msg, file=sys.stderr)


def render_settings(config: AppConfig) -> RenderSettings:
    return RenderSettings(
        web_url=config.catalog.web_url,
        namespace=config.catalog.namespace,
        bot_handle=config.bot_handle,
        help_channel=config.help_channel,
    )


def make_handlers(pipeline: MentionPipeline):
    """Build the Bolt middleware and app_mention listener for a pipeline."""

    async def add_user_context(payload, context, next):
        user = payload.get("user") if isinstance(payload, dict) else None
        if isinstance(user, str):
            context[CONTEXT_KEY] = await pipeline.enricher.enrich(user)
        await next()

    async def handle_mention(event, context):
        resolved = context.get(CONTEXT_KEY)
        await pipeline.handle(MentionEvent.from_payload(event), resolved)

    async def handle_error(error, body):
        _log(f"[slack] unhandled error: {error} (body={body})")

    return add_user_context, handle_mention, handle_error


def build_slack_app(config: AppConfig, directory: DirectoryPort) -> AsyncApp:
    app = AsyncApp(
        token=config.slack.bot_token,
        signing_secret=config.slack.signing_secret,
    )
    pipeline = MentionPipeline(
        directory=directory,
        chat=SlackChatAdapter(app.client),
        settings=render_settings(config),
    )
    add_user_context, handle_mention, handle_error = make_handlers(pipeline)
    app.use(add_user_context)
    app.event("app_mention")(handle_mention)
    app.error(handle_error)
    return app


async def start_socket_mode(config: AppConfig, directory: DirectoryPort) -> AsyncSocketModeHandler:
    app = build_slack_app(config, directory)
    handler = AsyncSocketModeHandler(app, config.slack.app_token)
    await handler.connect_async()
    _log("[slack] Slackbot is running")
    return handler
