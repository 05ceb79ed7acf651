"""Slack transport adapter."""

from catalog_bot.adapters.slack.blocks import to_slack_payload
from catalog_bot.adapters.slack.chat import SlackChatAdapter

__all__ = ["to_slack_payload", "SlackChatAdapter"]
