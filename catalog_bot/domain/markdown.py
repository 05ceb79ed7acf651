"""Chat markup helpers (Slack mrkdwn flavour).

Pure string functions, no framework dependencies.
"""

from typing import Iterable


def bold(text: str) -> str:
    return f"*{text}*"


def italic(text: str) -> str:
    return f"_{text}_"


def code_inline(text: str) -> str:
    return f"`{text}`"


def blockquote(text: str) -> str:
    return "\n".join(f"> {line}" for line in text.splitlines() or [""])


def link(url: str, title: str = "") -> str:
    return f"<{url}|{title}>" if title else f"<{url}>"


def channel(channel_id: str) -> str:
    return f"<#{channel_id}>"


def emoji(name: str) -> str:
    return f":{name}:"


def list_bullet(items: Iterable[str]) -> str:
    """Bulleted list; an empty iterable renders as an empty string."""
    return "\n".join(f"• {item}" for item in items)
