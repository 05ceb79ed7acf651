"""Inbound port — platform-agnostic mention event."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class MentionEvent:
    """A chat message addressed to the bot.

    ``blocks`` keeps the transport's rich-text structure untouched; the
    tokenizer is the only place that looks inside it.
    """

    channel: str
    ts: str
    user: str
    event_ts: str = ""
    blocks: Optional[List[Dict[str, Any]]] = None
    raw: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "MentionEvent":
        return cls(
            channel=payload.get("channel", ""),
            ts=payload.get("ts", ""),
            user=payload.get("user", ""),
            event_ts=payload.get("event_ts", payload.get("ts", "")),
            blocks=payload.get("blocks"),
            raw=dict(payload),
        )
