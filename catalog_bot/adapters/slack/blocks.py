"""Domain message -> Slack Block Kit payload."""

from typing import Any, Dict

from slack_sdk.models.blocks import (
    ButtonElement,
    ContextBlock,
    DividerBlock,
    MarkdownTextObject,
    SectionBlock,
)

from catalog_bot.domain.models import (
    BlockMessage,
    ContextFooter,
    Divider,
    Message,
    Section,
)

# Slack rejects section/context text longer than this
MAX_TEXT = 3000
ELLIPSIS = "..."


def _clip(text: str) -> str:
    """Shorten to MAX_TEXT, cutting at a line break so no ``<url|title>`` is split."""
    if len(text) <= MAX_TEXT:
        return text
    head = text[: MAX_TEXT - len(ELLIPSIS) - 1]
    cut = head.rfind("\n")
    if cut > 0:
        return head[:cut] + "\n" + ELLIPSIS
    # single long line: drop any link left open at the cut
    opened = head.rfind("<")
    if opened > head.rfind(">"):
        head = head[:opened]
    return head + ELLIPSIS


def _to_block(block):
    if isinstance(block, Section):
        accessory = None
        if block.button:
            accessory = ButtonElement(text=block.button.text, url=block.button.url)
        return SectionBlock(text=MarkdownTextObject(text=_clip(block.text)), accessory=accessory)
    if isinstance(block, Divider):
        return DividerBlock()
    if isinstance(block, ContextFooter):
        return ContextBlock(elements=[MarkdownTextObject(text=_clip(block.text))])
    raise TypeError(f"unsupported block: {block!r}")


def to_slack_payload(message: Message) -> Dict[str, Any]:
    """kwargs for ``chat_postMessage`` (minus channel / thread)."""
    if isinstance(message, BlockMessage):
        return {
            "text": message.text,
            "blocks": [_to_block(b).to_dict() for b in message.blocks],
        }
    return {"text": message.text}
