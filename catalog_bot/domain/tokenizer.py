"""Mention tokenizer — turns a rich-text mention into command tokens.

Pure Python, no framework dependencies.
"""

from typing import Any, List, Optional

FIND_BY_MENTION = "findSlack"
HELP = "help"


def _inner_elements(blocks: Any) -> Optional[List[Any]]:
    """Return ``blocks[0].elements[0].elements`` or None if the shape is off."""
    if not isinstance(blocks, list) or not blocks:
        return None
    first = blocks[0]
    if not isinstance(first, dict) or not isinstance(first.get("elements"), list):
        return None
    if not first["elements"]:
        return None
    section = first["elements"][0]
    if not isinstance(section, dict) or not isinstance(section.get("elements"), list):
        return None
    return section["elements"]


def tokenize(blocks: Any) -> Optional[List[str]]:
    """Extract command tokens from a mention's rich-text blocks.

    Returns an empty list when the event carries no command and should be
    ignored, and None when the structure is present but the text after the
    bot mention is missing (a malformed event worth reporting).
    """
    elements = _inner_elements(blocks)
    if elements is None:
        return []
    # Only the bot's own mention, e.g. "try asking @bot"
    if len(elements) <= 1:
        return []
    if len(elements) == 3 and _is_user_mention(elements[2]):
        return [FIND_BY_MENTION, elements[2].get("user_id", "")]
    if len(elements) > 2:
        return [HELP]

    payload = elements[1]
    text = payload.get("text") if isinstance(payload, dict) else None
    if not isinstance(text, str):
        return None
    return [token.lower() for token in text.split()]


def _is_user_mention(element: Any) -> bool:
    return isinstance(element, dict) and element.get("type") == "user"
