"""Tests for domain/tokenizer.py — rich-text mention parsing."""

from catalog_bot.domain.tokenizer import tokenize

BOT = {"type": "user", "user_id": "UBOT"}


def _blocks(*elements):
    return [{"type": "rich_text", "elements": [{"type": "rich_text_section", "elements": list(elements)}]}]


def _text(text):
    return {"type": "text", "text": text}


class TestIgnoredShapes:
    def test_not_a_list(self):
        assert tokenize(None) == []
        assert tokenize("hello") == []

    def test_empty_list(self):
        assert tokenize([]) == []

    def test_first_block_without_elements(self):
        assert tokenize([{"type": "section"}]) == []

    def test_section_without_inner_elements(self):
        assert tokenize([{"elements": [{"type": "rich_text_section"}]}]) == []

    def test_only_bot_mention(self):
        assert tokenize(_blocks(BOT)) == []

    def test_whitespace_only_text(self):
        assert tokenize(_blocks(BOT, _text("   "))) == []


class TestCommands:
    def test_find_lowercases_tokens(self):
        assert tokenize(_blocks(BOT, _text(" Find Cool-Tuna "))) == ["find", "cool-tuna"]

    def test_whoami(self):
        assert tokenize(_blocks(BOT, _text(" whoami"))) == ["whoami"]

    def test_collapses_repeated_whitespace(self):
        assert tokenize(_blocks(BOT, _text("find   hotdog"))) == ["find", "hotdog"]

    def test_tagged_user_becomes_find_by_mention(self):
        tagged = {"type": "user", "user_id": "U12345"}
        assert tokenize(_blocks(BOT, _text(" find "), tagged)) == ["findSlack", "U12345"]

    def test_three_elements_without_user_is_help(self):
        link = {"type": "link", "url": "https://example.com"}
        assert tokenize(_blocks(BOT, _text(" find "), link)) == ["help"]

    def test_extra_elements_are_help(self):
        assert tokenize(_blocks(BOT, _text(" list "), BOT, _text(" more"))) == ["help"]


class TestMalformed:
    def test_missing_text_payload(self):
        assert tokenize(_blocks(BOT, {"type": "emoji", "name": "wave"})) is None

    def test_non_dict_payload(self):
        assert tokenize(_blocks(BOT, "find x")) is None
