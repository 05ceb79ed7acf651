"""Tests for domain/context.py — invoking-user enrichment."""

import pytest

from catalog_bot.domain.context import ContextEnricher
from catalog_bot.domain.resolver import EntityResolver


def _enricher(directory):
    return ContextEnricher(EntityResolver(directory))


@pytest.mark.asyncio
async def test_single_match_sets_user(entity, directory_factory):
    jane = entity("User", "jane.doe", annotations={"slack.com/user-id": "U1"})
    context = await _enricher(directory_factory([jane])).enrich("U1")
    assert context.user == jane


@pytest.mark.asyncio
async def test_no_match_leaves_user_unset(directory_factory, capsys):
    context = await _enricher(directory_factory([])).enrich("U1")
    assert context.user is None
    assert "no catalog entry" in capsys.readouterr().err


@pytest.mark.asyncio
async def test_ambiguous_match_leaves_user_unset(entity, directory_factory, capsys):
    a = entity("User", "jane.doe", annotations={"slack.com/user-id": "U1"})
    b = entity("User", "jane.d", annotations={"slack.com/user-id": "U1"})
    context = await _enricher(directory_factory([a, b])).enrich("U1")
    assert context.user is None
    assert "multiple catalog entries" in capsys.readouterr().err


@pytest.mark.asyncio
async def test_directory_failure_does_not_raise(directory_factory):
    context = await _enricher(directory_factory(fail=True)).enrich("U1")
    assert context.user is None


@pytest.mark.asyncio
async def test_blank_user_id_skips_lookup(directory_factory):
    directory = directory_factory([])
    context = await _enricher(directory).enrich("")
    assert context.user is None
    assert directory.calls == []


@pytest.mark.asyncio
async def test_each_call_returns_fresh_context(entity, directory_factory):
    jane = entity("User", "jane.doe", annotations={"slack.com/user-id": "U1"})
    enricher = _enricher(directory_factory([jane]))
    first = await enricher.enrich("U1")
    second = await enricher.enrich("U2")
    assert first.user == jane
    assert second.user is None
