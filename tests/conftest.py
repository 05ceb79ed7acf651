"""Shared mock ports and entity factories."""

import pytest

from catalog_bot.domain.models import DirectoryEntity, DirectoryError


class FakeDirectory:
    """DirectoryPort backed by a list of entities; records every filter."""

    def __init__(self, entities=None, fail=False):
        self.entities = list(entities or [])
        self.fail = fail
        self.calls = []

    async def get_entities(self, filter):
        self.calls.append(dict(filter))
        if self.fail:
            raise DirectoryError("catalog unreachable")
        (key, value), = filter.items()
        return [e for e in self.entities if _lookup(e, key) == value]


def _lookup(entity, key):
    if key == "metadata.name":
        return entity.name
    prefix = "metadata.annotations."
    if key.startswith(prefix):
        return entity.annotations.get(key[len(prefix):])
    return None


class RecordingChat:
    """ChatPort that records calls in order; optionally fails on send."""

    def __init__(self, fail_send=False, fail_reactions=False):
        self.fail_send = fail_send
        self.fail_reactions = fail_reactions
        self.calls = []
        self.messages = []

    async def post_message(self, channel, thread_ts, message):
        self.calls.append(("post", channel, thread_ts, message))
        if self.fail_send:
            raise RuntimeError("send failed")
        self.messages.append(message)

    async def add_reaction(self, channel, ts, name):
        self.calls.append(("add", name))
        if self.fail_reactions:
            raise RuntimeError("reaction failed")

    async def remove_reaction(self, channel, ts, name):
        self.calls.append(("remove", name))
        if self.fail_reactions:
            raise RuntimeError("reaction failed")

    def reactions(self):
        return [c for c in self.calls if c[0] in ("add", "remove")]


def make_entity(kind, name, description=None, annotations=None, spec=None,
                relations=None, links=None, namespace="default"):
    metadata = {"name": name}
    if namespace is not None:
        metadata["namespace"] = namespace
    if description is not None:
        metadata["description"] = description
    if annotations is not None:
        metadata["annotations"] = annotations
    if links is not None:
        metadata["links"] = links
    data = {"kind": kind, "metadata": metadata, "spec": spec or {}}
    if relations is not None:
        data["relations"] = relations
    return DirectoryEntity.from_dict(data)


@pytest.fixture
def entity():
    return make_entity


@pytest.fixture
def directory_factory():
    return FakeDirectory


@pytest.fixture
def chat():
    return RecordingChat()


@pytest.fixture
def failing_chat():
    return RecordingChat(fail_send=True)


@pytest.fixture
def chat_factory():
    return RecordingChat
