"""Tests for domain/models.py — entity parsing and references."""

from catalog_bot.domain.models import (
    DirectoryEntity,
    EntityKind,
    EntityRelation,
    parse_entity_ref,
)


class TestParseEntityRef:
    def test_full_ref(self):
        ref = parse_entity_ref("component:default/bread-maker")
        assert (ref.kind, ref.namespace, ref.name) == ("component", "default", "bread-maker")

    def test_name_only_uses_defaults(self):
        ref = parse_entity_ref("jane.doe", default_kind="user")
        assert (ref.kind, ref.namespace, ref.name) == ("user", "", "jane.doe")

    def test_name_only_takes_given_namespace(self):
        ref = parse_entity_ref("cool-tuna", default_kind="group", default_namespace="eng")
        assert (ref.kind, ref.namespace, ref.name) == ("group", "eng", "cool-tuna")

    def test_kind_is_lowercased(self):
        assert parse_entity_ref("Group:ops/cool-tuna").kind == "group"


class TestEntityRelation:
    def test_relative_target_takes_referrer_namespace(self):
        rel = EntityRelation(type="hasPart", target_ref="component:bun")
        assert rel.target_in("eng") == parse_entity_ref("component:eng/bun")

    def test_absolute_target_keeps_its_namespace(self):
        rel = EntityRelation(type="hasPart", target_ref="component:ops/bun")
        assert rel.target_in("eng").namespace == "ops"


class TestEntityKind:
    def test_known(self):
        assert EntityKind.from_raw("System") is EntityKind.SYSTEM

    def test_unknown_is_other(self):
        assert EntityKind.from_raw("API") is EntityKind.OTHER
        assert EntityKind.from_raw(None) is EntityKind.OTHER


class TestFromDict:
    def test_full_user(self):
        e = DirectoryEntity.from_dict({
            "kind": "User",
            "metadata": {
                "name": "jane.doe",
                "description": "Engineer",
                "annotations": {"slack.com/user-id": "U1"},
                "links": [{"url": "https://x", "title": "X"}],
            },
            "spec": {"profile": {"displayName": "Jane Doe", "timezone": "UTC"}},
            "relations": [{"type": "memberOf", "targetRef": "group:default/cool-tuna"}],
        })
        assert e.kind == "User"
        assert e.kind_tag is EntityKind.USER
        assert e.display_name == "Jane Doe"
        assert e.timezone == "UTC"
        assert e.annotation("slack.com/user-id") == "U1"
        assert e.links[0].title == "X"
        assert e.relations == [EntityRelation("memberOf", "group:default/cool-tuna")]

    def test_missing_fields_degrade(self):
        e = DirectoryEntity.from_dict({"kind": "Group"})
        assert e.name == ""
        assert e.description is None
        assert e.links == []
        assert e.relations == []
        assert e.members == []
        assert e.display_name == ""
        assert e.namespace == ""

    def test_non_sequence_lists_degrade(self):
        e = DirectoryEntity.from_dict({
            "kind": "Group",
            "metadata": {"name": "g", "links": "not-a-list", "annotations": []},
            "spec": {"members": {"jane": 1}, "profile": "nope"},
            "relations": None,
        })
        assert e.links == []
        assert e.annotations == {}
        assert e.members == []
        assert e.display_name == "g"

    def test_legacy_relation_target(self):
        e = DirectoryEntity.from_dict({
            "kind": "System",
            "metadata": {"name": "hotdog"},
            "relations": [{"type": "hasPart", "target": {"kind": "component", "namespace": "default", "name": "bun"}}],
        })
        assert e.relations[0].target.name == "bun"
        assert e.relations[0].target.kind == "component"

    def test_display_name_falls_back_to_name(self):
        e = DirectoryEntity(kind="User", name="jane.doe")
        assert e.display_name == "jane.doe"

    def test_blank_annotation_is_none(self):
        e = DirectoryEntity(kind="User", name="j", annotations={"github.com/user-login": ""})
        assert e.annotation("github.com/user-login") is None
