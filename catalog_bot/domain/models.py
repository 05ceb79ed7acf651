"""Domain data models — pure Python dataclasses."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union

DEFAULT_NAMESPACE = "default"

# Annotation keys (identifier schemes) read from entity metadata
CHAT_USER_ID = "slack.com/user-id"
ISSUE_TRACKER_USER_ID = "pagerduty.com/user-id"
SOURCE_HOST_LOGIN = "github.com/user-login"
EDIT_URL = "backstage.io/edit-url"

HAS_PART = "hasPart"


class DirectoryError(Exception):
    """The directory service could not be queried."""


class EntityKind(str, Enum):
    USER = "user"
    GROUP = "group"
    SYSTEM = "system"
    COMPONENT = "component"
    OTHER = "other"

    @classmethod
    def from_raw(cls, kind: Optional[str]) -> "EntityKind":
        try:
            return cls((kind or "").strip().lower())
        except ValueError:
            return cls.OTHER


@dataclass(frozen=True)
class EntityRef:
    kind: str
    namespace: str
    name: str


def parse_entity_ref(
    ref: str,
    default_kind: str = "",
    default_namespace: str = "",
) -> EntityRef:
    """Split ``kind:namespace/name`` (kind and namespace optional).

    A missing namespace stays empty unless ``default_namespace`` is given,
    leaving the choice to whoever builds the URL.
    """
    kind, sep, rest = ref.partition(":")
    if not sep:
        kind, rest = default_kind, ref
    namespace, sep, name = rest.partition("/")
    if not sep:
        namespace, name = default_namespace, rest
    return EntityRef(kind=kind.lower(), namespace=namespace, name=name)


@dataclass(frozen=True)
class EntityLink:
    url: str
    title: str


@dataclass(frozen=True)
class EntityRelation:
    type: str
    target_ref: str

    @property
    def target(self) -> EntityRef:
        return parse_entity_ref(self.target_ref)

    def target_in(self, namespace: str) -> EntityRef:
        """Target, with a relative ref resolved against ``namespace``."""
        return parse_entity_ref(self.target_ref, default_namespace=namespace)


def _as_list(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _relation_ref(raw: Dict[str, Any]) -> str:
    ref = raw.get("targetRef")
    if ref:
        return ref
    target = _as_dict(raw.get("target"))
    kind, name = target.get("kind", ""), target.get("name", "")
    namespace = target.get("namespace")
    return f"{kind}:{namespace}/{name}" if namespace else f"{kind}:{name}"


@dataclass(frozen=True)
class DirectoryEntity:
    """A catalog record. ``kind`` is kept exactly as the directory issued it."""

    kind: str
    name: str
    namespace: str = ""
    description: Optional[str] = None
    annotations: Dict[str, str] = field(default_factory=dict)
    links: List[EntityLink] = field(default_factory=list)
    relations: List[EntityRelation] = field(default_factory=list)
    spec: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DirectoryEntity":
        """Build an entity from the directory's JSON shape.

        Anything missing or of the wrong type is replaced by an empty value
        so rendering never has to guard against malformed records.
        """
        metadata = _as_dict(data.get("metadata"))
        links = [
            EntityLink(url=link.get("url", ""), title=link.get("title") or link.get("url", ""))
            for link in _as_list(metadata.get("links"))
            if isinstance(link, dict)
        ]
        relations = [
            EntityRelation(type=rel.get("type", ""), target_ref=_relation_ref(rel))
            for rel in _as_list(data.get("relations"))
            if isinstance(rel, dict)
        ]
        return cls(
            kind=data.get("kind", ""),
            name=metadata.get("name", ""),
            namespace=metadata.get("namespace", ""),
            description=metadata.get("description"),
            annotations=dict(_as_dict(metadata.get("annotations"))),
            links=links,
            relations=relations,
            spec=dict(_as_dict(data.get("spec"))),
        )

    @property
    def kind_tag(self) -> EntityKind:
        return EntityKind.from_raw(self.kind)

    @property
    def profile(self) -> Dict[str, Any]:
        return _as_dict(self.spec.get("profile"))

    @property
    def display_name(self) -> str:
        return self.profile.get("displayName") or self.name

    @property
    def timezone(self) -> Optional[str]:
        return self.profile.get("timezone")

    @property
    def chat_channel(self) -> Optional[str]:
        return self.profile.get("slack")

    @property
    def members(self) -> List[str]:
        return [m for m in _as_list(self.spec.get("members")) if isinstance(m, str)]

    @property
    def owner(self) -> Optional[str]:
        return self.spec.get("owner")

    def annotation(self, key: str) -> Optional[str]:
        return self.annotations.get(key) or None


# ── Rendered message shapes ─────────────────────────────────


@dataclass
class Button:
    text: str
    url: str


@dataclass
class Section:
    text: str
    button: Optional[Button] = None


@dataclass
class Divider:
    pass


@dataclass
class ContextFooter:
    text: str


Block = Union[Section, Divider, ContextFooter]


@dataclass
class PlainMessage:
    text: str


@dataclass
class BlockMessage:
    """Structured reply; ``text`` is the notification fallback."""

    text: str
    blocks: List[Block] = field(default_factory=list)


Message = Union[PlainMessage, BlockMessage]


# ── Per-event state ─────────────────────────────────────────


class ProcessingState(str, Enum):
    PENDING = "pending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass
class ResolvedContext:
    """Invoking user's directory identity, scoped to one event."""

    user: Optional[DirectoryEntity] = None


@dataclass
class DispatchResult:
    message: Message
    failed: bool = False
