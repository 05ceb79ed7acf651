"""Response renderer — builds chat messages for directory entities.

One layout per entity kind (user, group, system) plus a link-out fallback
for every other kind. Optional fields are always substituted with a fallback
phrase; list sections render empty rather than fail.
"""

from dataclasses import dataclass
from typing import Awaitable, Callable, Dict, List, Optional

from catalog_bot.domain import markdown as md
from catalog_bot.domain.models import (
    CHAT_USER_ID,
    DEFAULT_NAMESPACE,
    EDIT_URL,
    HAS_PART,
    ISSUE_TRACKER_USER_ID,
    SOURCE_HOST_LOGIN,
    BlockMessage,
    Button,
    ContextFooter,
    DirectoryEntity,
    Divider,
    EntityKind,
    Message,
    PlainMessage,
    Section,
    parse_entity_ref,
)
from catalog_bot.domain.resolver import EntityResolver

NOT_FOUND = "Not Found"
MYSTERY_ROLE = "Mystery Role"
NO_RELATIONS = "No relations found"
GROUP_PLACEHOLDER = "They seem to be a bit of a mystery!"
SYSTEM_PLACEHOLDER = "I'm not sure what this system does"
USER_PLACEHOLDER = "No description provided"
SYSTEM_MODEL_DOCS = "https://backstage.io/docs/features/software-catalog/system-model"


@dataclass
class RenderSettings:
    web_url: str = "https://backstage.example.com"
    namespace: str = DEFAULT_NAMESPACE
    bot_handle: str = "@xs-backstage"
    help_channel: str = "CHANNEL"


class ResponseRenderer:
    def __init__(self, resolver: EntityResolver, settings: Optional[RenderSettings] = None):
        self._resolver = resolver
        self.settings = settings or RenderSettings()
        self._layouts: Dict[EntityKind, Callable[[DirectoryEntity], Awaitable[Message]]] = {
            EntityKind.USER: self._user_layout,
            EntityKind.GROUP: self.render_group,
            EntityKind.SYSTEM: self.render_system,
        }

    # -- Entry points --

    async def render(self, entity: DirectoryEntity) -> Message:
        """Render any entity; kinds without a layout get a link-out message."""
        layout = self._layouts.get(entity.kind_tag, self.render_unknown)
        return await layout(entity)

    def entity_url(self, kind: str, name: str, namespace: Optional[str] = None) -> str:
        s = self.settings
        return f"{s.web_url}/catalog/{namespace or s.namespace}/{kind.lower()}/{name}"

    # -- Per-kind layouts --

    async def _user_layout(self, entity: DirectoryEntity) -> Message:
        return self.render_user(entity)

    def render_user(self, user: Optional[DirectoryEntity]) -> Message:
        """Render a person; None means the identity lookup found nobody."""
        if user is None:
            return BlockMessage(
                text="I couldn't find that person in Backstage.",
                blocks=[
                    Section(
                        "Sorry, we've never met! It may also be the case that Backstage has "
                        "been freshly deployed. You can try again in a minute and see if "
                        "that fixes things."
                    )
                ],
            )

        profile = [f"{md.bold('Timezone')}: {user.timezone or NOT_FOUND}"]
        accounts = [
            f"{md.bold('Github')}: {user.annotation(SOURCE_HOST_LOGIN) or NOT_FOUND}",
            f"{md.bold('Pagerduty')}: {user.annotation(ISSUE_TRACKER_USER_ID) or NOT_FOUND}",
            f"{md.bold('Slack')}: {user.annotation(CHAT_USER_ID) or NOT_FOUND}",
        ]
        if user.relations:
            relations = "\n" + "\n".join(
                f"• {rel.type} {rel.target_ref}" for rel in user.relations
            )
        else:
            relations = f": {NO_RELATIONS}"

        return BlockMessage(
            text=f"Here's what I know about {user.display_name}",
            blocks=[
                Section(
                    f"{md.bold(user.display_name)}\n{user.description or USER_PLACEHOLDER}",
                    button=self._details_button(user),
                ),
                Divider(),
                Section("\n".join(profile)),
                Section("\n".join(accounts)),
                Divider(),
                Section(f"{md.bold('Related to these Backstage entities')}{relations}"),
                self.closing_prompt(user),
            ],
        )

    async def render_group(self, group: DirectoryEntity) -> Message:
        members = [await self._member_line(member) for member in group.members]
        channel = group.chat_channel or NOT_FOUND
        return BlockMessage(
            text=f"Here's what I know about {group.display_name}",
            blocks=[
                Section(
                    f"{md.bold(group.display_name)}\n"
                    f"{md.blockquote(group.description or GROUP_PLACEHOLDER)}",
                    button=self._details_button(group),
                ),
                Section(f"They should be reachable over at #{channel}"),
                Section(f"{md.bold('Members')}:\n{md.list_bullet(members)}"),
                Section(f"{md.bold('Relevant Links')}\n{md.list_bullet(self._links(group))}"),
                self.closing_prompt(group),
            ],
        )

    async def render_system(self, system: DirectoryEntity) -> Message:
        parts = [rel.target_in(system.namespace) for rel in system.relations if rel.type == HAS_PART]
        components = [
            md.link(self.entity_url("component", ref.name, ref.namespace), ref.name)
            for ref in parts
            if ref.kind == EntityKind.COMPONENT.value
        ]
        return BlockMessage(
            text=f"Here's what I know about {system.name}",
            blocks=[
                Section(
                    f"{md.bold(system.name)}\n"
                    f"{md.blockquote(system.description or SYSTEM_PLACEHOLDER)}"
                ),
                self._owner_section(system.owner, system.namespace),
                Section(f"{md.bold('Relevant Links')}\n{md.list_bullet(self._links(system))}"),
                Section(f"{md.bold('Known Components')}\n{md.list_bullet(components)}"),
                self.closing_prompt(system),
            ],
        )

    async def render_unknown(self, entity: DirectoryEntity) -> Message:
        url = self.entity_url(entity.kind or EntityKind.OTHER.value, entity.name, entity.namespace)
        return PlainMessage(
            "I found a match but I don't know how to display it in Slack just yet. "
            f"You can view it in Backstage by visiting {url}"
        )

    # -- Shared sections --

    def closing_prompt(self, entity: Optional[DirectoryEntity]) -> ContextFooter:
        help_channel = md.channel(self.settings.help_channel)
        extra = f"Please let us know in {help_channel} so we can work together to correct any mistakes."
        edit_url = entity.annotation(EDIT_URL) if entity else None
        if edit_url:
            kind = entity.kind_tag.value.capitalize() if entity.kind_tag != EntityKind.OTHER else "entity"
            extra = (
                f"If you're up for it, you can edit this {kind} definition via "
                f"{md.link(edit_url, 'Github')} otherwise you can reach out to "
                f"{help_channel} for assistance"
            )
        return ContextFooter(f"{md.emoji('question')} Does something seem off? {extra}")

    def failure_apology(self) -> PlainMessage:
        return PlainMessage(
            "Wah wah, I wasn't able to complete this query! Please let "
            f"{md.channel(self.settings.help_channel)} know so we can look into it."
        )

    def malformed_event(self, event_ts: str) -> PlainMessage:
        return PlainMessage(
            "I dunno what you just said but I heard a malformed event and I don't know how "
            "to react!\nPlease share the following timestamp in "
            f"{md.channel(self.settings.help_channel)}: {event_ts} to help us debug this issue."
        )

    def help_menu(self) -> BlockMessage:
        bot = self.settings.bot_handle
        help_channel = md.channel(self.settings.help_channel)

        def example(query: str, blurb: str) -> Section:
            return Section(f"{md.code_inline(f'{bot} find {query}')}\n{blurb}")

        return BlockMessage(
            text=(
                "Hey there 👋 I'm the Backstage helper bot. My job is to help you get the "
                "information you need about the software ecosystem with as little friction "
                "as possible."
            ),
            blocks=[
                Section(md.bold("There are only a handful of commands you need to remember to use me:")),
                Section(
                    f"{md.code_inline(f'{bot} help')}: You've already discovered this one. It presents "
                    "the help menu that you're currently reading right now. Use it anytime to "
                    "refresh your memory on how to search for Backstage entities."
                ),
                Section(
                    f"{md.code_inline(f'{bot} find [query]')}: Whatever you're looking for, I'll try "
                    "my best to figure out the details for you. If I can't find an exact match, "
                    "I'll let you know so you can narrow down your query. See below for some "
                    "example queries."
                ),
                Divider(),
                Section(md.bold("Here are some example queries to get you started:")),
                example("cool-tuna", "Learn about the Cool Tuna team and who its members are"),
                example("hotdog", "Learn about the Hotdog system and the components that make it up"),
                example(
                    "jane.doe",
                    "Learn about your coworker Jane and where you can find her on Slack, Github and Pagerduty",
                ),
                example(
                    "shopify",
                    "Learn about the Shopify SaaS product and which team looks after our relationship with it",
                ),
                Divider(),
                Section(md.bold("Some background on how searching works:")),
                Section(
                    f"An {md.link(SYSTEM_MODEL_DOCS, 'entity')} in Backstage can represent any number "
                    "of things: a system, component, team, person or even a SaaS product\n\n"
                    "For the sake of simplicity, don't worry too much about the details while "
                    "getting started. Just try searching for something you're interested in. "
                    "9 times out of 10, you can just enter the name of a thing in lowercase with "
                    "spaces replaced with dashes and you'll find a hit.\n\n"
                    f"The {md.code_inline('find')} function will return an exact match if the "
                    "provided input is exactly the same as the ID for a Backstage entity. You can "
                    "find these IDs by navigating to an entity in Backstage and looking at the ID "
                    "in the URL.\n\n"
                    "If several entities share a name (ie; a System and Component with the same "
                    "name), I'll prefer the System."
                ),
                Divider(),
                ContextFooter(
                    f"👀 Psst, you can view your own Backstage entry with "
                    f"{md.code_inline(f'{bot} whoami')} if one exists.\n"
                    f"❓ Reach out to {help_channel} to get help\n"
                    "🏗 I may fall back to linking you to the relevant Backstage URL if I can't "
                    "format the results for Slack."
                ),
            ],
        )

    # -- Helpers --

    def _details_button(self, entity: DirectoryEntity) -> Button:
        return Button(
            text="View more details in Backstage",
            url=self.entity_url(entity.kind_tag.value, entity.name, entity.namespace),
        )

    def _owner_section(self, owner: Optional[str], namespace: str = "") -> Section:
        if not owner:
            return Section(f"{md.bold(NOT_FOUND)}: nobody is listed as looking after it")
        ref = parse_entity_ref(owner, default_kind="group", default_namespace=namespace)
        owner_link = md.bold(md.link(self.entity_url(ref.kind, ref.name, ref.namespace), ref.name))
        suggestion = md.code_inline(f"{self.settings.bot_handle} find {ref.name}")
        return Section(
            f"{owner_link} are known to look after it\n"
            f"I can tell you more details if you say {suggestion}"
        )

    @staticmethod
    def _links(entity: DirectoryEntity) -> List[str]:
        return [md.link(link.url, link.title) for link in entity.links]

    async def _member_line(self, member: str) -> str:
        ref = parse_entity_ref(member, default_kind="user")
        matches = await self._resolver.resolve_query(ref.name)
        if not matches:
            return f"{member} - {md.italic(MYSTERY_ROLE)}"
        profile = matches[0]
        return f"{profile.display_name} - {md.italic(profile.description or MYSTERY_ROLE)}"
