from __future__ import annotations
from datetime import timedelta
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union
import discord
from discord.utils import MISSING
from .simples import (
    _Route, AutoModActionType, AutoModEventType, AutoModPresetType,
    AutoModTriggerType, InvalidArgument, enum_value, snowflake, try_enum
)
from .resource import Resource

Snowflakeish = Union[int, str, discord.abc.Snowflake]

def _resolve_id(value: Optional[Snowflakeish]) -> Optional[int]:
    if value is None:
        return None
    return int(getattr(value, 'id', value))

def _seconds(value: Union[int, float, timedelta, None]) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, timedelta):
        return int(value.total_seconds())
    return int(value)

class AutoModerationAction:
    """Something that happens when a rule triggers.

    .. attribute:: type
        :type: AutoModActionType
    .. attribute:: metadata
        :type: dict

        Type-specific settings, in wire form. Only non-null keys are kept.
    """

    def __init__(
        self, type: Union[AutoModActionType, int, str], *,
        custom_message: str = None, channel: Snowflakeish = None,
        duration: Union[int, float, timedelta] = None
    ) -> None:
        self.type = try_enum(AutoModActionType,
                             enum_value(AutoModActionType, type))
        self.metadata: Dict[str, Any] = {}
        for key, value in (
            ('custom_message', custom_message),
            ('channel_id', _resolve_id(channel)),
            ('duration_seconds', _seconds(duration)),
        ):
            if value is not None:
                self.metadata[key] = value

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> AutoModerationAction:
        self = cls(data['type'])
        self.metadata = {k: v for k, v in (data.get('metadata') or {}).items()
                         if v is not None}
        return self

    @property
    def custom_message(self) -> Optional[str]:
        """Shown to the member whose message was blocked."""
        return self.metadata.get('custom_message')

    @property
    def channel_id(self) -> Optional[int]:
        """Where alerts are sent."""
        return snowflake(self.metadata.get('channel_id'))

    @property
    def duration(self) -> Optional[timedelta]:
        """How long members are timed out for."""
        seconds = self.metadata.get('duration_seconds')
        if seconds is None:
            return None
        return timedelta(seconds=seconds)

    def to_dict(self) -> dict:
        result = {'type': int(self.type)}
        if self.metadata:
            result['metadata'] = dict(self.metadata)
        return result

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, AutoModerationAction):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f'<AutoModerationAction type={self.type!r} metadata={self.metadata!r}>'

def upsert_action(
    actions: Iterable[AutoModerationAction], candidate: AutoModerationAction
) -> List[AutoModerationAction]:
    """Return a new action list with ``candidate`` applied.

    A rule holds at most one action per type, so:

    * if no action of the candidate's type exists, it is appended
    * if one exists and the candidate has no settings, it is removed
    * otherwise the existing action is replaced in place
    """
    result = list(actions)
    for i, action in enumerate(result):
        if action.type == candidate.type:
            if candidate.metadata:
                result[i] = candidate
            else:
                del result[i]
            return result
    result.append(candidate)
    return result

class AutoModerationRule(Resource):
    """An auto moderation rule in a guild.

    The ``set_*`` and ``edit*`` coroutines each make one request and then
    refresh every attribute from Discord's response.

    .. attribute:: guild_id
        :type: int
    .. attribute:: name
        :type: str
    .. attribute:: creator_id
        :type: int
    .. attribute:: event_type
        :type: AutoModEventType
    .. attribute:: trigger_type
        :type: AutoModTriggerType
    .. attribute:: trigger_metadata
        :type: dict

        Raw trigger settings. Edits merge into this key by key.
    .. attribute:: actions
        :type: list[AutoModerationAction]
    .. attribute:: enabled
        :type: bool
    .. attribute:: exempt_role_ids
        :type: list[int]
    .. attribute:: exempt_channel_ids
        :type: list[int]
    """

    guild_id: int
    name: str
    creator_id: Optional[int]
    event_type: AutoModEventType
    trigger_type: AutoModTriggerType
    trigger_metadata: Dict[str, Any]
    actions: List[AutoModerationAction]
    enabled: bool
    exempt_role_ids: List[int]
    exempt_channel_ids: List[int]

    def _update(self, data: Mapping[str, Any]) -> None:
        actions = [AutoModerationAction.from_dict(a)
                   for a in data.get('actions', [])]
        exempt_roles = [int(r) for r in data.get('exempt_roles', [])]
        exempt_channels = [int(c) for c in data.get('exempt_channels', [])]
        guild_id = int(data['guild_id'])
        creator_id = snowflake(data.get('creator_id'))
        self.name = data['name']
        self.guild_id = guild_id
        self.creator_id = creator_id
        self.event_type = try_enum(AutoModEventType, data.get('event_type'))
        self.trigger_type = try_enum(AutoModTriggerType, data.get('trigger_type'))
        self.trigger_metadata = dict(data.get('trigger_metadata') or {})
        self.actions = actions
        self.enabled = data.get('enabled', False)
        self.exempt_role_ids = exempt_roles
        self.exempt_channel_ids = exempt_channels

    def __repr__(self) -> str:
        return (f'<AutoModerationRule id={self.id} name={self.name!r} '
                f'guild_id={self.guild_id} trigger_type={self.trigger_type!r}>')

    @property
    def guild(self):
        return self._get_guild(self.guild_id)

    @property
    def creator(self):
        return self._get_user(self.creator_id, self.guild_id)

    @property
    def exempt_roles(self) -> list:
        return [self._get_role(r, self.guild_id) for r in self.exempt_role_ids]

    @property
    def exempt_channels(self) -> list:
        return [self._get_channel(c) for c in self.exempt_channel_ids]

    @property
    def keyword_filter(self) -> List[str]:
        return self.trigger_metadata.get('keyword_filter', [])

    @property
    def regex_patterns(self) -> List[str]:
        return self.trigger_metadata.get('regex_patterns', [])

    @property
    def presets(self) -> List[AutoModPresetType]:
        return [try_enum(AutoModPresetType, p)
                for p in self.trigger_metadata.get('presets', [])]

    @property
    def allow_list(self) -> List[str]:
        """Substrings that will not trigger this rule."""
        return self.trigger_metadata.get('allow_list', [])

    allowed_keywords = allow_list

    @property
    def mention_limit(self) -> Optional[int]:
        """Maximum unique mentions allowed per message."""
        return self.trigger_metadata.get('mention_total_limit')

    @property
    def mention_raid_protection(self) -> bool:
        return bool(self.trigger_metadata.get('mention_raid_protection_enabled'))

    def action(self, type: Union[AutoModActionType, int, str]) -> Optional[AutoModerationAction]:
        """Get this rule's action of a type, if it has one."""
        type = enum_value(AutoModActionType, type)
        return discord.utils.find(lambda a: a.type == type, self.actions)

    def _route(self, method: str) -> _Route:
        return _Route(method, '/guilds/{guild_id}/auto-moderation/rules/{rule_id}',
                      guild_id=self.guild_id, rule_id=self.id)

    async def edit(
        self, *, name: str = MISSING,
        event_type: Union[AutoModEventType, int, str] = MISSING,
        enabled: bool = MISSING,
        exempt_roles: Iterable[Snowflakeish] = MISSING,
        exempt_channels: Iterable[Snowflakeish] = MISSING,
        reason: Optional[str] = None
    ) -> AutoModerationRule:
        """Edit top-level attributes of this rule.
        Only the arguments passed are sent.

        :param exempt_roles: Roles or role IDs.
        :param exempt_channels: Channels or channel IDs.
        :param reason: Shown in the audit log.

        :raises discord.HTTPException: if editing the rule failed.
            The rule is left unchanged.
        """
        payload = {}
        if name is not MISSING:
            payload['name'] = name
        if event_type is not MISSING:
            payload['event_type'] = enum_value(AutoModEventType, event_type)
        if enabled is not MISSING:
            payload['enabled'] = enabled
        if exempt_roles is not MISSING:
            payload['exempt_roles'] = [_resolve_id(r) for r in exempt_roles]
        if exempt_channels is not MISSING:
            payload['exempt_channels'] = [_resolve_id(c) for c in exempt_channels]
        if not payload:
            raise InvalidArgument('Nothing to edit')
        return await self._edit(self._route('PATCH'), payload, reason)

    async def edit_metadata(
        self, *, reason: Optional[str] = None, **metadata: Any
    ) -> AutoModerationRule:
        """Change trigger metadata keys, keeping all other keys as they are.

        :raises discord.HTTPException: if editing the rule failed.
            The rule is left unchanged.
        """
        if not metadata:
            raise InvalidArgument('Nothing to edit')
        def payload():
            merged = dict(self.trigger_metadata)
            merged.update(metadata)
            return {'trigger_metadata': merged}
        return await self._edit(self._route('PATCH'), payload, reason)

    async def set_keyword_filter(self, keywords: Iterable[str], *, reason=None):
        """Set the substrings that trigger this rule."""
        return await self.edit_metadata(keyword_filter=list(keywords), reason=reason)

    async def set_regex_patterns(self, patterns: Iterable[str], *, reason=None):
        """Set the regular expressions that trigger this rule."""
        return await self.edit_metadata(regex_patterns=list(patterns), reason=reason)

    async def set_presets(
        self, presets: Iterable[Union[AutoModPresetType, int, str]], *, reason=None
    ):
        """Set the Discord-defined word lists that trigger this rule."""
        return await self.edit_metadata(
            presets=[enum_value(AutoModPresetType, p) for p in presets],
            reason=reason)

    async def set_allow_list(self, keywords: Iterable[str], *, reason=None):
        """Set the substrings that should not trigger this rule."""
        return await self.edit_metadata(allow_list=list(keywords), reason=reason)

    async def set_mention_limit(self, limit: int, *, reason=None):
        """Set the maximum unique mentions per message, up to 50."""
        return await self.edit_metadata(mention_total_limit=limit, reason=reason)

    async def set_mention_raid_protection(self, enabled: bool, *, reason=None):
        return await self.edit_metadata(
            mention_raid_protection_enabled=enabled, reason=reason)

    async def upsert_action(
        self, type: Union[AutoModActionType, int, str], *,
        custom_message: str = None, channel: Snowflakeish = None,
        duration: Union[int, float, timedelta] = None,
        reason: Optional[str] = None
    ) -> AutoModerationRule:
        """Add, replace or remove this rule's action of a type.

        If the rule has no action of this type, one is added. If it has
        one, it is replaced, unless no settings are passed, in which case
        it is removed. See :func:`upsert_action`.

        :raises discord.HTTPException: if editing the rule failed.
            The rule is left unchanged.
        """
        candidate = AutoModerationAction(
            type, custom_message=custom_message, channel=channel,
            duration=duration)
        def payload():
            actions = upsert_action(self.actions, candidate)
            return {'actions': [a.to_dict() for a in actions]}
        return await self._edit(self._route('PATCH'), payload, reason)

    async def set_block_message(self, custom_message: str = None, *, reason=None):
        """Add a block message action, or change its custom message.
        With no message, an existing block message action is removed."""
        return await self.upsert_action(
            AutoModActionType.BLOCK_MESSAGE, custom_message=custom_message,
            reason=reason)

    async def set_alert_channel(self, channel: Optional[Snowflakeish], *, reason=None):
        """Send alerts to ``channel``, or stop sending them if :const:`None`."""
        return await self.upsert_action(
            AutoModActionType.SEND_ALERT_MESSAGE, channel=channel,
            reason=reason)

    async def set_timeout(
        self, duration: Union[int, float, timedelta, None], *, reason=None
    ):
        """Time out members for ``duration`` (seconds or a timedelta, up to
        four weeks), or remove the timeout action if :const:`None`."""
        return await self.upsert_action(
            AutoModActionType.TIMEOUT, duration=duration, reason=reason)

    async def set_block_member(self, *, reason=None):
        """Toggle the action that blocks members from interacting:
        added if absent, removed if present."""
        return await self.upsert_action(
            AutoModActionType.BLOCK_MEMBER_INTERACTION, reason=reason)

    async def delete(self, *, reason: Optional[str] = None) -> None:
        """Delete this rule. This cannot be undone."""
        await self.http.request(self._route('DELETE'), reason=reason)

class AutoModerationRuleBuilder:
    """Describes a new rule for :func:`create_rule`."""

    def __init__(
        self, name: str, trigger_type: Union[AutoModTriggerType, int, str], *,
        event_type: Union[AutoModEventType, int, str] = AutoModEventType.MESSAGE_SEND,
        metadata: Mapping[str, Any] = None,
        actions: Iterable[AutoModerationAction] = (),
        enabled: bool = True,
        exempt_roles: Iterable[Snowflakeish] = (),
        exempt_channels: Iterable[Snowflakeish] = ()
    ) -> None:
        self.name = name
        self.trigger_type = enum_value(AutoModTriggerType, trigger_type)
        self.event_type = enum_value(AutoModEventType, event_type)
        self.metadata = dict(metadata or {})
        self.actions = list(actions)
        self.enabled = enabled
        self.exempt_roles = [_resolve_id(r) for r in exempt_roles]
        self.exempt_channels = [_resolve_id(c) for c in exempt_channels]

    def add_action(
        self, type: Union[AutoModActionType, int, str], *,
        custom_message: str = None, channel: Snowflakeish = None,
        duration: Union[int, float, timedelta] = None
    ) -> AutoModerationRuleBuilder:
        """Add an action, replacing any action of the same type.
        Unlike :func:`upsert_action`, an action without settings is kept."""
        action = AutoModerationAction(
            type, custom_message=custom_message, channel=channel,
            duration=duration)
        for i, existing in enumerate(self.actions):
            if existing.type == action.type:
                self.actions[i] = action
                break
        else:
            self.actions.append(action)
        return self

    def set_presets(self, presets: Iterable[Union[AutoModPresetType, int, str]]):
        self.metadata['presets'] = [enum_value(AutoModPresetType, p)
                                    for p in presets]
        return self

    def to_dict(self) -> dict:
        result = {
            'name': self.name,
            'event_type': self.event_type,
            'trigger_type': self.trigger_type,
            'actions': [a.to_dict() for a in self.actions],
            'enabled': self.enabled,
        }
        if self.metadata:
            result['trigger_metadata'] = dict(self.metadata)
        if self.exempt_roles:
            result['exempt_roles'] = self.exempt_roles
        if self.exempt_channels:
            result['exempt_channels'] = self.exempt_channels
        return result

async def create_rule(
    client: discord.Client, guild_id: int,
    builder: AutoModerationRuleBuilder, *, reason: Optional[str] = None
) -> AutoModerationRule:
    """Create an auto moderation rule in a guild."""
    route = _Route('POST', '/guilds/{guild_id}/auto-moderation/rules',
                   guild_id=guild_id)
    data = await client.http.request(route, json=builder.to_dict(), reason=reason)
    return AutoModerationRule(data=data, client=client)

async def fetch_rules(
    client: discord.Client, guild_id: int
) -> List[AutoModerationRule]:
    """Fetch every auto moderation rule in a guild."""
    route = _Route('GET', '/guilds/{guild_id}/auto-moderation/rules',
                   guild_id=guild_id)
    data = await client.http.request(route)
    return [AutoModerationRule(data=d, client=client) for d in data]
