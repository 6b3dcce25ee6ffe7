from __future__ import annotations
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union
import discord
from .simples import _Route, ApplicationFlags, InvalidArgument, snowflake
from .resource import Resource

CDN = 'https://cdn.discordapp.com'

class TeamMember:
    """A developer on a :class:`Team`.

    .. attribute:: team
        :type: Team
    .. attribute:: user_id
        :type: int
    .. attribute:: role
        :type: str

        ``'admin'``, ``'developer'`` or ``'read_only'``.
    .. attribute:: membership_state
        :type: int
    """

    INVITED = 1
    ACCEPTED = 2

    def __init__(self, data: Mapping[str, Any], team: Team):
        self.team = team
        self.user_id = int(data['user']['id'])
        self.role = data.get('role')
        self.membership_state = data.get('membership_state')

    def __repr__(self) -> str:
        return f'<TeamMember user_id={self.user_id} role={self.role!r}>'

    @property
    def user(self):
        return self.team.client.get_user(self.user_id) or discord.Object(self.user_id)

    @property
    def invited(self) -> bool:
        """Invited, but has not accepted yet."""
        return self.membership_state == self.INVITED

    @property
    def accepted(self) -> bool:
        return self.membership_state == self.ACCEPTED

class Team(discord.Object):
    """A group of developers that owns an :class:`Application`.

    .. attribute:: name
        :type: str
    .. attribute:: members
        :type: list[TeamMember]
    .. attribute:: owner_user_id
        :type: int
    """

    def __init__(self, data: Mapping[str, Any], client: discord.Client):
        super().__init__(int(data['id']))
        self.client = client
        self.name = data.get('name')
        self.icon = data.get('icon')
        self.owner_user_id = snowflake(data.get('owner_user_id'))
        self.members = [TeamMember(m, self) for m in data.get('members', [])]

    def __repr__(self) -> str:
        return f'<Team id={self.id} name={self.name!r}>'

    @property
    def owner(self) -> Optional[TeamMember]:
        return discord.utils.get(self.members, user_id=self.owner_user_id)

    @property
    def icon_url(self) -> Optional[str]:
        if self.icon is None:
            return None
        return f'{CDN}/team-icons/{self.id}/{self.icon}.png'

# keyword argument -> JSON key
EDITABLE = MappingProxyType({
    'description': 'description',
    'tags': 'tags',
    'flags': 'flags',
    'icon': 'icon',
    'cover_image': 'cover_image',
    'custom_install_url': 'custom_install_url',
    'install_params': 'install_params',
    'interactions_endpoint_url': 'interactions_endpoint_url',
    'role_connections_url': 'role_connections_verification_url',
    'webhook_events_url': 'event_webhooks_url',
    'webhook_events_status': 'event_webhooks_status',
    'webhook_event_types': 'event_webhooks_types',
})

class Application(Resource):
    """The bot's own application.

    .. attribute:: name
        :type: str
    .. attribute:: description
        :type: str
    .. attribute:: flags
        :type: ApplicationFlags
    .. attribute:: owner_id
        :type: Optional[int]
    .. attribute:: team
        :type: Optional[Team]
    .. attribute:: guild_id
        :type: Optional[int]
    .. attribute:: bot_public
        :type: bool
    .. attribute:: bot_requires_code_grant
        :type: bool
    .. attribute:: guild_count
        :type: int

        Approximate number of guilds the bot is in.
    .. attribute:: user_install_count
        :type: int
    .. attribute:: install_scopes
        :type: list[str]
    .. attribute:: install_permissions
        :type: Optional[discord.Permissions]
    .. attribute:: tags
        :type: list[str]
    """

    def _update(self, data: Mapping[str, Any]) -> None:
        team = Team(data['team'], self.client) if data.get('team') else None
        owner_id = snowflake((data.get('owner') or {}).get('id'))
        params = data.get('install_params') or {}
        permissions = params.get('permissions')
        if permissions is not None:
            permissions = discord.Permissions(int(permissions))
        self.name = data['name']
        self.description = data.get('description', '')
        self.icon = data.get('icon')
        self.cover_image = data.get('cover_image')
        self.flags = ApplicationFlags(data.get('flags', 0))
        self.owner_id = owner_id
        self.team = team
        self.guild_id = snowflake(data.get('guild_id'))
        self.primary_sku_id = snowflake(data.get('primary_sku_id'))
        self.bot_public = data.get('bot_public', False)
        self.bot_requires_code_grant = data.get('bot_requires_code_grant', False)
        self.rpc_origins = data.get('rpc_origins', [])
        self.terms_of_service_url = data.get('terms_of_service_url')
        self.privacy_policy_url = data.get('privacy_policy_url')
        self.verify_key = data.get('verify_key')
        self.slug = data.get('slug')
        self.guild_count = data.get('approximate_guild_count', 0)
        self.user_install_count = data.get('approximate_user_install_count', 0)
        self.redirect_uris = data.get('redirect_uris', [])
        self.interactions_endpoint_url = data.get('interactions_endpoint_url')
        self.role_connections_url = data.get('role_connections_verification_url')
        self.webhook_events_url = data.get('event_webhooks_url')
        self.webhook_events_status = data.get('event_webhooks_status')
        self.webhook_event_types = data.get('event_webhooks_types', [])
        self.tags = data.get('tags', [])
        self.custom_install_url = data.get('custom_install_url')
        self.install_scopes = params.get('scopes', [])
        self.install_permissions = permissions

    def __repr__(self) -> str:
        return (f'<Application id={self.id} name={self.name!r} '
                f'flags={self.flags!r} owner_id={self.owner_id}>')

    @property
    def owner(self):
        return self._get_user(self.owner_id)

    @property
    def guild(self):
        return self._get_guild(self.guild_id)

    @property
    def icon_url(self) -> Optional[str]:
        if self.icon is None:
            return None
        return f'{CDN}/app-icons/{self.id}/{self.icon}.png'

    @property
    def cover_image_url(self) -> Optional[str]:
        if self.cover_image is None:
            return None
        return f'{CDN}/app-icons/{self.id}/{self.cover_image}.png'

    def has_flag(self, flag: Union[ApplicationFlags, int, str]) -> bool:
        """Check a public flag by member, value or name
        (e.g. ``'gateway_message_content'``)."""
        if isinstance(flag, str):
            try:
                flag = ApplicationFlags[flag.upper()]
            except KeyError:
                raise InvalidArgument(f'{flag!r} is not an application flag') from None
        return bool(self.flags & flag)

    async def edit(self, *, reason: Optional[str] = None, **fields: Any) -> Application:
        """Edit the application. Keyword arguments are the attribute names
        in :data:`EDITABLE`; only those passed are sent.

        :raises InvalidArgument: for unknown or missing fields.
        :raises discord.HTTPException: if editing failed.
            The application is left unchanged.
        """
        unknown = fields.keys() - EDITABLE.keys()
        if unknown:
            raise InvalidArgument(f'Cannot edit {", ".join(sorted(unknown))}')
        if not fields:
            raise InvalidArgument('Nothing to edit')
        payload = {EDITABLE[k]: v for k, v in fields.items()}
        if payload.get('flags') is not None:
            payload['flags'] = int(payload['flags'])
        return await self._edit(_Route('PATCH', '/applications/@me'), payload, reason)

async def fetch_application(client: discord.Client) -> Application:
    data = await client.http.request(_Route('GET', '/applications/@me'))
    return Application(data=data, client=client)
