from __future__ import annotations
from typing import Any, Iterable, List, Mapping, Optional, Union
import discord
from discord.utils import MISSING
from .simples import (
    _Route, InvalidArgument, StickerFormatType, StickerType, snowflake, try_enum
)
from .resource import Resource

class Sticker(Resource):
    """A sticker, either from a Discord pack or uploaded to a guild.

    .. attribute:: name
        :type: str
    .. attribute:: description
        :type: Optional[str]
    .. attribute:: tags
        :type: str

        Autocomplete keywords, comma separated.
    .. attribute:: type
        :type: StickerType
    .. attribute:: format_type
        :type: StickerFormatType
    .. attribute:: available
        :type: bool
    .. attribute:: guild_id
        :type: Optional[int]
    .. attribute:: user_id
        :type: Optional[int]
    .. attribute:: sort_value
        :type: Optional[int]

        Position within its pack.
    .. attribute:: pack_id
        :type: Optional[int]
    """

    def _update(self, data: Mapping[str, Any]) -> None:
        guild_id = snowflake(data.get('guild_id'))
        pack_id = snowflake(data.get('pack_id'))
        user_id = snowflake((data.get('user') or {}).get('id'))
        self.name = data['name']
        self.description = data.get('description')
        self.tags = data.get('tags', '')
        self.type = try_enum(StickerType, data.get('type'))
        self.format_type = try_enum(StickerFormatType, data.get('format_type'))
        self.available = data.get('available', True)
        self.guild_id = guild_id
        self.user_id = user_id
        self.sort_value = data.get('sort_value')
        self.pack_id = pack_id

    def __repr__(self) -> str:
        return f'<Sticker id={self.id} name={self.name!r} format_type={self.format_type!r}>'

    @property
    def url(self) -> str:
        """Where the sticker file can be downloaded.
        Lottie stickers are served as JSON."""
        ext = {
            StickerFormatType.LOTTIE: 'json',
            StickerFormatType.GIF: 'gif',
        }.get(self.format_type, 'png')
        return f'https://media.discordapp.net/stickers/{self.id}.{ext}'

    @property
    def is_guild_sticker(self) -> bool:
        return self.type == StickerType.GUILD

    @property
    def guild(self):
        return self._get_guild(self.guild_id)

    @property
    def user(self):
        return self._get_user(self.user_id, self.guild_id)

    def _route(self, method: str) -> _Route:
        if self.guild_id is None:
            raise InvalidArgument('Only guild stickers can be modified')
        return _Route(method, '/guilds/{guild_id}/stickers/{sticker_id}',
                      guild_id=self.guild_id, sticker_id=self.id)

    async def edit(
        self, *, name: str = MISSING, description: Optional[str] = MISSING,
        tags: Union[str, Iterable[str]] = MISSING, reason: Optional[str] = None
    ) -> Sticker:
        """Edit this guild sticker. Only the arguments passed are sent.

        :param tags: A comma separated string, or a list of keywords.
        :raises discord.HTTPException: if editing failed.
            The sticker is left unchanged.
        """
        payload = {}
        if name is not MISSING:
            payload['name'] = name
        if description is not MISSING:
            payload['description'] = description
        if tags is not MISSING:
            payload['tags'] = tags if isinstance(tags, str) else ','.join(tags)
        if not payload:
            raise InvalidArgument('Nothing to edit')
        return await self._edit(self._route('PATCH'), payload, reason)

    async def delete(self, *, reason: Optional[str] = None) -> None:
        await self.http.request(self._route('DELETE'), reason=reason)

async def fetch_sticker(client: discord.Client, sticker_id: int) -> Sticker:
    data = await client.http.request(
        _Route('GET', '/stickers/{sticker_id}', sticker_id=sticker_id))
    return Sticker(data=data, client=client)

async def fetch_guild_stickers(client: discord.Client, guild_id: int) -> List[Sticker]:
    data = await client.http.request(
        _Route('GET', '/guilds/{guild_id}/stickers', guild_id=guild_id))
    return [Sticker(data=d, client=client) for d in data]
