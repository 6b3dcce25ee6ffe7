from __future__ import annotations
from typing import Any, Mapping, Optional
import discord
from discord.utils import MISSING
from .simples import _Route, InvalidArgument, normalize_emoji, snowflake
from .resource import Resource

class SoundboardSound(Resource):
    """A soundboard sound, either built in or uploaded to a guild.

    .. attribute:: name
        :type: str
    .. attribute:: volume
        :type: float

        Between 0 and 1.
    .. attribute:: emoji_id
        :type: Optional[int]
    .. attribute:: emoji_name
        :type: Optional[str]
    .. attribute:: guild_id
        :type: Optional[int]

        :const:`None` for Discord's default sounds.
    .. attribute:: available
        :type: bool

        May be false when the guild lost the boosts needed for it.
    .. attribute:: user_id
        :type: Optional[int]

        Who uploaded the sound, if the bot is allowed to see that.
    """

    name: str
    volume: float
    emoji_id: Optional[int]
    emoji_name: Optional[str]
    guild_id: Optional[int]
    available: bool
    user_id: Optional[int]

    @staticmethod
    def _id_from(data: Mapping[str, Any]) -> int:
        return int(data['sound_id'])

    def _update(self, data: Mapping[str, Any]) -> None:
        emoji_id = snowflake(data.get('emoji_id'))
        guild_id = snowflake(data.get('guild_id'))
        user_id = snowflake((data.get('user') or {}).get('id'))
        self.name = data['name']
        self.volume = data.get('volume', 1.0)
        self.emoji_id = emoji_id
        self.emoji_name = data.get('emoji_name')
        self.guild_id = guild_id
        self.available = data.get('available', True)
        self.user_id = user_id

    def __repr__(self) -> str:
        return f'<SoundboardSound id={self.id} name={self.name!r} guild_id={self.guild_id}>'

    @property
    def emoji(self) -> Optional[discord.PartialEmoji]:
        if self.emoji_id is None and self.emoji_name is None:
            return None
        return discord.PartialEmoji(name=self.emoji_name, id=self.emoji_id)

    @property
    def guild(self):
        return self._get_guild(self.guild_id)

    @property
    def user(self):
        return self._get_user(self.user_id, self.guild_id)

    @property
    def url(self) -> str:
        return f'https://cdn.discordapp.com/soundboard-sounds/{self.id}'

    def _route(self, method: str) -> _Route:
        if self.guild_id is None:
            raise InvalidArgument('Default soundboard sounds cannot be modified')
        return _Route(method, '/guilds/{guild_id}/soundboard-sounds/{sound_id}',
                      guild_id=self.guild_id, sound_id=self.id)

    async def edit(
        self, *, name: str = MISSING, volume: Optional[float] = MISSING,
        emoji: Any = MISSING, reason: Optional[str] = None
    ) -> SoundboardSound:
        """Edit this sound. Only the arguments passed are sent.

        :param emoji: A custom emoji (or its ID), a unicode emoji,
            or :const:`None` to remove the emoji.
        :raises InvalidArgument: if nothing would be edited,
            or this is a default sound.
        :raises discord.HTTPException: if editing failed.
            The sound is left unchanged.
        """
        payload = {}
        if name is not MISSING:
            payload['name'] = name
        if volume is not MISSING:
            payload['volume'] = volume
        if emoji is not MISSING:
            emoji = normalize_emoji(emoji) or {}
            payload['emoji_id'] = emoji.get('id')
            payload['emoji_name'] = emoji.get('name') if 'id' not in emoji else None
        if not payload:
            raise InvalidArgument('Nothing to edit')
        return await self._edit(self._route('PATCH'), payload, reason)

    async def delete(self, *, reason: Optional[str] = None) -> None:
        await self.http.request(self._route('DELETE'), reason=reason)
