from __future__ import annotations
import asyncio
from typing import Any, Callable, Dict, Mapping, Optional, Union, TYPE_CHECKING
import discord
from .logger import logger
from .simples import _Route
if TYPE_CHECKING:
    from discord.http import HTTPClient

class Resource(discord.Object):
    """A Discord object that is edited through the REST API.

    Every edit is a round trip: the partial payload is sent, and on
    success *all* cached attributes are replaced from the full object
    Discord returns. If the request fails, the object is left exactly as
    it was and the :class:`discord.HTTPException` propagates.
    Edits on one object are serialized, so a partial payload is never
    built from attributes another edit is about to replace.

    .. attribute:: id
        :type: int
    .. attribute:: client
        :type: discord.Client

        Used for REST requests (``client.http``) and for resolving IDs to
        cached objects (``get_guild``, ``get_channel``, ``get_user``).
    """

    client: discord.Client

    def __init__(self, *, data: Mapping[str, Any], client: discord.Client):
        super().__init__(self._id_from(data))
        self.client = client
        self._lock: Optional[asyncio.Lock] = None
        self._update(data)

    # subclasses reuse ``type`` for Discord's own type field,
    # so don't let discord.Object compare by it
    def __eq__(self, other: Any) -> bool:
        return isinstance(other, self.__class__) and other.id == self.id

    __hash__ = discord.Object.__hash__

    def __repr__(self) -> str:
        return f'<{type(self).__name__} id={self.id}>'

    @staticmethod
    def _id_from(data: Mapping[str, Any]) -> int:
        return int(data['id'])

    def _update(self, data: Mapping[str, Any]) -> None:
        raise NotImplementedError

    @property
    def http(self) -> HTTPClient:
        return self.client.http

    async def _edit(
        self, route: _Route,
        payload: Union[Dict[str, Any], Callable[[], Dict[str, Any]]],
        reason: Optional[str] = None
    ):
        """Send a partial update and re-hydrate from the response.

        :param payload: The partial payload, or a function returning it.
            A function is called only once no other edit is in flight,
            so it can safely merge into current attributes.
        """
        if self._lock is None:
            self._lock = asyncio.Lock()
        async with self._lock:
            if callable(payload):
                payload = payload()
            data = await self.http.request(route, json=payload, reason=reason)
            logger.debug('%s\t%s\t%s', route.method, type(self).__name__, self.id)
            self._update(data)
        return self

    def _get_guild(self, guild_id: Optional[int]):
        if guild_id is None:
            return None
        return self.client.get_guild(guild_id) or discord.Object(guild_id)

    def _get_channel(self, channel_id: Optional[int]):
        if channel_id is None:
            return None
        return self.client.get_channel(channel_id) or discord.Object(channel_id)

    def _get_user(self, user_id: Optional[int], guild_id: Optional[int] = None):
        if user_id is None:
            return None
        guild = self.client.get_guild(guild_id) if guild_id else None
        member = guild.get_member(user_id) if guild is not None else None
        return member or self.client.get_user(user_id) or discord.Object(user_id)

    def _get_role(self, role_id: int, guild_id: Optional[int]):
        guild = self.client.get_guild(guild_id) if guild_id else None
        role = guild.get_role(role_id) if guild is not None else None
        return role or discord.Object(role_id)
