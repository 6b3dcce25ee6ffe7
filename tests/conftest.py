"""Shared fakes standing in for discord.py's client and HTTP client."""
import asyncio
import copy
from types import SimpleNamespace
from typing import Any, Callable, List, Optional, Tuple
import discord
import pytest


def http_error(status: int = 400, message: str = 'Invalid Form Body') -> discord.HTTPException:
    response = SimpleNamespace(status=status, reason='Bad Request')
    return discord.HTTPException(response, message)


class FakeHTTP:
    """Records every request. Answers with ``handler(route, json)`` if set,
    otherwise with queued responses in order."""

    def __init__(self) -> None:
        self.calls: List[Tuple[Any, dict]] = []
        self.responses: List[Any] = []
        self.handler: Optional[Callable[[Any, Any], Any]] = None
        self.error: Optional[Exception] = None

    def queue(self, data: Any) -> None:
        self.responses.append(data)

    async def request(self, route, **kwargs):
        self.calls.append((route, kwargs))
        await asyncio.sleep(0)
        if self.error is not None:
            raise self.error
        if self.handler is not None:
            return self.handler(route, kwargs.get('json'))
        if self.responses:
            return self.responses.pop(0)
        return None

    @property
    def last(self) -> Tuple[Any, dict]:
        return self.calls[-1]


class FakeGuild:
    def __init__(self, id: int, members=(), roles=()) -> None:
        self.id = id
        self.members = {m.id: m for m in members}
        self.roles = {r.id: r for r in roles}

    def get_member(self, user_id):
        return self.members.get(user_id)

    def get_role(self, role_id):
        return self.roles.get(role_id)


class FakeClient:
    def __init__(self) -> None:
        self.http = FakeHTTP()
        self.guilds = {}
        self.channels = {}
        self.users = {}

    def get_guild(self, guild_id):
        return self.guilds.get(guild_id)

    def get_channel(self, channel_id):
        return self.channels.get(channel_id)

    def get_user(self, user_id):
        return self.users.get(user_id)


@pytest.fixture
def client() -> FakeClient:
    return FakeClient()


@pytest.fixture
def http(client: FakeClient) -> FakeHTTP:
    return client.http


def echo(state: dict) -> Callable[[Any, Any], dict]:
    """A handler that applies each JSON payload to ``state`` and returns
    the full object, like Discord's PATCH endpoints."""
    def handler(route, payload):
        if payload:
            state.update(copy.deepcopy(payload))
        return copy.deepcopy(state)
    return handler
