from __future__ import annotations
from datetime import datetime, timedelta
from typing import Any, List, Mapping, Optional, Union
import discord
from discord.utils import parse_time
from .logger import logger
from .simples import (
    _Route, InvalidArgument, PollLayoutType, enum_value, normalize_emoji,
    snowflake, try_enum
)

class PollAnswerCount:
    """Vote tally for one answer.

    .. attribute:: id
        :type: int
    .. attribute:: count
        :type: int
    .. attribute:: me_voted
        :type: bool
    """

    def __init__(self, data: Mapping[str, Any]):
        self.id = int(data['id'])
        self.count = data.get('count', 0)
        self.me_voted = data.get('me_voted', False)

    def __repr__(self) -> str:
        return f'<PollAnswerCount id={self.id} count={self.count}>'

class PollAnswer:
    """A choice in a :class:`Poll`.

    .. attribute:: id
        :type: int
    .. attribute:: text
        :type: Optional[str]
    .. attribute:: emoji
        :type: Optional[discord.PartialEmoji]
    .. attribute:: poll
        :type: Poll
    """

    def __init__(self, data: Mapping[str, Any], poll: Poll):
        media = data.get('poll_media') or {}
        self.id = int(data['answer_id'])
        self.text = media.get('text')
        emoji = media.get('emoji')
        self.emoji = discord.PartialEmoji.from_dict(emoji) if emoji else None
        self.poll = poll

    def __repr__(self) -> str:
        return f'<PollAnswer id={self.id} text={self.text!r}>'

    @property
    def count(self) -> int:
        tally = self.poll.answer_count(self.id)
        return tally.count if tally is not None else 0

    async def fetch_voters(
        self, *, after: Optional[discord.abc.Snowflake] = None, limit: int = 25
    ) -> list:
        """Fetch up to ``limit`` (at most 100) users who voted for this
        answer, resolved from the client's cache where possible."""
        poll = self.poll
        params = {'limit': limit}
        if after is not None:
            params['after'] = after.id
        route = _Route(
            'GET', '/channels/{channel_id}/polls/{message_id}/answers/{answer_id}',
            channel_id=poll.channel_id, message_id=poll.message_id,
            answer_id=self.id)
        data = await poll.client.http.request(route, params=params)
        return [poll.client.get_user(int(u['id'])) or discord.Object(int(u['id']))
                for u in data.get('users', [])]

class Poll:
    """A poll attached to a message.

    .. attribute:: question
        :type: str
    .. attribute:: answers
        :type: list[PollAnswer]
    .. attribute:: expiry
        :type: Optional[datetime.datetime]
    .. attribute:: allow_multiselect
        :type: bool
    .. attribute:: layout_type
        :type: PollLayoutType
    .. attribute:: is_finalized
        :type: bool

        Whether the vote counts are final.
    .. attribute:: answer_counts
        :type: list[PollAnswerCount]

        Empty if Discord has not sent results yet.
    .. attribute:: channel_id
        :type: int
    .. attribute:: message_id
        :type: int
    """

    expiry: Optional[datetime]

    def __init__(
        self, data: Mapping[str, Any], *, channel_id: int, message_id: int,
        client: discord.Client
    ):
        self.client = client
        self.channel_id = int(channel_id)
        self.message_id = int(message_id)
        self._update(data)

    def _update(self, data: Mapping[str, Any]) -> None:
        answers = [PollAnswer(a, self) for a in data.get('answers', [])]
        results = data.get('results') or {}
        counts = [PollAnswerCount(c) for c in results.get('answer_counts', [])]
        self.question = (data.get('question') or {}).get('text', '')
        self.answers = answers
        self.expiry = parse_time(data.get('expiry'))
        self.allow_multiselect = data.get('allow_multiselect', False)
        self.layout_type = try_enum(PollLayoutType, data.get('layout_type', 1))
        self.is_finalized = results.get('is_finalized', False)
        self.answer_counts = counts

    def __repr__(self) -> str:
        return f'<Poll question={self.question!r} message_id={self.message_id}>'

    def answer(self, answer_id: Union[int, str]) -> Optional[PollAnswer]:
        return discord.utils.get(self.answers, id=snowflake(answer_id))

    def answer_count(self, answer_id: Union[int, str]) -> Optional[PollAnswerCount]:
        return discord.utils.get(self.answer_counts, id=snowflake(answer_id))

    @property
    def highest_count(self) -> Optional[PollAnswerCount]:
        """The tally with the most votes, or :const:`None` without results."""
        if not self.answer_counts:
            return None
        return max(self.answer_counts, key=lambda c: c.count)

    def is_expired(self) -> bool:
        if self.expiry is None:
            return False
        return discord.utils.utcnow() >= self.expiry

    async def end(self) -> Poll:
        """End the poll now. Only works on polls the bot created.

        The poll is refreshed from the message Discord returns.
        """
        route = _Route('POST', '/channels/{channel_id}/polls/{message_id}/expire',
                       channel_id=self.channel_id, message_id=self.message_id)
        data = await self.client.http.request(route)
        logger.debug('POST\tPoll\t%s\texpire', self.message_id)
        if data and data.get('poll'):
            self._update(data['poll'])
        return self

    expire = end

class PollBuilder:
    """Describes a new poll, sent as the ``poll`` field of a message.

    :param question: The question text.
    :param duration: Hours the poll stays open (or a
        :class:`datetime.timedelta`), up to 32 days.
    """

    def __init__(
        self, question: str, *, duration: Union[int, timedelta] = 24,
        allow_multiselect: bool = False,
        layout_type: Union[PollLayoutType, int, str] = PollLayoutType.DEFAULT
    ):
        if isinstance(duration, timedelta):
            duration = int(duration.total_seconds() // 3600)
        if duration < 1:
            raise InvalidArgument('Polls must last at least an hour')
        self.question = question
        self.duration = duration
        self.allow_multiselect = allow_multiselect
        self.layout_type = enum_value(PollLayoutType, layout_type)
        self.answers: List[dict] = []

    def add_answer(self, text: str, emoji: Any = None) -> PollBuilder:
        """Add a choice. ``emoji`` is normalized like a button's."""
        media = {'text': text}
        emoji = normalize_emoji(emoji)
        if emoji is not None:
            media['emoji'] = emoji
        self.answers.append({'poll_media': media})
        return self

    def to_dict(self) -> dict:
        return {
            'question': {'text': self.question},
            'answers': list(self.answers),
            'duration': self.duration,
            'allow_multiselect': self.allow_multiselect,
            'layout_type': self.layout_type,
        }
