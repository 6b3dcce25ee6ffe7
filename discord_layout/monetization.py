from __future__ import annotations
from datetime import datetime
from typing import Any, Iterable, List, Mapping, Optional, Union
import discord
from discord.utils import parse_time
from .logger import logger
from .simples import (
    _Route, EntitlementOwnerType, EntitlementType, InvalidArgument,
    SubscriptionStatus, enum_value, snowflake, try_enum
)
from .resource import Resource

def _entitlement_type(member: EntitlementType) -> property:
    return property(lambda self: self.type == member,
                    doc=f'Whether this is a {member.name.lower()} entitlement.')

class Entitlement(Resource):
    """Access to a premium offering, granted to a user or a guild.

    .. attribute:: sku_id
        :type: int
    .. attribute:: application_id
        :type: int
    .. attribute:: type
        :type: EntitlementType
    .. attribute:: user_id
        :type: Optional[int]
    .. attribute:: guild_id
        :type: Optional[int]
    .. attribute:: deleted
        :type: bool
    .. attribute:: consumed
        :type: bool

        Only meaningful for one-time purchases.
    .. attribute:: starts_at
        :type: Optional[datetime.datetime]
    .. attribute:: ends_at
        :type: Optional[datetime.datetime]
    """

    def _update(self, data: Mapping[str, Any]) -> None:
        sku_id = int(data['sku_id'])
        application_id = int(data['application_id'])
        starts_at = parse_time(data.get('starts_at'))
        ends_at = parse_time(data.get('ends_at'))
        self.sku_id = sku_id
        self.application_id = application_id
        self.type = try_enum(EntitlementType, data.get('type'))
        self.user_id = snowflake(data.get('user_id'))
        self.guild_id = snowflake(data.get('guild_id'))
        self.deleted = data.get('deleted', False)
        self.consumed = data.get('consumed', False)
        self.starts_at = starts_at
        self.ends_at = ends_at

    def __repr__(self) -> str:
        return (f'<Entitlement id={self.id} type={self.type!r} '
                f'sku_id={self.sku_id} consumed={self.consumed}>')

    is_purchase = _entitlement_type(EntitlementType.PURCHASE)
    is_premium_subscription = _entitlement_type(EntitlementType.PREMIUM_SUBSCRIPTION)
    is_developer_gift = _entitlement_type(EntitlementType.DEVELOPER_GIFT)
    is_test_purchase = _entitlement_type(EntitlementType.TEST_MODE_PURCHASE)
    is_free_purchase = _entitlement_type(EntitlementType.FREE_PURCHASE)
    is_user_gift = _entitlement_type(EntitlementType.USER_GIFT)
    is_premium_purchase = _entitlement_type(EntitlementType.PREMIUM_PURCHASE)
    is_application_subscription = _entitlement_type(
        EntitlementType.APPLICATION_SUBSCRIPTION)

    @property
    def for_user(self) -> bool:
        return self.user_id is not None

    @property
    def for_guild(self) -> bool:
        return self.guild_id is not None

    @property
    def user(self):
        return self._get_user(self.user_id)

    @property
    def guild(self):
        return self._get_guild(self.guild_id)

    def is_expired(self) -> bool:
        if self.ends_at is None:
            return False
        return discord.utils.utcnow() >= self.ends_at

    def _route(self, method: str, path: str = '') -> _Route:
        return _Route(
            method,
            '/applications/{application_id}/entitlements/{entitlement_id}' + path,
            application_id=self.application_id, entitlement_id=self.id)

    async def consume(self) -> None:
        """Mark this one-time purchase as used.

        :attr:`consumed` only becomes true once Discord accepts the request.
        """
        await self.http.request(self._route('POST', '/consume'))
        logger.debug('POST\tEntitlement\t%s\tconsume', self.id)
        self.consumed = True

    async def delete(self) -> None:
        """Delete this test entitlement.

        :raises InvalidArgument: if this is not a test purchase.
            No request is made.
        """
        if not self.is_test_purchase:
            raise InvalidArgument('Only test entitlements can be deleted')
        await self.http.request(self._route('DELETE'))
        self.deleted = True

async def fetch_entitlements(
    client: discord.Client, application_id: int, *,
    user: Optional[discord.abc.Snowflake] = None,
    guild: Optional[discord.abc.Snowflake] = None,
    sku_ids: Iterable[int] = (), exclude_ended: bool = False,
    limit: int = 100
) -> List[Entitlement]:
    params = {'limit': limit}
    if user is not None:
        params['user_id'] = user.id
    if guild is not None:
        params['guild_id'] = guild.id
    if sku_ids:
        params['sku_ids'] = ','.join(str(s) for s in sku_ids)
    if exclude_ended:
        params['exclude_ended'] = 'true'
    route = _Route('GET', '/applications/{application_id}/entitlements',
                   application_id=application_id)
    data = await client.http.request(route, params=params)
    return [Entitlement(data=d, client=client) for d in data]

async def create_test_entitlement(
    client: discord.Client, application_id: int, sku_id: int,
    owner: Union[discord.abc.Snowflake, int],
    owner_type: Union[EntitlementOwnerType, int, str]
) -> Entitlement:
    """Grant a test entitlement, which can later be removed with
    :meth:`Entitlement.delete`."""
    payload = {
        'sku_id': str(sku_id),
        'owner_id': str(getattr(owner, 'id', owner)),
        'owner_type': enum_value(EntitlementOwnerType, owner_type),
    }
    route = _Route('POST', '/applications/{application_id}/entitlements',
                   application_id=application_id)
    data = await client.http.request(route, json=payload)
    return Entitlement(data=data, client=client)

class Subscription(Resource):
    """A user's recurring payment for one or more SKUs.

    .. attribute:: user_id
        :type: int
    .. attribute:: status
        :type: SubscriptionStatus
    .. attribute:: sku_ids
        :type: list[int]
    .. attribute:: entitlement_ids
        :type: list[int]
    .. attribute:: renewal_sku_ids
        :type: list[int]
    .. attribute:: current_period_start
        :type: datetime.datetime
    .. attribute:: current_period_end
        :type: datetime.datetime
    .. attribute:: canceled_at
        :type: Optional[datetime.datetime]
    .. attribute:: country
        :type: Optional[str]

        Only present when fetched with an OAuth2 token.
    """

    current_period_start: Optional[datetime]
    current_period_end: Optional[datetime]
    canceled_at: Optional[datetime]

    def _update(self, data: Mapping[str, Any]) -> None:
        sku_ids = [int(s) for s in data.get('sku_ids', [])]
        entitlement_ids = [int(e) for e in data.get('entitlement_ids', [])]
        renewal_sku_ids = [int(s) for s in data.get('renewal_sku_ids') or []]
        self.user_id = int(data['user_id'])
        self.status = try_enum(SubscriptionStatus, data.get('status'))
        self.sku_ids = sku_ids
        self.entitlement_ids = entitlement_ids
        self.renewal_sku_ids = renewal_sku_ids
        self.current_period_start = parse_time(data.get('current_period_start'))
        self.current_period_end = parse_time(data.get('current_period_end'))
        self.canceled_at = parse_time(data.get('canceled_at'))
        self.country = data.get('country')

    def __repr__(self) -> str:
        return f'<Subscription id={self.id} user_id={self.user_id} status={self.status!r}>'

    @property
    def is_active(self) -> bool:
        return self.status == SubscriptionStatus.ACTIVE

    @property
    def is_ending(self) -> bool:
        """Active, but will not renew."""
        return self.status == SubscriptionStatus.ENDING

    @property
    def is_inactive(self) -> bool:
        return self.status == SubscriptionStatus.INACTIVE

    @property
    def user(self):
        return self._get_user(self.user_id)

async def fetch_subscriptions(
    client: discord.Client, sku_id: int, *,
    user: Optional[discord.abc.Snowflake] = None,
    before: Optional[discord.abc.Snowflake] = None,
    after: Optional[discord.abc.Snowflake] = None,
    limit: int = 50
) -> List[Subscription]:
    params = {'limit': limit}
    if user is not None:
        params['user_id'] = user.id
    if before is not None:
        params['before'] = before.id
    if after is not None:
        params['after'] = after.id
    route = _Route('GET', '/skus/{sku_id}/subscriptions', sku_id=sku_id)
    data = await client.http.request(route, params=params)
    return [Subscription(data=d, client=client) for d in data]

async def fetch_subscription(
    client: discord.Client, sku_id: int, subscription_id: int
) -> Subscription:
    route = _Route('GET', '/skus/{sku_id}/subscriptions/{subscription_id}',
                   sku_id=sku_id, subscription_id=subscription_id)
    data = await client.http.request(route)
    return Subscription(data=data, client=client)
