import datetime
import discord
import pytest

from conftest import http_error
from discord_layout.simples import EntitlementType, InvalidArgument, SubscriptionStatus
from discord_layout.monetization import (
    Entitlement, Subscription, create_test_entitlement, fetch_entitlements,
    fetch_subscriptions
)

ENTITLEMENT = {
    'id': '700',
    'sku_id': '800',
    'application_id': '500',
    'user_id': '30',
    'type': 4,
    'deleted': False,
    'consumed': False,
    'starts_at': '2024-01-01T00:00:00+00:00',
    'ends_at': None,
}

SUBSCRIPTION = {
    'id': '900',
    'user_id': '30',
    'sku_ids': ['800'],
    'entitlement_ids': ['700'],
    'renewal_sku_ids': None,
    'current_period_start': '2024-01-01T00:00:00+00:00',
    'current_period_end': '2024-02-01T00:00:00+00:00',
    'status': 1,
    'canceled_at': '2024-01-15T12:00:00+00:00',
}


class TestEntitlement:
    def test_parse(self, client) -> None:
        ent = Entitlement(data=ENTITLEMENT, client=client)
        assert ent.type is EntitlementType.TEST_MODE_PURCHASE
        assert ent.is_test_purchase and not ent.is_purchase
        assert ent.for_user and not ent.for_guild and ent.guild is None
        assert ent.starts_at == datetime.datetime(2024, 1, 1, tzinfo=datetime.timezone.utc)
        assert not ent.is_expired()

    @pytest.mark.asyncio
    async def test_consume(self, client, http) -> None:
        ent = Entitlement(data=dict(ENTITLEMENT, type=1), client=client)
        await ent.consume()
        route, _ = http.last
        assert route.method == 'POST'
        assert route.url.endswith('/applications/500/entitlements/700/consume')
        assert ent.consumed

    @pytest.mark.asyncio
    async def test_consume_failure(self, client, http) -> None:
        ent = Entitlement(data=ENTITLEMENT, client=client)
        http.error = http_error()
        with pytest.raises(discord.HTTPException):
            await ent.consume()
        assert not ent.consumed

    @pytest.mark.asyncio
    async def test_delete_test_purchase(self, client, http) -> None:
        ent = Entitlement(data=ENTITLEMENT, client=client)
        await ent.delete()
        assert http.last[0].method == 'DELETE'
        assert ent.deleted

    @pytest.mark.asyncio
    async def test_delete_real_purchase_refused(self, client, http) -> None:
        ent = Entitlement(data=dict(ENTITLEMENT, type=1), client=client)
        with pytest.raises(InvalidArgument):
            await ent.delete()
        assert http.calls == [] and not ent.deleted

    @pytest.mark.asyncio
    async def test_fetch(self, client, http) -> None:
        http.queue([ENTITLEMENT, dict(ENTITLEMENT, id='701')])
        ents = await fetch_entitlements(
            client, 500, user=discord.Object(30), sku_ids=[800, 801],
            exclude_ended=True)
        _, kwargs = http.last
        assert kwargs['params'] == {'limit': 100, 'user_id': 30,
                                    'sku_ids': '800,801', 'exclude_ended': 'true'}
        assert [e.id for e in ents] == [700, 701]

    @pytest.mark.asyncio
    async def test_create_test(self, client, http) -> None:
        http.queue(ENTITLEMENT)
        await create_test_entitlement(client, 500, 800, discord.Object(30), 'user')
        assert http.last[1]['json'] == {'sku_id': '800', 'owner_id': '30', 'owner_type': 2}


class TestSubscription:
    def test_parse(self, client) -> None:
        sub = Subscription(data=SUBSCRIPTION, client=client)
        assert sub.status is SubscriptionStatus.ENDING
        assert sub.is_ending and not sub.is_active and not sub.is_inactive
        assert sub.sku_ids == [800] and sub.renewal_sku_ids == []
        assert sub.canceled_at.day == 15
        assert sub.user.id == 30

    @pytest.mark.asyncio
    async def test_fetch(self, client, http) -> None:
        http.queue([SUBSCRIPTION])
        subs = await fetch_subscriptions(client, 800, user=discord.Object(30))
        route, kwargs = http.last
        assert route.url.endswith('/skus/800/subscriptions')
        assert kwargs['params'] == {'limit': 50, 'user_id': 30}
        assert subs[0].id == 900
