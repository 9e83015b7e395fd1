import asyncio

import pytest

from revendedores.core.realtime import SubscriptionHub


def test_publish_reaches_only_same_owner_and_collection():
    async def scenario():
        hub = SubscriptionHub()
        mine = hub.subscribe(1, 'products')
        other_owner = hub.subscribe(2, 'products')
        other_collection = hub.subscribe(1, 'orders')

        hub.publish(1, 'products', 'created', {'id': 10})
        message = await asyncio.wait_for(mine.queue.get(), 1)
        await asyncio.sleep(0)
        return message, other_owner.queue.empty(), other_collection.queue.empty()

    message, other_owner_empty, other_collection_empty = asyncio.run(scenario())
    assert message == {
        'type': 'change',
        'collection': 'products',
        'event': 'created',
        'document': {'id': 10},
    }
    assert other_owner_empty
    assert other_collection_empty


def test_unsubscribe_stops_delivery():
    async def scenario():
        hub = SubscriptionHub()
        subscription = hub.subscribe(1, 'clients')
        assert hub.subscriber_count(1, 'clients') == 1
        hub.unsubscribe(subscription)
        hub.publish(1, 'clients', 'deleted', {'id': 1})
        await asyncio.sleep(0)
        return hub.subscriber_count(1, 'clients'), subscription.queue.empty()

    assert asyncio.run(scenario()) == (0, True)


def test_unknown_collection_is_rejected():
    async def scenario():
        SubscriptionHub().subscribe(1, 'users')

    with pytest.raises(ValueError):
        asyncio.run(scenario())


def test_publish_without_subscribers_is_noop():
    SubscriptionHub().publish(1, 'products', 'created', {'id': 1})
