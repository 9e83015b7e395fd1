"""
Suscripciones en vivo por colección.

Cada vendedor ve solo sus propios documentos: las suscripciones se indexan por
(owner_id, colección). Los servicios publican después de hacer commit y el
websocket reenvía cada mensaje a su cliente.
"""
import asyncio
import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

logger = logging.getLogger(__name__)

LIVE_COLLECTIONS = ("products", "orders", "clients", "categories")


@dataclass(eq=False)
class Subscription:
    owner_id: int
    collection: str
    loop: asyncio.AbstractEventLoop
    queue: asyncio.Queue = field(default_factory=asyncio.Queue)


class SubscriptionHub:
    def __init__(self):
        self._subscriptions: Dict[Tuple[int, str], List[Subscription]] = defaultdict(list)

    def subscribe(self, owner_id: int, collection: str) -> Subscription:
        """Debe llamarse dentro del event loop que va a consumir la cola"""
        if collection not in LIVE_COLLECTIONS:
            raise ValueError(f"Colección no soportada: {collection}")
        subscription = Subscription(
            owner_id=owner_id,
            collection=collection,
            loop=asyncio.get_running_loop()
        )
        self._subscriptions[(owner_id, collection)].append(subscription)
        logger.info(
            "Suscripción a %s del usuario %s (%s activas)",
            collection, owner_id, len(self._subscriptions[(owner_id, collection)])
        )
        return subscription

    def unsubscribe(self, subscription: Subscription) -> None:
        key = (subscription.owner_id, subscription.collection)
        if subscription in self._subscriptions.get(key, []):
            self._subscriptions[key].remove(subscription)
        if not self._subscriptions.get(key):
            self._subscriptions.pop(key, None)
        logger.info("Suscripción a %s del usuario %s cerrada", subscription.collection, subscription.owner_id)

    def subscriber_count(self, owner_id: int, collection: str) -> int:
        return len(self._subscriptions.get((owner_id, collection), []))

    def publish(self, owner_id: int, collection: str, event: str, document: Dict[str, Any]) -> None:
        subscriptions = list(self._subscriptions.get((owner_id, collection), []))
        if not subscriptions:
            return
        message = {
            "type": "change",
            "collection": collection,
            "event": event,
            "document": document,
        }
        for subscription in subscriptions:
            try:
                subscription.loop.call_soon_threadsafe(subscription.queue.put_nowait, message)
            except RuntimeError:
                # Loop cerrado: el websocket ya no existe
                logger.warning("Descartando suscripción huérfana a %s", collection)
                self.unsubscribe(subscription)


hub = SubscriptionHub()
