# revendedores/api/v1/live.py
"""
Consultas en vivo: foto inicial de la colección y luego cada cambio.
"""
import asyncio
import logging
from typing import Any, Callable, Dict, List

from fastapi import APIRouter, Depends, Query, WebSocket, WebSocketDisconnect, status
from sqlalchemy.orm import Session

from revendedores.config.database import get_db
from revendedores.core.auth.dependencies import get_user_from_token
from revendedores.core.realtime import LIVE_COLLECTIONS, Subscription, hub
from revendedores.modules.catalog.repository import CatalogRepository
from revendedores.modules.catalog.schemas import CategoryResponse
from revendedores.modules.catalog.service import CatalogService
from revendedores.modules.clients.repository import ClientsRepository
from revendedores.modules.clients.service import ClientsService
from revendedores.modules.sales.repository import SalesRepository
from revendedores.modules.sales.schemas import OrderResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/live", tags=["En vivo"])


def _products(db: Session, owner_id: int) -> List[Dict[str, Any]]:
    return [
        CatalogService.product_response(p).model_dump(mode="json")
        for p in CatalogRepository(db).get_products_by_owner(owner_id)
    ]


def _categories(db: Session, owner_id: int) -> List[Dict[str, Any]]:
    return [
        CategoryResponse.model_validate(c).model_dump(mode="json")
        for c in CatalogRepository(db).get_categories_by_owner(owner_id)
    ]


def _clients(db: Session, owner_id: int) -> List[Dict[str, Any]]:
    return [
        ClientsService.client_response(c).model_dump(mode="json")
        for c in ClientsRepository(db).get_clients_by_owner(owner_id)
    ]


def _orders(db: Session, owner_id: int) -> List[Dict[str, Any]]:
    return [
        OrderResponse.model_validate(o).model_dump(mode="json")
        for o in SalesRepository(db).get_orders_by_owner(owner_id)
    ]


SNAPSHOT_LOADERS: Dict[str, Callable[[Session, int], List[Dict[str, Any]]]] = {
    "products": _products,
    "categories": _categories,
    "clients": _clients,
    "orders": _orders,
}


async def _forward_changes(websocket: WebSocket, subscription: Subscription) -> None:
    while True:
        message = await subscription.queue.get()
        await websocket.send_json(message)


async def _wait_for_disconnect(websocket: WebSocket) -> None:
    while True:
        await websocket.receive_text()


@router.websocket("/{collection}")
async def live_collection(
    websocket: WebSocket,
    collection: str,
    token: str = Query(..., description="Token de sesión"),
    db: Session = Depends(get_db)
):
    if collection not in LIVE_COLLECTIONS:
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return

    user = get_user_from_token(db, token)
    if not user:
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return
    owner_id = user.id

    await websocket.accept()
    subscription = hub.subscribe(owner_id, collection)
    try:
        items = SNAPSHOT_LOADERS[collection](db, owner_id)
        # La sesión no se necesita más; los cambios llegan por el hub
        db.close()
        await websocket.send_json({
            "type": "snapshot",
            "collection": collection,
            "items": items,
        })

        tasks = [
            asyncio.create_task(_forward_changes(websocket, subscription)),
            asyncio.create_task(_wait_for_disconnect(websocket)),
        ]
        done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_COMPLETED)
        for task in pending:
            task.cancel()
        for task in done:
            error = task.exception()
            if error and not isinstance(error, WebSocketDisconnect):
                raise error
    except WebSocketDisconnect:
        pass
    finally:
        hub.unsubscribe(subscription)
        logger.info(f"Websocket de {collection} cerrado para usuario {owner_id}")
