# revendedores/modules/cart/store.py
import json
import logging
import os
import threading
from decimal import Decimal
from typing import Any, Dict, List, Optional

from fastapi import Depends
from pydantic import ValidationError

from revendedores.config.settings import settings
from revendedores.core.auth.dependencies import get_current_user
from revendedores.shared.database.models import User
from .schemas import CartLineItem

logger = logging.getLogger(__name__)


class CartStorage:
    """
    Guarda el carrito de un vendedor en un archivo JSON local para que
    sobreviva a reinicios. No se sincroniza entre dispositivos.
    """

    def __init__(self, directory: str):
        self.directory = directory

    def _path(self, owner_id: int) -> str:
        return os.path.join(self.directory, f"cart_{owner_id}.json")

    def load(self, owner_id: int) -> List[CartLineItem]:
        path = self._path(owner_id)
        if not os.path.exists(path):
            return []
        try:
            with open(path, "r", encoding="utf-8") as f:
                raw = json.load(f)
            return [CartLineItem.model_validate(item) for item in raw]
        except (OSError, ValueError, ValidationError) as e:
            logger.error(f"Carrito local ilegible para usuario {owner_id}, se inicia vacío: {e}")
            return []

    def save(self, owner_id: int, items: List[CartLineItem]) -> None:
        os.makedirs(self.directory, exist_ok=True)
        path = self._path(owner_id)
        tmp_path = f"{path}.tmp"
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump([item.model_dump(mode="json") for item in items], f, ensure_ascii=False)
        os.replace(tmp_path, path)


class CartStore:
    """
    Carrito de la sesión activa: lista ordenada de líneas.

    Agregar el mismo producto dos veces agrega dos líneas. Las únicas
    mutaciones son add_item, remove_item y clear.
    """

    def __init__(self, owner_id: int, storage: Optional[CartStorage] = None):
        self.owner_id = owner_id
        self.storage = storage
        self._items: List[CartLineItem] = storage.load(owner_id) if storage else []

    @property
    def items(self) -> List[CartLineItem]:
        return list(self._items)

    @property
    def size(self) -> int:
        return len(self._items)

    @property
    def total(self) -> Decimal:
        return sum((item.total for item in self._items), Decimal("0"))

    def is_empty(self) -> bool:
        return not self._items

    def add_item(self, product: Any) -> CartLineItem:
        """
        Agregar un producto (cualquier objeto con id, name, price y cost).
        No se valida contra el stock.
        """
        price = Decimal(str(product.price))
        cost = Decimal(str(product.cost)) if product.cost is not None else Decimal("0")
        line = CartLineItem(
            id=product.id,
            name=product.name,
            price=price,
            cost=cost,
            quantity=1,
            total=price
        )
        self._commit(self._items + [line])
        return line

    def remove_item(self, product_id: int) -> bool:
        for index, item in enumerate(self._items):
            if item.id == product_id:
                self._commit(self._items[:index] + self._items[index + 1:])
                return True
        return False

    def clear(self) -> None:
        """
        Vaciar el carrito. La memoria se vacía aunque falle el archivo, así
        una venta ya registrada nunca queda en el carrito para repetirse.
        """
        self._items = []
        self._persist(self._items)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "items": self.items,
            "size": self.size,
            "total": self.total,
        }

    def _commit(self, items: List[CartLineItem]) -> None:
        # Primero el archivo; si falla, el carrito en memoria no cambia
        self._persist(items)
        self._items = items

    def _persist(self, items: List[CartLineItem]) -> None:
        if self.storage:
            self.storage.save(self.owner_id, items)


class CartRegistry:
    """Un CartStore por vendedor, compartido entre todos los endpoints"""

    def __init__(self, storage: Optional[CartStorage] = None):
        self.storage = storage
        self._carts: Dict[int, CartStore] = {}
        # get_cart corre en el threadpool: revisar y crear debe ser atómico
        self._lock = threading.Lock()

    def get(self, owner_id: int) -> CartStore:
        with self._lock:
            if owner_id not in self._carts:
                self._carts[owner_id] = CartStore(owner_id, self.storage)
            return self._carts[owner_id]


cart_registry = CartRegistry(CartStorage(settings.cart_storage_dir))


def get_cart_registry() -> CartRegistry:
    return cart_registry


def get_cart(
    current_user: User = Depends(get_current_user),
    registry: CartRegistry = Depends(get_cart_registry)
) -> CartStore:
    return registry.get(current_user.id)
