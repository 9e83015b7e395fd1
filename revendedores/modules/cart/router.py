# revendedores/modules/cart/router.py
import logging
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from revendedores.config.database import get_db
from revendedores.core.auth.dependencies import get_current_user
from revendedores.modules.catalog.service import CatalogService
from revendedores.shared.database.models import User
from .schemas import AddToCartRequest, CartResponse
from .store import CartStore, get_cart

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cart", tags=["Carrito"])

def _save_failed(cart: CartStore, error: OSError) -> HTTPException:
    logger.error(f"No se pudo guardar el carrito del usuario {cart.owner_id}: {error}")
    return HTTPException(status_code=500, detail="No se pudo guardar el carrito")

@router.get("", response_model=CartResponse)
async def get_cart_contents(cart: CartStore = Depends(get_cart)):
    """
    Líneas del carrito con tamaño y total
    """
    return CartResponse(**cart.to_dict())

@router.post("/items")
async def add_item(
    request: AddToCartRequest,
    current_user: User = Depends(get_current_user),
    cart: CartStore = Depends(get_cart),
    db: Session = Depends(get_db)
):
    """
    Agregar un producto del catálogo (copia precio y costo actuales)
    """
    service = CatalogService(db)
    return await service.add_to_cart(current_user, cart, request.product_id)

@router.delete("/items/{product_id}", response_model=CartResponse)
async def remove_item(product_id: int, cart: CartStore = Depends(get_cart)):
    """
    Quitar la primera línea de ese producto; si no está, no pasa nada
    """
    try:
        cart.remove_item(product_id)
    except OSError as e:
        raise _save_failed(cart, e)
    return CartResponse(**cart.to_dict())

@router.delete("", response_model=CartResponse)
async def clear_cart(cart: CartStore = Depends(get_cart)):
    try:
        cart.clear()
    except OSError as e:
        raise _save_failed(cart, e)
    return CartResponse(**cart.to_dict())
