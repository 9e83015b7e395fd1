# revendedores/modules/sales/router.py
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Optional, List

from revendedores.config.database import get_db
from revendedores.core.auth.dependencies import get_current_user
from revendedores.modules.cart.store import CartStore, get_cart
from revendedores.shared.database.models import User
from .service import SalesService
from .schemas import (
    CheckoutRequest, OrderStatus, OrderStatusUpdate, OrderResponse,
    DashboardResponse, WhatsAppOrderResponse, DirectSaleResponse
)

router = APIRouter(prefix="/sales", tags=["Ventas"])

# ==================== CONFIRMAR VENTA ====================

@router.post("/checkout", response_model=OrderResponse, status_code=201)
async def checkout(
    checkout_data: CheckoutRequest,
    current_user: User = Depends(get_current_user),
    cart: CartStore = Depends(get_cart),
    db: Session = Depends(get_db)
):
    """
    Registrar la venta del carrito

    - Calcula total, costo total y ganancia bruta
    - Descuenta stock de cada producto
    - Crea el pedido PENDIENTE y vacía el carrito
    """
    service = SalesService(db)
    return await service.checkout(current_user, cart, checkout_data)

@router.post("/whatsapp-order", response_model=WhatsAppOrderResponse)
async def whatsapp_order(
    current_user: User = Depends(get_current_user),
    cart: CartStore = Depends(get_cart),
    db: Session = Depends(get_db)
):
    """
    Mensaje y enlace de WhatsApp con el pedido del carrito.
    Para registrarlo, confirmar después con /checkout (método WhatsApp).
    """
    service = SalesService(db)
    return await service.build_whatsapp_order(cart)

@router.post("/direct/{product_id}", response_model=DirectSaleResponse, status_code=201)
async def direct_sale(
    product_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Venta directa de un producto, reportada por WhatsApp
    """
    service = SalesService(db)
    return await service.direct_sale(current_user, product_id)

# ==================== PEDIDOS ====================

@router.get("/orders", response_model=List[OrderResponse])
async def list_orders(
    status: Optional[OrderStatus] = Query(None, description="Filtrar por estado"),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    service = SalesService(db)
    return await service.list_orders(current_user, status)

@router.get("/orders/{order_id}", response_model=OrderResponse)
async def get_order(
    order_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    service = SalesService(db)
    return await service.get_order(current_user, order_id)

@router.patch("/orders/{order_id}/status", response_model=OrderResponse)
async def update_order_status(
    order_id: int,
    status_update: OrderStatusUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Marcar un pedido PENDIENTE como PAGADO (descuenta stock) o CANCELADO
    """
    service = SalesService(db)
    return await service.update_order_status(current_user, order_id, status_update.status)

# ==================== DASHBOARD ====================

@router.get("/dashboard", response_model=DashboardResponse)
async def get_dashboard(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Ventas, ganancia y saldo pendiente de cobro
    """
    service = SalesService(db)
    return await service.get_dashboard(current_user)
