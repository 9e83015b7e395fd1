# revendedores/modules/sales/service.py
import logging
from decimal import Decimal
from types import SimpleNamespace
from typing import List, Optional, Dict, Any, Set
from fastapi import HTTPException, status
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from revendedores.config.settings import settings
from revendedores.core.realtime import hub
from revendedores.modules.cart.store import CartStore
from revendedores.modules.catalog.service import CatalogService
from revendedores.shared.database.models import Order, User
from revendedores.shared.messaging import (
    build_cart_order_message, build_direct_sale_message, whatsapp_url
)
from .lifecycle import compute_sale_totals, ensure_transition, summarize_orders
from .repository import SalesRepository
from .schemas import (
    OrderStatus, PaymentMethod, CheckoutRequest, OrderResponse,
    DashboardResponse, WhatsAppOrderResponse, DirectSaleResponse
)

logger = logging.getLogger(__name__)

class SalesService:
    """
    Servicio de ventas: del carrito al pedido, estados y dashboard
    """

    def __init__(self, db: Session):
        self.db = db
        self.repository = SalesRepository(db)

    # ==================== UTILIDADES ====================

    def _publish_changes(self, owner_id: int, order: Order, event: str, product_ids: Set[int]) -> None:
        hub.publish(owner_id, "orders", event, OrderResponse.model_validate(order).model_dump(mode="json"))
        for product_id in product_ids:
            product = self.repository.get_product(owner_id, product_id)
            if product:
                hub.publish(
                    owner_id, "products", "updated",
                    CatalogService.product_response(product).model_dump(mode="json")
                )

    def _decrease_stock_for_lines(self, owner_id: int, lines: List[Any]) -> Set[int]:
        """
        Descontar stock por cada línea con producto; devuelve los productos tocados
        """
        touched = set()
        for line in lines:
            if line.id is None:
                continue
            if self.repository.decrease_product_stock(owner_id, line.id, line.quantity):
                touched.add(line.id)
            else:
                logger.warning(f"Producto {line.id} ya no existe, no se descuenta stock")
        return touched

    def _get_order_or_404(self, owner: User, order_id: int) -> Order:
        order = self.repository.get_order(owner.id, order_id)
        if not order:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Pedido no encontrado"
            )
        return order

    # ==================== CONFIRMAR VENTA ====================

    async def checkout(
        self,
        owner: User,
        cart: CartStore,
        checkout_data: CheckoutRequest
    ) -> OrderResponse:
        """
        Convertir el carrito en un pedido PENDIENTE y descontar stock.

        Descuentos y pedido van en una sola transacción. Si algo falla se
        deshace todo y el carrito queda intacto para reintentar.
        """
        lines = cart.items
        if not lines:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="El carrito está vacío"
            )

        client_name = settings.default_client_name
        if checkout_data.client_id is not None:
            client = self.repository.get_client(owner.id, checkout_data.client_id)
            if not client:
                raise HTTPException(status_code=404, detail="Cliente no encontrado")
            client_name = client.name

        # 1. Totales a partir de las copias del carrito
        totals = compute_sale_totals(lines)

        try:
            # 2. Descontar stock
            touched = self._decrease_stock_for_lines(owner.id, lines)

            # 3. Crear el pedido
            order = self.repository.create_order(
                owner_id=owner.id,
                lines=lines,
                totals=totals,
                status=OrderStatus.PENDIENTE.value,
                method=checkout_data.method.value,
                client_id=checkout_data.client_id,
                client_name=client_name
            )
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error registrando venta de usuario {owner.id}: {e}")
            raise HTTPException(status_code=500, detail="No se pudo registrar la venta")

        # 4. Limpiar carrito; la venta ya quedó registrada
        try:
            cart.clear()
        except OSError as e:
            logger.error(f"Venta {order.id} registrada pero el carrito local no se pudo guardar: {e}")
        self.db.refresh(order)

        logger.info(
            f"Venta {order.id} registrada: total {totals.total}, ganancia {totals.profit}"
        )
        self._publish_changes(owner.id, order, "created", touched)
        return OrderResponse.model_validate(order)

    async def build_whatsapp_order(self, cart: CartStore) -> WhatsAppOrderResponse:
        """
        Mensaje de pedido para WhatsApp; no toca el carrito ni la base de datos
        """
        if cart.is_empty():
            raise HTTPException(status_code=400, detail="El carrito está vacío")

        message = build_cart_order_message(cart.items, cart.total)
        return WhatsAppOrderResponse(
            message=message,
            whatsapp_url=whatsapp_url(settings.whatsapp_number, message),
            items_count=cart.size,
            total=float(cart.total)
        )

    async def direct_sale(self, owner: User, product_id: int) -> DirectSaleResponse:
        """
        Venta directa de una unidad desde el detalle del producto.
        Queda PENDIENTE y no descuenta stock; se reporta por WhatsApp.
        """
        product = self.repository.get_product(owner.id, product_id)
        if not product:
            raise HTTPException(status_code=404, detail="Este producto ya no existe")

        price = Decimal(str(product.price))
        line = SimpleNamespace(
            id=product.id,
            name=product.name,
            price=price,
            cost=Decimal(str(product.cost)) if product.cost is not None else Decimal("0"),
            quantity=1,
            total=price
        )

        try:
            order = self.repository.create_order(
                owner_id=owner.id,
                lines=[line],
                totals=compute_sale_totals([line]),
                status=OrderStatus.PENDIENTE.value,
                method=PaymentMethod.VENTA_DIRECTA.value,
                client_id=None,
                client_name=settings.default_client_name
            )
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error registrando venta directa del producto {product_id}: {e}")
            raise HTTPException(status_code=500, detail="No se pudo registrar la venta")

        self.db.refresh(order)
        self._publish_changes(owner.id, order, "created", set())

        message = build_direct_sale_message(product.name, order.id)
        return DirectSaleResponse(
            success=True,
            order=OrderResponse.model_validate(order),
            message=message,
            whatsapp_url=whatsapp_url(settings.whatsapp_number, message)
        )

    # ==================== ESTADOS DEL PEDIDO ====================

    async def update_order_status(
        self,
        owner: User,
        order_id: int,
        target: OrderStatus
    ) -> OrderResponse:
        """
        PENDIENTE -> PAGADO descuenta stock por línea; PENDIENTE -> CANCELADO
        solo cambia el estado. PAGADO y CANCELADO son finales.
        """
        order = self._get_order_or_404(owner, order_id)

        try:
            new_status = ensure_transition(order.status, target)
        except ValueError as e:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))

        touched: Set[int] = set()
        try:
            if new_status == OrderStatus.PAGADO and settings.decrement_stock_on_payment:
                lines = [
                    SimpleNamespace(id=item.product_id, quantity=item.quantity)
                    for item in order.items
                ]
                touched = self._decrease_stock_for_lines(owner.id, lines)
            order.status = new_status.value
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error actualizando pedido {order_id} a {new_status.value}: {e}")
            raise HTTPException(status_code=500, detail="No se pudo actualizar en la nube")

        self.db.refresh(order)
        logger.info(f"Pedido {order_id} marcado como {new_status.value}")
        self._publish_changes(owner.id, order, "updated", touched)
        return OrderResponse.model_validate(order)

    # ==================== HISTORIAL Y DASHBOARD ====================

    async def list_orders(self, owner: User, status_filter: Optional[OrderStatus] = None) -> List[OrderResponse]:
        orders = self.repository.get_orders_by_owner(
            owner.id, status_filter.value if status_filter else None
        )
        return [OrderResponse.model_validate(o) for o in orders]

    async def get_order(self, owner: User, order_id: int) -> OrderResponse:
        return OrderResponse.model_validate(self._get_order_or_404(owner, order_id))

    async def get_dashboard(self, owner: User) -> DashboardResponse:
        orders = self.repository.get_orders_by_owner(owner.id)
        return DashboardResponse(**summarize_orders(orders))
