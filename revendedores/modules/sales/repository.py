# revendedores/modules/sales/repository.py
from typing import Any, Iterable, List, Optional
from sqlalchemy.orm import Session, selectinload
from sqlalchemy import desc, func

from revendedores.shared.database.models import Order, OrderItem, Product, Client
from .lifecycle import SaleTotals

class SalesRepository:
    """
    Repositorio de pedidos y movimientos de stock.

    Los métodos de escritura NO hacen commit: el servicio decide el límite de
    la transacción para que una venta sea todo o nada.
    """

    def __init__(self, db: Session):
        self.db = db

    # ==================== STOCK ====================

    def decrease_product_stock(self, owner_id: int, product_id: int, quantity: int) -> bool:
        """
        Descuento relativo (stock = stock - quantity), sin leer el valor previo.
        Devuelve False si el producto ya no existe.
        """
        updated = self.db.query(Product).filter(
            Product.id == product_id,
            Product.owner_id == owner_id
        ).update(
            {Product.stock: func.coalesce(Product.stock, 0) - quantity},
            synchronize_session=False
        )
        return updated > 0

    def get_product(self, owner_id: int, product_id: int) -> Optional[Product]:
        return self.db.query(Product).filter(
            Product.id == product_id,
            Product.owner_id == owner_id
        ).first()

    # ==================== CLIENTES ====================

    def get_client(self, owner_id: int, client_id: int) -> Optional[Client]:
        return self.db.query(Client).filter(
            Client.id == client_id,
            Client.owner_id == owner_id
        ).first()

    # ==================== PEDIDOS ====================

    def create_order(
        self,
        owner_id: int,
        lines: Iterable[Any],
        totals: SaleTotals,
        status: str,
        method: str,
        client_id: Optional[int],
        client_name: str
    ) -> Order:
        order = Order(
            owner_id=owner_id,
            total=totals.total,
            total_cost=totals.total_cost,
            profit=totals.profit,
            status=status,
            method=method,
            client_id=client_id,
            client_name=client_name
        )
        for position, line in enumerate(lines):
            order.items.append(OrderItem(
                position=position,
                product_id=line.id,
                name=line.name,
                price=line.price,
                cost=line.cost,
                quantity=line.quantity,
                total=line.total
            ))
        self.db.add(order)
        self.db.flush()
        return order

    def get_order(self, owner_id: int, order_id: int) -> Optional[Order]:
        return self.db.query(Order).options(
            selectinload(Order.items)
        ).filter(
            Order.id == order_id,
            Order.owner_id == owner_id
        ).first()

    def get_orders_by_owner(self, owner_id: int, status: Optional[str] = None) -> List[Order]:
        """
        Pedidos del vendedor, el más reciente primero
        """
        query = self.db.query(Order).options(
            selectinload(Order.items)
        ).filter(Order.owner_id == owner_id)
        if status:
            query = query.filter(Order.status == status)
        return query.order_by(desc(Order.created_at), desc(Order.id)).all()
