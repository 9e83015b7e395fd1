# revendedores/modules/sales/lifecycle.py
"""
Reglas puras del ciclo de vida de una venta: totales al confirmar el carrito,
transiciones de estado del pedido y agregados del dashboard.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, Iterable, Union

from .schemas import OrderStatus

ZERO = Decimal("0")

ALLOWED_TRANSITIONS = {
    OrderStatus.PENDIENTE: {OrderStatus.PAGADO, OrderStatus.CANCELADO},
    OrderStatus.PAGADO: set(),
    OrderStatus.CANCELADO: set(),
}


@dataclass(frozen=True)
class SaleTotals:
    total: Decimal
    total_cost: Decimal
    profit: Decimal


def _decimal(value: Any) -> Decimal:
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def compute_sale_totals(lines: Iterable[Any]) -> SaleTotals:
    """
    total = suma de line.total; costo = suma de cost x quantity.
    La ganancia queda fija desde aquí, no se recalcula con el costo vivo.
    """
    total = ZERO
    total_cost = ZERO
    for line in lines:
        total += _decimal(line.total)
        total_cost += _decimal(line.cost) * line.quantity
    return SaleTotals(total=total, total_cost=total_cost, profit=total - total_cost)


def can_transition(current: Union[OrderStatus, str], target: Union[OrderStatus, str]) -> bool:
    return OrderStatus(target) in ALLOWED_TRANSITIONS[OrderStatus(current)]


def ensure_transition(current: Union[OrderStatus, str], target: Union[OrderStatus, str]) -> OrderStatus:
    if not can_transition(current, target):
        raise ValueError(
            f"No se puede pasar un pedido de {OrderStatus(current).value} a {OrderStatus(target).value}"
        )
    return OrderStatus(target)


def summarize_orders(orders: Iterable[Any]) -> Dict[str, Any]:
    """Agregados del dashboard; las canceladas no suman ventas ni ganancia"""
    summary = {
        "total_sales": ZERO,
        "total_profit": ZERO,
        "pending_amount": ZERO,
        "paid_amount": ZERO,
        "orders_count": 0,
        "orders_by_status": {s.value: 0 for s in OrderStatus},
    }
    for order in orders:
        order_status = OrderStatus(order.status)
        total = _decimal(order.total)
        summary["orders_count"] += 1
        summary["orders_by_status"][order_status.value] += 1
        if order_status == OrderStatus.CANCELADO:
            continue
        summary["total_sales"] += total
        summary["total_profit"] += _decimal(order.profit)
        if order_status == OrderStatus.PENDIENTE:
            summary["pending_amount"] += total
        else:
            summary["paid_amount"] += total
    return summary
