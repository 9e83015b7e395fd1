from decimal import Decimal
from types import SimpleNamespace

import pytest

from revendedores.modules.sales.lifecycle import (
    can_transition, compute_sale_totals, ensure_transition, summarize_orders
)
from revendedores.modules.sales.schemas import OrderStatus


def line(price, cost, quantity=1):
    price = Decimal(str(price))
    return SimpleNamespace(price=price, cost=Decimal(str(cost)), quantity=quantity, total=price * quantity)


def order(status, total, profit):
    return SimpleNamespace(status=status, total=Decimal(str(total)), profit=Decimal(str(profit)))


def test_totals_for_single_line():
    totals = compute_sale_totals([line(200, 100)])

    assert totals.total == Decimal('200')
    assert totals.total_cost == Decimal('100')
    assert totals.profit == Decimal('100')


def test_totals_use_quantity_for_cost():
    totals = compute_sale_totals([line(50, 20, quantity=3), line('9.99', '4.50')])

    assert totals.total == Decimal('159.99')
    assert totals.total_cost == Decimal('64.50')
    assert totals.profit == totals.total - totals.total_cost


def test_totals_allow_negative_profit():
    totals = compute_sale_totals([line(80, 100)])
    assert totals.profit == Decimal('-20')


def test_missing_cost_counts_as_zero():
    item = SimpleNamespace(cost=None, quantity=1, total=Decimal('30'))
    assert compute_sale_totals([item]).profit == Decimal('30')


@pytest.mark.parametrize('target', [OrderStatus.PAGADO, OrderStatus.CANCELADO])
def test_pending_can_be_closed(target):
    assert can_transition(OrderStatus.PENDIENTE, target)
    assert ensure_transition('PENDIENTE', target) == target


@pytest.mark.parametrize('current', [OrderStatus.PAGADO, OrderStatus.CANCELADO])
def test_closed_orders_are_final(current):
    for target in OrderStatus:
        assert not can_transition(current, target)
    with pytest.raises(ValueError):
        ensure_transition(current, OrderStatus.PENDIENTE)


def test_pending_to_pending_is_rejected():
    assert not can_transition('PENDIENTE', 'PENDIENTE')


def test_summary_excludes_cancelled_orders():
    summary = summarize_orders([
        order('PENDIENTE', 200, 100),
        order('PAGADO', 150, 50),
        order('CANCELADO', 999, 500),
    ])

    assert summary['total_sales'] == Decimal('350')
    assert summary['total_profit'] == Decimal('150')
    assert summary['pending_amount'] == Decimal('200')
    assert summary['paid_amount'] == Decimal('150')
    assert summary['orders_count'] == 3
    assert summary['orders_by_status'] == {'PENDIENTE': 1, 'PAGADO': 1, 'CANCELADO': 1}


def test_summary_of_no_orders():
    summary = summarize_orders([])
    assert summary['total_sales'] == Decimal('0')
    assert summary['orders_count'] == 0


def test_totals_for_mixed_cart():
    totals = compute_sale_totals([line(100, 60), line(50, 20, quantity=2)])

    assert (totals.total, totals.total_cost, totals.profit) == (
        Decimal('200'), Decimal('100'), Decimal('100')
    )
