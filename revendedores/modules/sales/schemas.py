# revendedores/modules/sales/schemas.py
from pydantic import BaseModel, Field
from typing import List, Optional, Dict
from datetime import datetime
from decimal import Decimal
from enum import Enum

from revendedores.shared.schemas import RevendedoresBaseModel

# ==================== ENUMS ====================

class OrderStatus(str, Enum):
    PENDIENTE = "PENDIENTE"
    PAGADO = "PAGADO"
    CANCELADO = "CANCELADO"

class PaymentMethod(str, Enum):
    EFECTIVO = "EFECTIVO"
    TRANSFERENCIA = "TRANSFERENCIA"
    WHATSAPP = "WhatsApp"
    VENTA_DIRECTA = "Venta Directa"

# ==================== REQUEST SCHEMAS ====================

class CheckoutRequest(BaseModel):
    method: PaymentMethod = Field(PaymentMethod.EFECTIVO, description="Método de pago")
    client_id: Optional[int] = Field(None, description="Cliente del directorio (opcional)")

class OrderStatusUpdate(BaseModel):
    status: OrderStatus = Field(..., description="PAGADO o CANCELADO")

# ==================== RESPONSE SCHEMAS ====================

class OrderItemResponse(RevendedoresBaseModel):
    product_id: Optional[int]
    name: str
    price: Decimal
    cost: Decimal
    quantity: int
    total: Decimal

class OrderResponse(RevendedoresBaseModel):
    id: int
    status: OrderStatus
    method: str
    total: Decimal
    total_cost: Decimal
    profit: Decimal
    client_id: Optional[int]
    client_name: str
    created_at: Optional[datetime]
    items: List[OrderItemResponse]

class WhatsAppOrderResponse(BaseModel):
    message: str
    whatsapp_url: Optional[str]
    items_count: int
    total: float

class DirectSaleResponse(BaseModel):
    success: bool
    order: OrderResponse
    message: str
    whatsapp_url: Optional[str]

class DashboardResponse(RevendedoresBaseModel):
    total_sales: Decimal = Field(..., description="Ventas sin contar canceladas")
    total_profit: Decimal
    pending_amount: Decimal = Field(..., description="Por cobrar (PENDIENTE)")
    paid_amount: Decimal
    orders_count: int
    orders_by_status: Dict[str, int]
