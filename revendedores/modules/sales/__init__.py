# revendedores/modules/sales/__init__.py
"""
Módulo de Ventas - Del carrito al pedido

- Confirmar venta: totales, costo, ganancia y descuento de stock
- Pedido por WhatsApp y venta directa desde el producto
- Estados del pedido: PENDIENTE -> PAGADO | CANCELADO
- Historial y dashboard (ventas, ganancia, por cobrar)

Arquitectura:
- router.py: Endpoints FastAPI
- service.py: Lógica de negocio
- repository.py: Acceso a datos
- schemas.py: Modelos Pydantic de request/response
- lifecycle.py: Totales, transiciones y agregados (sin base de datos)
"""

from .router import router as sales_router
from .service import SalesService
from .repository import SalesRepository

__all__ = [
    "sales_router",
    "SalesService",
    "SalesRepository"
]
