# revendedores/modules/cart/__init__.py
"""
Módulo Carrito - Líneas que el vendedor piensa cobrar

Un CartStore por vendedor, inyectado con Depends(get_cart) y guardado en un
archivo JSON local para sobrevivir reinicios.

Arquitectura:
- router.py: Endpoints FastAPI
- store.py: CartStore, almacenamiento local y registro por vendedor
- schemas.py: Modelos Pydantic
"""

from .router import router as cart_router
from .store import CartStore, CartStorage, CartRegistry, get_cart

__all__ = [
    "cart_router",
    "CartStore",
    "CartStorage",
    "CartRegistry",
    "get_cart"
]
