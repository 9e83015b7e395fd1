# revendedores/modules/clients/__init__.py
"""
Módulo Clientes - Directorio del vendedor

Los pedidos referencian al cliente por id y guardan una copia de su nombre.
"""

from .router import router as clients_router
from .service import ClientsService
from .repository import ClientsRepository

__all__ = [
    "clients_router",
    "ClientsService",
    "ClientsRepository"
]
