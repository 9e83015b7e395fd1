# revendedores/modules/accounts/__init__.py
"""
Módulo Cuentas - Sesión del vendedor

Registro, login con token Bearer (JWT) y perfil del negocio. Cerrar sesión es
descartar el token en el cliente.
"""

from .router import router as accounts_router
from .service import AccountsService
from .repository import AccountsRepository

__all__ = [
    "accounts_router",
    "AccountsService",
    "AccountsRepository"
]
