# revendedores/modules/catalog/__init__.py
"""
Módulo Catálogo - Inventario del vendedor

- Productos: alta, edición, baja y texto para Marketplace
- Categorías por vendedor
- Filtro por nombre y categoría sobre el catálogo cargado
- Escaneo de código de barras directo al carrito

Arquitectura:
- router.py: Endpoints FastAPI
- service.py: Lógica de negocio
- repository.py: Acceso a datos
- schemas.py: Modelos Pydantic de request/response
- filters.py: Filtros en memoria
"""

from .router import router as catalog_router
from .service import CatalogService
from .repository import CatalogRepository

__all__ = [
    "catalog_router",
    "CatalogService",
    "CatalogRepository"
]
