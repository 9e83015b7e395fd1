# revendedores/api/v1/router.py
from fastapi import APIRouter

from revendedores.config.settings import settings
from revendedores.modules.accounts import accounts_router
from revendedores.modules.cart import cart_router
from revendedores.modules.catalog import catalog_router
from revendedores.modules.clients import clients_router
from revendedores.modules.sales import sales_router
from .live import router as live_router

# Crear router principal de la API v1
api_router = APIRouter(prefix="/api/v1")

# ==================== MÓDULOS ====================

api_router.include_router(accounts_router)
api_router.include_router(catalog_router)
api_router.include_router(cart_router)
api_router.include_router(sales_router)
api_router.include_router(clients_router)
api_router.include_router(live_router)

# ==================== ENDPOINTS RAÍZ ====================

@api_router.get("/")
async def api_root():
    """Root endpoint de la API"""
    return {
        "message": "Revendedores Pro API v1",
        "version": settings.version,
        "status": "active",
        "available_endpoints": {
            "authentication": "/api/v1/auth",
            "catalog": "/api/v1/catalog",
            "cart": "/api/v1/cart",
            "sales": "/api/v1/sales",
            "clients": "/api/v1/clients",
            "live": "/api/v1/live/{collection}?token=..."
        }
    }

@api_router.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "service": settings.app_name,
        "version": settings.version
    }
