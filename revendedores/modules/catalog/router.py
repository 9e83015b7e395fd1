# revendedores/modules/catalog/router.py
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List

from revendedores.config.database import get_db
from revendedores.core.auth.dependencies import get_current_user
from revendedores.modules.cart.store import CartStore, get_cart
from revendedores.shared.database.models import User
from .filters import ALL_CATEGORIES
from .service import CatalogService
from .schemas import (
    ProductCreate, ProductUpdate, ProductResponse, ProductShareResponse,
    BarcodeScanRequest, CategoryCreate, CategoryResponse
)

router = APIRouter(prefix="/catalog", tags=["Catálogo"])

# ==================== PRODUCTOS ====================

@router.get("/products", response_model=List[ProductResponse])
async def list_products(
    q: str = Query("", description="Texto a buscar en el nombre"),
    category: str = Query(ALL_CATEGORIES, description=f"Categoría exacta o '{ALL_CATEGORIES}'"),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Catálogo del vendedor filtrado por nombre y categoría
    """
    service = CatalogService(db)
    return await service.list_products(current_user, q, category)

@router.post("/products", response_model=ProductResponse, status_code=201)
async def create_product(
    product_data: ProductCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Publicar un producto nuevo (nombre, precio y categoría obligatorios)
    """
    service = CatalogService(db)
    return await service.create_product(current_user, product_data)

@router.get("/products/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    service = CatalogService(db)
    return await service.get_product(current_user, product_id)

@router.put("/products/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: int,
    update_data: ProductUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Editar producto: nombre, precio, costo y cantidad son obligatorios
    """
    service = CatalogService(db)
    return await service.update_product(current_user, product_id, update_data)

@router.delete("/products/{product_id}")
async def delete_product(
    product_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    service = CatalogService(db)
    return await service.delete_product(current_user, product_id)

@router.get("/products/{product_id}/share", response_model=ProductShareResponse)
async def get_share_text(
    product_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Texto para copiar y publicar en Marketplace
    """
    service = CatalogService(db)
    return await service.get_share_text(current_user, product_id)

# ==================== ESCANEO ====================

@router.post("/scan")
async def scan_barcode(
    scan: BarcodeScanRequest,
    current_user: User = Depends(get_current_user),
    cart: CartStore = Depends(get_cart),
    db: Session = Depends(get_db)
):
    """
    Agregar al carrito el producto cuyo código de barras coincide
    """
    service = CatalogService(db)
    return await service.scan_to_cart(current_user, cart, scan.barcode)

# ==================== CATEGORÍAS ====================

@router.get("/categories", response_model=List[CategoryResponse])
async def list_categories(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    service = CatalogService(db)
    return await service.list_categories(current_user)

@router.post("/categories", response_model=CategoryResponse, status_code=201)
async def create_category(
    category_data: CategoryCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    service = CatalogService(db)
    return await service.create_category(current_user, category_data.name)

@router.delete("/categories/{category_id}")
async def delete_category(
    category_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    service = CatalogService(db)
    return await service.delete_category(current_user, category_id)
