# revendedores/modules/catalog/service.py
import logging
from typing import List, Optional, Dict, Any
from fastapi import HTTPException, status
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from revendedores.config.settings import settings
from revendedores.core.realtime import hub
from revendedores.modules.cart.store import CartStore
from revendedores.shared.database.models import Product, Category, User
from revendedores.shared.messaging import build_marketplace_listing
from .filters import ALL_CATEGORIES, filter_products, find_by_barcode
from .repository import CatalogRepository
from .schemas import (
    ProductCreate, ProductUpdate, ProductResponse,
    CategoryResponse, ProductShareResponse
)

logger = logging.getLogger(__name__)

class CatalogService:
    """
    Servicio del catálogo: productos, categorías y acceso al carrito
    """

    def __init__(self, db: Session):
        self.db = db
        self.repository = CatalogRepository(db)

    # ==================== RESPUESTAS ====================

    @staticmethod
    def product_response(product: Product) -> ProductResponse:
        stock = product.stock or 0
        return ProductResponse(
            id=product.id,
            name=product.name,
            price=product.price,
            cost=product.cost,
            stock=max(0, stock),
            category=product.category,
            description=product.description,
            barcode=product.barcode,
            image=product.image,
            is_low_stock=0 < stock < settings.low_stock_threshold,
            is_out_of_stock=stock <= 0,
            created_at=product.created_at,
            updated_at=product.updated_at
        )

    def _publish_product(self, owner_id: int, event: str, product: Product) -> None:
        hub.publish(owner_id, "products", event, self.product_response(product).model_dump(mode="json"))

    def _get_product_or_404(self, owner: User, product_id: int) -> Product:
        product = self.repository.get_product(owner.id, product_id)
        if not product:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Este producto ya no existe"
            )
        return product

    # ==================== PRODUCTOS ====================

    async def list_products(
        self,
        owner: User,
        search_text: str = "",
        category: Optional[str] = ALL_CATEGORIES
    ) -> List[ProductResponse]:
        """
        Catálogo filtrado por texto y categoría, en memoria
        """
        products = self.repository.get_products_by_owner(owner.id)
        return [
            self.product_response(p)
            for p in filter_products(products, search_text, category)
        ]

    async def get_product(self, owner: User, product_id: int) -> ProductResponse:
        return self.product_response(self._get_product_or_404(owner, product_id))

    async def create_product(self, owner: User, product_data: ProductCreate) -> ProductResponse:
        try:
            product = self.repository.create_product(owner.id, product_data.model_dump())
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error guardando producto de usuario {owner.id}: {e}")
            raise HTTPException(status_code=500, detail="No se pudo guardar el producto")

        logger.info(f"Producto {product.id} creado por usuario {owner.id}")
        self._publish_product(owner.id, "created", product)
        return self.product_response(product)

    async def update_product(
        self,
        owner: User,
        product_id: int,
        update_data: ProductUpdate
    ) -> ProductResponse:
        product = self._get_product_or_404(owner, product_id)
        try:
            product = self.repository.update_product(product, update_data.model_dump(exclude_unset=True))
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error actualizando producto {product_id}: {e}")
            raise HTTPException(status_code=500, detail="No se pudo actualizar")

        self._publish_product(owner.id, "updated", product)
        return self.product_response(product)

    async def delete_product(self, owner: User, product_id: int) -> Dict[str, Any]:
        product = self._get_product_or_404(owner, product_id)
        snapshot = self.product_response(product).model_dump(mode="json")
        try:
            self.repository.delete_product(product)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error borrando producto {product_id}: {e}")
            raise HTTPException(status_code=500, detail="No se pudo borrar")

        hub.publish(owner.id, "products", "deleted", snapshot)
        return {
            "success": True,
            "product_id": product_id,
            "message": "Producto eliminado"
        }

    async def get_share_text(self, owner: User, product_id: int) -> ProductShareResponse:
        """
        Texto listo para pegar en Marketplace, con sobreprecio sugerido
        """
        product = self._get_product_or_404(owner, product_id)
        return ProductShareResponse(
            product_id=product.id,
            text=build_marketplace_listing(product.name, product.price, product.description)
        )

    # ==================== CARRITO ====================

    def _add_to_cart(self, cart: CartStore, product: Product) -> Dict[str, Any]:
        # Sin costo no se puede calcular la ganancia de la venta
        if product.cost is None:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Edita el producto y agrega su costo antes de venderlo"
            )
        try:
            line = cart.add_item(product)
        except OSError as e:
            logger.error(f"No se pudo guardar el carrito del usuario {cart.owner_id}: {e}")
            raise HTTPException(status_code=500, detail="No se pudo guardar el carrito")
        return {
            "success": True,
            "item": line,
            "cart_size": cart.size,
            "cart_total": cart.total
        }

    async def add_to_cart(self, owner: User, cart: CartStore, product_id: int) -> Dict[str, Any]:
        product = self._get_product_or_404(owner, product_id)
        return self._add_to_cart(cart, product)

    async def scan_to_cart(self, owner: User, cart: CartStore, barcode: str) -> Dict[str, Any]:
        """
        Buscar el código en el catálogo cargado y agregarlo al carrito.
        Si no existe, el carrito no cambia.
        """
        products = self.repository.get_products_by_owner(owner.id)
        product = find_by_barcode(products, barcode)
        if product is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Producto no encontrado para el código {barcode}"
            )
        return self._add_to_cart(cart, product)

    # ==================== CATEGORÍAS ====================

    async def list_categories(self, owner: User) -> List[CategoryResponse]:
        return [
            CategoryResponse.model_validate(c)
            for c in self.repository.get_categories_by_owner(owner.id)
        ]

    async def create_category(self, owner: User, name: str) -> CategoryResponse:
        try:
            category = self.repository.create_category(owner.id, name)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error creando categoría: {e}")
            raise HTTPException(status_code=500, detail="No se pudo crear")

        response = CategoryResponse.model_validate(category)
        hub.publish(owner.id, "categories", "created", response.model_dump(mode="json"))
        return response

    async def delete_category(self, owner: User, category_id: int) -> Dict[str, Any]:
        category: Optional[Category] = self.repository.get_category(owner.id, category_id)
        if not category:
            raise HTTPException(status_code=404, detail="Categoría no encontrada")

        snapshot = CategoryResponse.model_validate(category).model_dump(mode="json")
        try:
            self.repository.delete_category(category)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error borrando categoría {category_id}: {e}")
            raise HTTPException(status_code=500, detail="No se pudo borrar")

        hub.publish(owner.id, "categories", "deleted", snapshot)
        return {"success": True, "category_id": category_id}
