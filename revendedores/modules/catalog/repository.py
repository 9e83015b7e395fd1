# revendedores/modules/catalog/repository.py
from typing import List, Optional, Dict, Any
from sqlalchemy.orm import Session
from sqlalchemy import func

from revendedores.shared.database.models import Product, Category

class CatalogRepository:
    """
    Repositorio para productos y categorías de un vendedor
    """

    def __init__(self, db: Session):
        self.db = db

    # ==================== PRODUCTOS ====================

    def get_products_by_owner(self, owner_id: int) -> List[Product]:
        """
        Catálogo completo del vendedor
        """
        return self.db.query(Product).filter(
            Product.owner_id == owner_id
        ).order_by(Product.name, Product.id).all()

    def get_product(self, owner_id: int, product_id: int) -> Optional[Product]:
        return self.db.query(Product).filter(
            Product.id == product_id,
            Product.owner_id == owner_id
        ).first()

    def create_product(self, owner_id: int, product_data: Dict[str, Any]) -> Product:
        product = Product(owner_id=owner_id, **product_data)
        self.db.add(product)
        self.db.commit()
        self.db.refresh(product)
        return product

    def update_product(self, product: Product, update_data: Dict[str, Any]) -> Product:
        """Aplica solo las llaves recibidas; None borra el valor"""
        for key, value in update_data.items():
            if hasattr(product, key):
                setattr(product, key, value)
        self.db.commit()
        self.db.refresh(product)
        return product

    def delete_product(self, product: Product) -> None:
        self.db.delete(product)
        self.db.commit()

    # ==================== CATEGORÍAS ====================

    def get_categories_by_owner(self, owner_id: int) -> List[Category]:
        return self.db.query(Category).filter(
            Category.owner_id == owner_id
        ).order_by(func.lower(Category.name)).all()

    def get_category(self, owner_id: int, category_id: int) -> Optional[Category]:
        return self.db.query(Category).filter(
            Category.id == category_id,
            Category.owner_id == owner_id
        ).first()

    def create_category(self, owner_id: int, name: str) -> Category:
        category = Category(owner_id=owner_id, name=name)
        self.db.add(category)
        self.db.commit()
        self.db.refresh(category)
        return category

    def delete_category(self, category: Category) -> None:
        self.db.delete(category)
        self.db.commit()
