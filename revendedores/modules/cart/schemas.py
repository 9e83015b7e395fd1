# revendedores/modules/cart/schemas.py
from pydantic import BaseModel, Field
from typing import List
from decimal import Decimal

from revendedores.shared.schemas import RevendedoresBaseModel

class CartLineItem(RevendedoresBaseModel):
    """Copia del producto al momento de agregarlo al carrito"""
    id: int = Field(..., description="ID del producto")
    name: str
    price: Decimal = Field(..., ge=0)
    cost: Decimal = Field(Decimal("0"), ge=0)
    quantity: int = Field(1, gt=0)
    total: Decimal = Field(..., ge=0, description="precio x cantidad al agregar")

class AddToCartRequest(BaseModel):
    product_id: int = Field(..., description="Producto a agregar")

class CartResponse(RevendedoresBaseModel):
    items: List[CartLineItem]
    size: int
    total: Decimal
