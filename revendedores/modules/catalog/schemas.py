# revendedores/modules/catalog/schemas.py
from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime
from decimal import Decimal

from revendedores.shared.schemas import RevendedoresBaseModel

# ==================== VALIDADORES COMUNES ====================

def _required_text(v: str) -> str:
    if not v or not v.strip():
        raise ValueError('Este campo no puede estar vacío')
    return v.strip()

# ==================== PRODUCTOS ====================

class ProductCreate(BaseModel):
    name: str = Field(..., description="Nombre del producto")
    price: Decimal = Field(..., ge=0, description="Precio de venta")
    category: str = Field(..., description="Categoría (por nombre)")
    cost: Optional[Decimal] = Field(None, ge=0, description="Costo de adquisición")
    stock: int = Field(0, ge=0, description="Unidades disponibles")
    description: str = Field("", description="Descripción")
    barcode: Optional[str] = Field(None, description="Código de barras")
    image: Optional[str] = Field(None, description="URL de la imagen")

    @field_validator('name', 'category')
    @classmethod
    def validate_required_text(cls, v: str):
        return _required_text(v)

    @field_validator('barcode')
    @classmethod
    def normalize_barcode(cls, v: Optional[str]):
        if v is None:
            return None
        return v.strip() or None

class ProductUpdate(BaseModel):
    """
    Edición: nombre, precio, costo y cantidad son obligatorios.
    Solo se aplican los campos enviados; descripción, código e imagen
    se pueden borrar mandándolos en null.
    """
    name: str
    price: Decimal = Field(..., ge=0)
    cost: Decimal = Field(..., ge=0)
    stock: int = Field(..., ge=0)
    category: Optional[str] = None
    description: Optional[str] = None
    barcode: Optional[str] = None
    image: Optional[str] = None

    @field_validator('name')
    @classmethod
    def validate_name(cls, v: str):
        return _required_text(v)

    @field_validator('category')
    @classmethod
    def validate_category(cls, v: Optional[str]):
        # Se puede omitir, pero un producto nunca queda sin categoría
        return _required_text(v)

    @field_validator('barcode')
    @classmethod
    def normalize_barcode(cls, v: Optional[str]):
        if v is None:
            return None
        return v.strip() or None

class ProductResponse(RevendedoresBaseModel):
    id: int
    name: str
    price: Decimal
    cost: Optional[Decimal]
    stock: int = Field(..., ge=0, description="Nunca negativo al leer")
    category: Optional[str]
    description: Optional[str]
    barcode: Optional[str]
    image: Optional[str]
    is_low_stock: bool
    is_out_of_stock: bool
    created_at: Optional[datetime]
    updated_at: Optional[datetime]

class BarcodeScanRequest(BaseModel):
    barcode: str = Field(..., min_length=1, description="Código leído por la cámara")

class ProductShareResponse(BaseModel):
    product_id: int
    text: str

# ==================== CATEGORÍAS ====================

class CategoryCreate(BaseModel):
    name: str = Field(..., description="Nombre de la categoría")

    @field_validator('name')
    @classmethod
    def validate_name(cls, v: str):
        return _required_text(v)

class CategoryResponse(RevendedoresBaseModel):
    id: int
    name: str
    created_at: Optional[datetime]
