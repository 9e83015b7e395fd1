# revendedores/modules/clients/schemas.py
from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime

from revendedores.shared.schemas import RevendedoresBaseModel

class ClientCreate(BaseModel):
    name: str = Field(..., description="Nombre del cliente")
    phone: str = Field("", description="Teléfono / WhatsApp")
    address: str = Field("", description="Dirección de entrega")

    @field_validator('name')
    @classmethod
    def validate_name(cls, v: str):
        if not v or not v.strip():
            raise ValueError('Por favor escribe el nombre del cliente')
        return v.strip()

    @field_validator('phone', 'address')
    @classmethod
    def strip_optional(cls, v: Optional[str]):
        return (v or "").strip()

class ClientResponse(RevendedoresBaseModel):
    id: int
    name: str
    phone: Optional[str]
    address: Optional[str]
    created_at: Optional[datetime]
    whatsapp_url: Optional[str] = None
