# revendedores/modules/accounts/schemas.py
from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime

from revendedores.shared.schemas import RevendedoresBaseModel

class RegisterRequest(BaseModel):
    business_name: str = Field(..., description="Nombre del negocio")
    email: str = Field(..., description="Correo de acceso")
    password: str = Field(..., min_length=6, description="Contraseña (mínimo 6 caracteres)")

    @field_validator('business_name')
    @classmethod
    def validate_business_name(cls, v: str):
        if not v or not v.strip():
            raise ValueError('Por favor completa todos los campos')
        return v.strip()

    @field_validator('email')
    @classmethod
    def normalize_email(cls, v: str):
        v = v.strip().lower()
        if '@' not in v:
            raise ValueError('Correo inválido')
        return v

class LoginRequest(BaseModel):
    email: str
    password: str

    @field_validator('email')
    @classmethod
    def normalize_email(cls, v: str):
        return v.strip().lower()

class ProfileUpdate(BaseModel):
    business_name: Optional[str] = Field(None, min_length=1)
    phone: Optional[str] = None
    photo_url: Optional[str] = None

class UserResponse(RevendedoresBaseModel):
    id: int
    email: str
    business_name: str
    phone: Optional[str]
    photo_url: Optional[str]
    created_at: Optional[datetime]

class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserResponse
