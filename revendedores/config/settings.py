from pydantic import Field
from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    # App Info
    app_name: str = "Revendedores Pro API"
    version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"
    
    # Database
    database_url: str = "sqlite:///./revendedores.db"
    
    # Security
    secret_key: str = "cambia-esta-clave-en-produccion"
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 10080  # 1 week
    allowed_origins: List[str] = [
        "http://localhost:8081",
        "http://localhost:19006",
    ]
    
    # Carrito local (un archivo JSON por vendedor)
    cart_storage_dir: str = Field(
        default="./.carts",
        description="Directorio donde se guarda el carrito de cada vendedor"
    )
    
    # Ventas
    currency_symbol: str = "Q"
    default_client_name: str = "Cliente Final"
    whatsapp_number: str = Field(
        default="50200000000",
        description="Número de WhatsApp del negocio para pedidos y reportes"
    )
    decrement_stock_on_payment: bool = Field(
        default=True,
        description="Descontar stock otra vez al marcar un pedido como PAGADO"
    )
    
    # Catálogo
    low_stock_threshold: int = 3
    marketplace_markup: float = Field(default=50, description="Sobreprecio sugerido para Marketplace")
    
    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    
    class Config:
        env_file = ".env"
        case_sensitive = False

settings = Settings()
