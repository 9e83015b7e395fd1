"""
Textos y enlaces para compartir por WhatsApp / Marketplace.
"""
import re
from decimal import Decimal
from typing import Iterable, Optional, Union
from urllib.parse import quote

from revendedores.config.settings import settings

WHATSAPP_BASE_URL = "https://wa.me"

Number = Union[Decimal, float, int]


def format_money(amount: Number) -> str:
    return f"{settings.currency_symbol}{Decimal(str(amount)):.2f}"


def phone_digits(phone: Optional[str]) -> str:
    return re.sub(r"\D", "", phone or "")


def whatsapp_url(phone: Optional[str], message: Optional[str] = None) -> Optional[str]:
    """
    Enlace wa.me para un número; None si el número no tiene dígitos
    """
    digits = phone_digits(phone)
    if not digits:
        return None
    url = f"{WHATSAPP_BASE_URL}/{digits}"
    if message:
        url += f"?text={quote(message, safe='')}"
    return url


def build_cart_order_message(items: Iterable, total: Number) -> str:
    """Mensaje de pedido con las líneas del carrito numeradas"""
    message = "*📦 NUEVO PEDIDO RE-VENDEDOR*\n\n"
    message += "Hola, solicito los siguientes productos:\n\n"
    for index, item in enumerate(items, start=1):
        message += f"{index}. {item.name} - {format_money(item.price)}\n"
    message += f"\n*TOTAL A PAGAR: {format_money(total)}*"
    message += "\n\nQuedo a la espera de confirmación."
    return message


def build_direct_sale_message(product_name: str, order_id: int) -> str:
    return f"Hola, registré una venta de: {product_name}. (Ref: {order_id})"


def build_marketplace_listing(name: str, price: Number, description: Optional[str] = None) -> str:
    suggested_price = Decimal(str(price)) + Decimal(str(settings.marketplace_markup))
    return (
        f"🔥 {name} 🔥\n\n"
        f"✅ {description or 'Excelente calidad'}\n\n"
        f"💰 Precio: {format_money(suggested_price)} (Negociable)\n"
        f"🚚 Entrega inmediata\n\n"
        f"¡Mándame mensaje para coordinar!"
    )
