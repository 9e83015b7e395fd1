# revendedores/modules/catalog/filters.py
"""
Filtros del catálogo en memoria.

El catálogo completo del vendedor ya está cargado; aquí no se pagina ni se
consulta la base de datos.
"""
from typing import Any, Iterable, List, Optional

ALL_CATEGORIES = "Todos"


def matches_search(product: Any, search_text: str) -> bool:
    # Sin nombre nunca coincide, ni siquiera con búsqueda vacía
    if not product.name:
        return False
    return (search_text or "").lower() in product.name.lower()


def matches_category(product: Any, category: Optional[str]) -> bool:
    if not category or category == ALL_CATEGORIES:
        return True
    return product.category == category


def filter_products(
    products: Iterable[Any],
    search_text: str = "",
    category: Optional[str] = ALL_CATEGORIES
) -> List[Any]:
    return [
        product for product in products
        if matches_category(product, category) and matches_search(product, search_text)
    ]


def find_by_barcode(products: Iterable[Any], code: str) -> Optional[Any]:
    """Primer producto cuyo código coincide exactamente"""
    for product in products:
        if product.barcode is not None and product.barcode == code:
            return product
    return None
