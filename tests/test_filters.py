from types import SimpleNamespace

from revendedores.modules.catalog.filters import (
    ALL_CATEGORIES, filter_products, find_by_barcode
)


def product(name, category='Perfumes', barcode=None):
    return SimpleNamespace(name=name, category=category, barcode=barcode)


CATALOG = [
    product('Perfume Floral', 'Perfumes', '7501'),
    product('Crema Hidratante', 'Cuidado', '7502'),
    product('perfume de bolsillo', 'Perfumes'),
    product(None, 'Perfumes', '7503'),
    product('', 'Cuidado'),
]


def test_all_categories_and_empty_search_returns_named_products():
    result = filter_products(CATALOG)
    assert [p.name for p in result] == ['Perfume Floral', 'Crema Hidratante', 'perfume de bolsillo']


def test_search_is_case_insensitive_substring():
    result = filter_products(CATALOG, 'PERFUME')
    assert [p.name for p in result] == ['Perfume Floral', 'perfume de bolsillo']


def test_category_must_match_exactly():
    assert [p.name for p in filter_products(CATALOG, '', 'Cuidado')] == ['Crema Hidratante']
    assert filter_products(CATALOG, '', 'cuidado') == []


def test_search_and_category_combine():
    result = filter_products(CATALOG, 'crema', 'Perfumes')
    assert result == []


def test_every_result_satisfies_both_filters():
    for search in ['', 'e', 'floral', 'xyz']:
        for category in [ALL_CATEGORIES, 'Perfumes', 'Cuidado']:
            for p in filter_products(CATALOG, search, category):
                assert p.name
                assert search.lower() in p.name.lower()
                assert category == ALL_CATEGORIES or p.category == category


def test_find_by_barcode_exact_match():
    assert find_by_barcode(CATALOG, '7502').name == 'Crema Hidratante'
    assert find_by_barcode(CATALOG, '750') is None
    assert find_by_barcode(CATALOG, '9999') is None


def test_category_and_search_example():
    shoes = product('Zapato Azul', 'Calzado')
    shirt = product('Camisa Roja', 'Ropa')

    assert filter_products([shoes, shirt], 'zap', 'Calzado') == [shoes]
    assert filter_products([shoes, shirt], '', ALL_CATEGORIES) == [shoes, shirt]
