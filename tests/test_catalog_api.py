from conftest import register


def test_create_and_get_product(client, auth_headers, create_product):
    product = create_product(barcode=' 7501 ')

    assert product['name'] == 'Perfume Floral'
    assert float(product['price']) == 200
    assert product['barcode'] == '7501'
    assert product['is_out_of_stock'] is False

    r = client.get(f"/api/v1/catalog/products/{product['id']}", headers=auth_headers)
    assert r.status_code == 200
    assert r.json()['id'] == product['id']


def test_create_product_requires_name_price_category(client, auth_headers):
    r = client.post('/api/v1/catalog/products', json={'name': ' ', 'price': 10, 'category': 'X'}, headers=auth_headers)
    assert r.status_code == 422
    r = client.post('/api/v1/catalog/products', json={'name': 'Sin precio', 'category': 'X'}, headers=auth_headers)
    assert r.status_code == 422
    r = client.post('/api/v1/catalog/products', json={'name': 'Negativo', 'price': -1, 'category': 'X'}, headers=auth_headers)
    assert r.status_code == 422


def test_stock_flags(client, auth_headers, create_product):
    assert create_product(stock=0)['is_out_of_stock'] is True
    low = create_product(stock=2)
    assert low['is_low_stock'] is True
    assert low['is_out_of_stock'] is False


def test_list_filters_by_search_and_category(client, auth_headers, create_product):
    create_product(name='Perfume Floral', category='Perfumes')
    create_product(name='Crema', category='Cuidado')

    r = client.get('/api/v1/catalog/products', params={'q': 'perf'}, headers=auth_headers)
    assert [p['name'] for p in r.json()] == ['Perfume Floral']

    r = client.get('/api/v1/catalog/products', params={'category': 'Cuidado'}, headers=auth_headers)
    assert [p['name'] for p in r.json()] == ['Crema']

    r = client.get('/api/v1/catalog/products', params={'category': 'Todos'}, headers=auth_headers)
    assert len(r.json()) == 2


def test_products_are_private_per_owner(client, auth_headers, create_product):
    product = create_product()
    other = register(client, email='otro@example.com')
    other_headers = {'Authorization': f"Bearer {other['access_token']}"}

    assert client.get('/api/v1/catalog/products', headers=other_headers).json() == []
    r = client.get(f"/api/v1/catalog/products/{product['id']}", headers=other_headers)
    assert r.status_code == 404


def test_update_product(client, auth_headers, create_product):
    product = create_product()
    r = client.put(
        f"/api/v1/catalog/products/{product['id']}",
        json={'name': 'Perfume Nuevo', 'price': 250, 'cost': 120, 'stock': 4},
        headers=auth_headers
    )
    assert r.status_code == 200
    data = r.json()
    assert data['name'] == 'Perfume Nuevo'
    assert float(data['cost']) == 120
    assert data['stock'] == 4
    assert data['category'] == 'Perfumes'


def test_update_requires_cost(client, auth_headers, create_product):
    product = create_product()
    r = client.put(
        f"/api/v1/catalog/products/{product['id']}",
        json={'name': 'Perfume', 'price': 250, 'stock': 4},
        headers=auth_headers
    )
    assert r.status_code == 422


def test_update_missing_product(client, auth_headers):
    r = client.put(
        '/api/v1/catalog/products/999',
        json={'name': 'X', 'price': 1, 'cost': 1, 'stock': 1},
        headers=auth_headers
    )
    assert r.status_code == 404


def test_delete_product(client, auth_headers, create_product):
    product = create_product()
    r = client.delete(f"/api/v1/catalog/products/{product['id']}", headers=auth_headers)
    assert r.status_code == 200
    assert r.json()['success'] is True
    assert client.get(f"/api/v1/catalog/products/{product['id']}", headers=auth_headers).status_code == 404


def test_share_text(client, auth_headers, create_product):
    product = create_product(description='Aroma intenso')
    r = client.get(f"/api/v1/catalog/products/{product['id']}/share", headers=auth_headers)
    assert r.status_code == 200
    text = r.json()['text']
    assert 'Perfume Floral' in text
    assert 'Aroma intenso' in text
    assert 'Q250.00' in text


def test_scan_adds_matching_product_to_cart(client, auth_headers, create_product):
    create_product(barcode='7501')
    r = client.post('/api/v1/catalog/scan', json={'barcode': '7501'}, headers=auth_headers)
    assert r.status_code == 200
    assert r.json()['cart_size'] == 1
    assert r.json()['item']['name'] == 'Perfume Floral'


def test_scan_unknown_code_leaves_cart_unchanged(client, auth_headers, create_product):
    create_product(barcode='7501')
    r = client.post('/api/v1/catalog/scan', json={'barcode': '0000'}, headers=auth_headers)
    assert r.status_code == 404
    assert '0000' in r.json()['detail']
    assert client.get('/api/v1/cart', headers=auth_headers).json()['size'] == 0


def test_product_without_cost_cannot_be_sold(client, auth_headers, create_product):
    product = create_product(cost=None)
    r = client.post('/api/v1/cart/items', json={'product_id': product['id']}, headers=auth_headers)
    assert r.status_code == 400
    assert client.get('/api/v1/cart', headers=auth_headers).json()['size'] == 0


def test_categories(client, auth_headers):
    r = client.post('/api/v1/catalog/categories', json={'name': ' Perfumes '}, headers=auth_headers)
    assert r.status_code == 201
    category_id = r.json()['id']
    client.post('/api/v1/catalog/categories', json={'name': 'accesorios'}, headers=auth_headers)

    names = [c['name'] for c in client.get('/api/v1/catalog/categories', headers=auth_headers).json()]
    assert names == ['accesorios', 'Perfumes']

    r = client.delete(f'/api/v1/catalog/categories/{category_id}', headers=auth_headers)
    assert r.status_code == 200
    assert client.delete(f'/api/v1/catalog/categories/{category_id}', headers=auth_headers).status_code == 404


def test_edit_can_clear_optional_fields(client, auth_headers, create_product):
    product = create_product(barcode='7501', image='https://img.example/p.jpg', description='Aroma intenso')
    r = client.put(
        f"/api/v1/catalog/products/{product['id']}",
        json={'name': 'Perfume', 'price': 200, 'cost': 100, 'stock': 10, 'barcode': None, 'image': None},
        headers=auth_headers
    )
    assert r.status_code == 200
    data = r.json()
    assert data['barcode'] is None
    assert data['image'] is None
    assert data['description'] == 'Aroma intenso'
    assert data['category'] == 'Perfumes'


def test_edit_cannot_remove_category(client, auth_headers, create_product):
    product = create_product()
    r = client.put(
        f"/api/v1/catalog/products/{product['id']}",
        json={'name': 'Perfume', 'price': 200, 'cost': 100, 'stock': 10, 'category': None},
        headers=auth_headers
    )
    assert r.status_code == 422


def test_cart_save_failure_leaves_cart_unchanged(client, auth_headers, create_product, cart_registry, monkeypatch):
    product = create_product()

    def broken_save(owner_id, items):
        raise OSError('disco lleno')

    monkeypatch.setattr(cart_registry.storage, 'save', broken_save)
    r = client.post('/api/v1/cart/items', json={'product_id': product['id']}, headers=auth_headers)
    assert r.status_code == 500
    assert client.get('/api/v1/cart', headers=auth_headers).json()['size'] == 0
