from conftest import register


def test_register_returns_token_and_user(client):
    data = register(client, email='  Ana@Example.com ')

    assert data['token_type'] == 'bearer'
    assert data['access_token']
    assert data['user']['email'] == 'ana@example.com'
    assert data['user']['business_name'] == 'Tienda Ana'


def test_register_duplicate_email_conflicts(client):
    register(client)
    r = client.post('/api/v1/auth/register', json={
        'business_name': 'Otra', 'email': 'tienda@example.com', 'password': 'secreto123'
    })
    assert r.status_code == 409


def test_register_validates_fields(client):
    r = client.post('/api/v1/auth/register', json={
        'business_name': '  ', 'email': 'correo-malo', 'password': '123'
    })
    assert r.status_code == 422


def test_login_with_wrong_password(client):
    register(client)
    r = client.post('/api/v1/auth/login', json={'email': 'tienda@example.com', 'password': 'otra-clave'})
    assert r.status_code == 401


def test_login_and_me(client):
    register(client)
    r = client.post('/api/v1/auth/login', json={'email': 'TIENDA@example.com', 'password': 'secreto123'})
    assert r.status_code == 200
    token = r.json()['access_token']

    me = client.get('/api/v1/auth/me', headers={'Authorization': f'Bearer {token}'})
    assert me.status_code == 200
    assert me.json()['email'] == 'tienda@example.com'


def test_update_profile(client, auth_headers):
    r = client.put('/api/v1/auth/me', json={'phone': '+502 5555-1234'}, headers=auth_headers)
    assert r.status_code == 200
    assert r.json()['phone'] == '+502 5555-1234'
    assert r.json()['business_name'] == 'Tienda Ana'


def test_data_endpoints_require_session(client):
    assert client.get('/api/v1/catalog/products').status_code == 401
    assert client.get('/api/v1/cart').status_code == 401
    assert client.get('/api/v1/sales/orders').status_code == 401
    r = client.get('/api/v1/clients', headers={'Authorization': 'Bearer no-es-un-token'})
    assert r.status_code == 401


def test_health(client):
    r = client.get('/api/v1/health')
    assert r.status_code == 200
    assert r.json()['status'] == 'healthy'
