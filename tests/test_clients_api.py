def test_create_and_list_clients(client, auth_headers):
    r = client.post('/api/v1/clients', json={'name': ' zoila ', 'phone': '+502 5555-1234'}, headers=auth_headers)
    assert r.status_code == 201
    assert r.json()['name'] == 'zoila'
    assert r.json()['whatsapp_url'] == 'https://wa.me/50255551234'

    client.post('/api/v1/clients', json={'name': 'Ana', 'address': 'Zona 1'}, headers=auth_headers)
    clients = client.get('/api/v1/clients', headers=auth_headers).json()
    assert [c['name'] for c in clients] == ['Ana', 'zoila']
    assert clients[0]['whatsapp_url'] is None


def test_client_name_is_required(client, auth_headers):
    r = client.post('/api/v1/clients', json={'name': '   '}, headers=auth_headers)
    assert r.status_code == 422


def test_delete_client(client, auth_headers):
    created = client.post('/api/v1/clients', json={'name': 'Ana'}, headers=auth_headers).json()

    r = client.delete(f"/api/v1/clients/{created['id']}", headers=auth_headers)
    assert r.status_code == 200
    assert client.get('/api/v1/clients', headers=auth_headers).json() == []
    assert client.delete(f"/api/v1/clients/{created['id']}", headers=auth_headers).status_code == 404
