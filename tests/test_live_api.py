import pytest
from starlette.websockets import WebSocketDisconnect


def test_snapshot_then_changes(client, auth_token, auth_headers, create_product):
    create_product(name='Perfume Floral')

    with client.websocket_connect(f'/api/v1/live/products?token={auth_token}') as ws:
        snapshot = ws.receive_json()
        assert snapshot['type'] == 'snapshot'
        assert snapshot['collection'] == 'products'
        assert [p['name'] for p in snapshot['items']] == ['Perfume Floral']

        create_product(name='Crema')
        change = ws.receive_json()
        assert change['type'] == 'change'
        assert change['event'] == 'created'
        assert change['document']['name'] == 'Crema'


def test_orders_snapshot_is_empty_for_new_user(client, auth_token):
    with client.websocket_connect(f'/api/v1/live/orders?token={auth_token}') as ws:
        assert ws.receive_json() == {'type': 'snapshot', 'collection': 'orders', 'items': []}


def test_invalid_token_is_refused(client):
    with pytest.raises(WebSocketDisconnect):
        with client.websocket_connect('/api/v1/live/products?token=no-es-un-token') as ws:
            ws.receive_json()


def test_unknown_collection_is_refused(client, auth_token):
    with pytest.raises(WebSocketDisconnect):
        with client.websocket_connect(f'/api/v1/live/users?token={auth_token}') as ws:
            ws.receive_json()
