import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from revendedores.config.database import Base, enable_sqlite_foreign_keys, get_db
from revendedores.main import app
from revendedores.modules.cart.store import CartRegistry, CartStorage, get_cart_registry


@pytest.fixture
def db_session_factory():
    # Una sola conexión en memoria compartida por todos los hilos del TestClient
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(bind=engine)
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    yield factory
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def cart_registry(tmp_path):
    return CartRegistry(CartStorage(str(tmp_path / "carts")))


@pytest.fixture
def client(db_session_factory, cart_registry):
    def override_get_db():
        db = db_session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_cart_registry] = lambda: cart_registry
    yield TestClient(app)
    app.dependency_overrides.clear()


def register(client, email="tienda@example.com", password="secreto123", business_name="Tienda Ana"):
    r = client.post('/api/v1/auth/register', json={
        'business_name': business_name,
        'email': email,
        'password': password,
    })
    assert r.status_code == 201, r.text
    return r.json()


@pytest.fixture
def auth_token(client):
    return register(client)['access_token']


@pytest.fixture
def auth_headers(auth_token):
    return {'Authorization': f'Bearer {auth_token}'}


@pytest.fixture
def create_product(client, auth_headers):
    def _create(**overrides):
        payload = {
            'name': 'Perfume Floral',
            'price': 200,
            'cost': 100,
            'stock': 10,
            'category': 'Perfumes',
        }
        payload.update(overrides)
        r = client.post('/api/v1/catalog/products', json=payload, headers=auth_headers)
        assert r.status_code == 201, r.text
        return r.json()
    return _create
