import httpx
import pytest
from fastapi.testclient import TestClient

from shop.DB import migrate
from shop.main import create_app
from shop.settings import Settings
from shop_web.client import ShopClient

SECRET_KEY = 'test-secret-key-that-is-long-enough-0123456789'


@pytest.fixture
def settings(tmp_path):
    return Settings(
        _env_file=None,
        DATABASE_URL=f'sqlite:///{tmp_path / "shop.db"}',
        SECRET_KEY=SECRET_KEY,
        BCRYPT_ROUNDS=4,
    )


@pytest.fixture
def app(settings):
    migrate(settings.database_url)
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client


@pytest.fixture
def customer(client):
    response = client.post(
        '/customers',
        json={
            'name': 'Alice',
            'email': 'alice@acme.io',
            'password': 'secret123',
        },
    )
    return response.json()


@pytest.fixture
def token(client, customer):
    response = client.post(
        '/auth/login', json={'email': 'alice@acme.io', 'password': 'secret123'}
    )
    return response.json()['access_token']


@pytest.fixture
def anyio_backend():
    return 'asyncio'


@pytest.fixture
def shop_client(app):
    return ShopClient('http://shop', transport=httpx.ASGITransport(app=app))
