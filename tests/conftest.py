"""
Shared fixtures.

Service-level fixtures wire a fresh DocumentStore per test; API fixtures
build a fresh application through create_app() with demo seeding off.
"""
import pytest
from fastapi.testclient import TestClient

from storefront.core.config import Settings
from storefront.database import CartDatabase, DocumentStore, ProductDatabase, UserDatabase
from storefront.main import create_app
from storefront.models.product import Product, ProductCategory
from storefront.security.auth import create_access_token
from storefront.services.cart_service import CartService

ADDRESS = "12 Residency Road, Bengaluru 560025"

TEST_PRODUCTS = {
    "prod-100": Product(id="prod-100", name="Desk Lamp", category=ProductCategory.HOME, cost=100),
    "prod-250": Product(id="prod-250", name="Running Shoes", category=ProductCategory.SPORTS, cost=250),
    "prod-020": Product(id="prod-020", name="Paperback", category=ProductCategory.BOOKS, cost=20),
}


@pytest.fixture
def settings() -> Settings:
    return Settings(
        seed_demo_data=False,
        jwt_secret="test-secret",
        default_wallet_money=500,
    )


@pytest.fixture
def store() -> DocumentStore:
    return DocumentStore()


@pytest.fixture
def product_db() -> ProductDatabase:
    return ProductDatabase(TEST_PRODUCTS)


@pytest.fixture
def user_db(store, settings) -> UserDatabase:
    return UserDatabase(
        store,
        default_wallet_money=settings.default_wallet_money,
        default_address=settings.default_address,
    )


@pytest.fixture
def cart_db(store, settings) -> CartDatabase:
    return CartDatabase(store, default_payment_option=settings.default_payment_option)


@pytest.fixture
def cart_service(store, cart_db, product_db, user_db) -> CartService:
    return CartService(store=store, carts=cart_db, products=product_db, users=user_db)


@pytest.fixture
def user(user_db):
    """Account with the default wallet and a shipping address"""
    return user_db.create(email="buyer@example.com", name="Buyer", address=ADDRESS)


@pytest.fixture
def user_without_address(user_db):
    return user_db.create(email="no-address@example.com", name="Nomad")


@pytest.fixture
def app(settings):
    app = create_app(settings)
    app.state.products.products = dict(TEST_PRODUCTS)
    return app


@pytest.fixture
def test_client(app):
    with TestClient(app) as client:
        yield client


@pytest.fixture
def api_user(app):
    return app.state.users.create(email="api-buyer@example.com", name="Api Buyer", address=ADDRESS)


@pytest.fixture
def auth_headers(api_user, settings) -> dict:
    token = create_access_token(api_user.id, settings)
    return {"Authorization": f"Bearer {token}"}
