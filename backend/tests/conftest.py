from decimal import Decimal
import pytest
from fastapi.testclient import TestClient
from inventory.config import Settings
from inventory.database import Database
from inventory.main import create_app
from inventory.models import Category, Product, Supplier


@pytest.fixture
def settings():
    return Settings(SEED_DEMO_DATA=False, ENVIRONMENT="test", LOG_LEVEL="INFO")


@pytest.fixture
def database(tmp_path):
    database = Database(f"sqlite:///{tmp_path / 'inventory.sqlite'}")
    database.create_all()
    yield database
    database.dispose()


@pytest.fixture
def db(database):
    session = database.session()
    yield session
    session.close()


@pytest.fixture
def app(settings, database):
    return create_app(settings, database)


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client


@pytest.fixture
def seeded(db):
    """Electronics (id=1) / TechCorp (id=1) plus a second pair and one product"""
    electronics = Category(name="Electronics")
    books = Category(name="Books")
    techcorp = Supplier(name="TechCorp", contact="techcorp@example.com")
    bookstore = Supplier(name="BookStore", contact=None)
    db.add_all([electronics, books, techcorp, bookstore])
    db.flush()

    phone = Product(
        name="Smartphone",
        price=Decimal("799.49"),
        category_id=electronics.id,
        supplier_id=techcorp.id
    )
    db.add(phone)
    db.commit()

    return {
        "electronics": electronics.id,
        "books": books.id,
        "techcorp": techcorp.id,
        "bookstore": bookstore.id,
        "phone": phone.id,
    }
