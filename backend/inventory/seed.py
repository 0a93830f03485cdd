"""
Demonstration data loaded at startup
"""
import logging
from decimal import Decimal
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from inventory.models.category import Category
from inventory.models.product import Product
from inventory.models.supplier import Supplier

logger = logging.getLogger(__name__)


def seed_demo_data(db: Session) -> bool:
    """
    Insert two categories, two suppliers and three products.

    Skipped when the store already has categories, so restarting the server
    does not duplicate the demo rows.

    Returns:
        True when the demo data was inserted
    """
    if db.query(Category).first() is not None:
        logger.info("Store already populated, skipping demo data")
        return False

    try:
        electronics = Category(name="Electronics")
        books = Category(name="Books")
        db.add_all([electronics, books])

        techcorp = Supplier(name="TechCorp", contact="techcorp@example.com")
        bookstore = Supplier(name="BookStore", contact="contact@bookstore.com")
        db.add_all([techcorp, bookstore])
        db.flush()  # To get the IDs

        db.add_all([
            Product(
                name="Laptop",
                price=Decimal("1200.99"),
                category_id=electronics.id,
                supplier_id=techcorp.id
            ),
            Product(
                name="Smartphone",
                price=Decimal("799.49"),
                category_id=electronics.id,
                supplier_id=techcorp.id
            ),
            Product(
                name="Programming Book",
                price=Decimal("29.99"),
                category_id=books.id,
                supplier_id=bookstore.id
            ),
        ])
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise

    logger.info(
        "Demo data created: %d categories, %d suppliers, %d products",
        db.query(Category).count(),
        db.query(Supplier).count(),
        db.query(Product).count(),
    )
    return True
