from decimal import Decimal
import pytest
from sqlalchemy.exc import IntegrityError
from inventory.api.utils import (
    list_all, get_by_id, create_entity, update_by_id, delete_by_id, validate_fk
)
from inventory.core.errors import ValidationError
from inventory.models import Category, Product, Supplier
from inventory.schemas import CategoryCreate, SupplierCreate, ProductCreate, ProductUpdate


def test_list_all_without_relations_returns_rows_in_id_order(db, seeded):
    categories = list_all(db, Category)
    assert [c.name for c in categories] == ["Electronics", "Books"]


def test_list_all_with_relations_populates_category_and_supplier(db, seeded):
    products = list_all(db, Product, with_relations=True)
    db.expunge_all()  # related rows must already be loaded

    assert len(products) == 1
    assert products[0].category.name == "Electronics"
    assert products[0].supplier.name == "TechCorp"


def test_get_by_id_returns_none_for_unknown_id(db, seeded):
    assert get_by_id(db, Product, 9999) is None
    assert get_by_id(db, Product, 9999, with_relations=True) is None


def test_create_entity_assigns_fresh_ids(db, seeded):
    first = create_entity(db, Product, ProductCreate, {
        "name": "Laptop", "price": "1200.99",
        "category_id": seeded["electronics"], "supplier_id": seeded["techcorp"],
    })
    second = create_entity(db, Product, ProductCreate, {
        "name": "Novel", "price": "0",
        "category_id": seeded["books"], "supplier_id": seeded["bookstore"],
    })

    assert first.id != second.id
    assert first.id != seeded["phone"]
    assert first.price == Decimal("1200.99")
    assert second.price == Decimal("0")


def test_create_entity_lists_missing_fields(db, seeded):
    with pytest.raises(ValidationError) as excinfo:
        create_entity(db, Product, ProductCreate, {
            "name": "Laptop", "price": "", "category_id": None, "supplier_id": "1",
        })

    assert excinfo.value.is_missing_fields
    assert excinfo.value.missing == ["price", "category_id"]
    assert db.query(Product).count() == 1


@pytest.mark.parametrize("price", ["abc", "-1"])
def test_create_entity_rejects_malformed_price(db, seeded, price):
    with pytest.raises(ValidationError) as excinfo:
        create_entity(db, Product, ProductCreate, {
            "name": "Laptop", "price": price,
            "category_id": seeded["electronics"], "supplier_id": seeded["techcorp"],
        })

    assert not excinfo.value.is_missing_fields


def test_create_entity_rejects_missing_references(db, seeded):
    with pytest.raises(ValidationError, match="category_id"):
        create_entity(db, Product, ProductCreate, {
            "name": "Laptop", "price": "10",
            "category_id": 9999, "supplier_id": seeded["techcorp"],
        })
    assert db.query(Product).count() == 1


def test_create_entity_requires_category_name(db):
    with pytest.raises(ValidationError):
        create_entity(db, Category, CategoryCreate, {"name": ""})
    assert db.query(Category).count() == 0


def test_create_supplier_without_contact(db):
    supplier = create_entity(db, Supplier, SupplierCreate, {"name": "Acme", "contact": ""})
    assert supplier.id is not None
    assert supplier.contact is None


def test_validate_fk_returns_entity(db, seeded):
    assert validate_fk(db, Category, seeded["books"]).name == "Books"


def test_update_by_id_keeps_fields_that_were_not_submitted(db, seeded):
    updated = update_by_id(db, Product, seeded["phone"], {
        "name": "Phone X", "price": "", "category_id": None, "supplier_id": None,
    }, schema_cls=ProductUpdate)

    assert updated == 1
    db.expire_all()
    phone = get_by_id(db, Product, seeded["phone"])
    assert phone.name == "Phone X"
    assert phone.price == Decimal("799.49")
    assert phone.category_id == seeded["electronics"]
    assert phone.supplier_id == seeded["techcorp"]


def test_update_by_id_is_a_no_op_for_unknown_id(db, seeded):
    assert update_by_id(db, Product, 9999, {"name": "Ghost"}, schema_cls=ProductUpdate) == 0
    assert db.query(Product).filter(Product.name == "Ghost").count() == 0


def test_update_by_id_rejects_missing_reference(db, seeded):
    with pytest.raises(ValidationError):
        update_by_id(db, Product, seeded["phone"], {"supplier_id": "9999"}, schema_cls=ProductUpdate)


def test_delete_by_id_returns_deleted_count(db, seeded):
    assert delete_by_id(db, Product, seeded["phone"]) == 1
    assert delete_by_id(db, Product, seeded["phone"]) == 0
    assert db.query(Product).count() == 0


def test_store_refuses_to_delete_referenced_category(db, seeded):
    with pytest.raises(IntegrityError):
        delete_by_id(db, Category, seeded["electronics"])
    assert db.query(Category).count() == 2


def test_update_by_id_skips_validation_for_unknown_id(db, seeded):
    assert update_by_id(db, Product, 9999, {"price": "free"}, schema_cls=ProductUpdate) == 0


def test_create_entity_rejects_price_with_three_decimals(db, seeded):
    with pytest.raises(ValidationError) as excinfo:
        create_entity(db, Product, ProductCreate, {
            "name": "Laptop", "price": "10.555",
            "category_id": seeded["electronics"], "supplier_id": seeded["techcorp"],
        })

    assert not excinfo.value.is_missing_fields
    assert db.query(Product).count() == 1
