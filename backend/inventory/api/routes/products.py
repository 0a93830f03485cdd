"""
Product routes - list page, creation, edition and deletion
"""
from typing import Optional
from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session
from inventory.api.deps import get_db, templates
from inventory.api.utils import list_all, get_by_id, create_entity, update_by_id, delete_by_id
from inventory.models.category import Category
from inventory.models.product import Product
from inventory.models.supplier import Supplier
from inventory.schemas.category import CategoryView
from inventory.schemas.product import ProductCreate, ProductUpdate, ProductView
from inventory.schemas.supplier import SupplierView

router = APIRouter()


def _redirect_home() -> RedirectResponse:
    return RedirectResponse(url="/", status_code=status.HTTP_303_SEE_OTHER)


def _form_choices(db: Session) -> dict:
    """Categories and suppliers offered by the product forms"""
    return {
        "categories": [CategoryView.model_validate(c) for c in list_all(db, Category)],
        "suppliers": [SupplierView.model_validate(s) for s in list_all(db, Supplier)],
    }


@router.get("/")
def list_products(request: Request, db: Session = Depends(get_db)):
    """List every product with its category and supplier"""
    products = [
        ProductView.model_validate(p)
        for p in list_all(db, Product, with_relations=True)
    ]
    return templates.TemplateResponse(request, "index.html", {"products": products})


@router.get("/add-product")
def add_product_form(request: Request, db: Session = Depends(get_db)):
    """Product form with the available categories and suppliers"""
    return templates.TemplateResponse(request, "add_product.html", _form_choices(db))


@router.post("/add-product")
def create_product(
    name: Optional[str] = Form(None),
    price: Optional[str] = Form(None),
    categoryId: Optional[str] = Form(None),
    supplierId: Optional[str] = Form(None),
    db: Session = Depends(get_db)
):
    """Create a product; every field is required"""
    create_entity(db, Product, ProductCreate, {
        "name": name,
        "price": price,
        "category_id": categoryId,
        "supplier_id": supplierId,
    })
    return _redirect_home()


@router.get("/edit-product/{product_id}")
def edit_product_form(product_id: int, request: Request, db: Session = Depends(get_db)):
    """Pre-filled product form; an unknown id renders the form without a product"""
    product = get_by_id(db, Product, product_id, with_relations=True)
    context = _form_choices(db)
    context["product"] = ProductView.model_validate(product) if product is not None else None
    return templates.TemplateResponse(request, "edit_product.html", context)


@router.post("/edit-product/{product_id}")
def update_product(
    product_id: int,
    name: Optional[str] = Form(None),
    price: Optional[str] = Form(None),
    categoryId: Optional[str] = Form(None),
    supplierId: Optional[str] = Form(None),
    db: Session = Depends(get_db)
):
    """Update a product; fields left empty keep their current value"""
    update_by_id(db, Product, product_id, {
        "name": name,
        "price": price,
        "category_id": categoryId,
        "supplier_id": supplierId,
    }, schema_cls=ProductUpdate)
    return _redirect_home()


@router.post("/delete-product/{product_id}")
def delete_product(product_id: int, db: Session = Depends(get_db)):
    """Delete a product; deleting an unknown id is a no-op"""
    delete_by_id(db, Product, product_id)
    return _redirect_home()
