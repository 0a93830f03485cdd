"""
Supplier routes
"""
from typing import Optional
from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session
from inventory.api.deps import get_db, templates
from inventory.api.utils import create_entity
from inventory.models.supplier import Supplier
from inventory.schemas.supplier import SupplierCreate

router = APIRouter()


@router.get("/add-supplier")
def add_supplier_form(request: Request):
    """Empty supplier form"""
    return templates.TemplateResponse(request, "add_supplier.html")


@router.post("/add-supplier")
def create_supplier(
    name: Optional[str] = Form(None),
    contact: Optional[str] = Form(None),
    db: Session = Depends(get_db)
):
    """Create a supplier; a submission without a name is ignored"""
    if name:
        create_entity(db, Supplier, SupplierCreate, {"name": name, "contact": contact})
    return RedirectResponse(url="/", status_code=status.HTTP_303_SEE_OTHER)
