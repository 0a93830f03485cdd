"""
Category routes
"""
from typing import Optional
from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session
from inventory.api.deps import get_db, templates
from inventory.api.utils import create_entity
from inventory.models.category import Category
from inventory.schemas.category import CategoryCreate

router = APIRouter()


@router.get("/add-category")
def add_category_form(request: Request):
    """Empty category form"""
    return templates.TemplateResponse(request, "add_category.html")


@router.post("/add-category")
def create_category(
    name: Optional[str] = Form(None),
    db: Session = Depends(get_db)
):
    """Create a category; a submission without a name is ignored"""
    if name:
        create_entity(db, Category, CategoryCreate, {"name": name})
    return RedirectResponse(url="/", status_code=status.HTTP_303_SEE_OTHER)
