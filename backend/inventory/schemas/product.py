from pydantic import BaseModel, Field
from typing import Optional
from decimal import Decimal
from inventory.schemas.category import CategoryView
from inventory.schemas.supplier import SupplierView


class ProductBase(BaseModel):
    """Base schema for Product"""
    name: str = Field(..., min_length=1, description="Product name")
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2, description="Unit price")
    category_id: int = Field(..., description="Category ID")
    supplier_id: int = Field(..., description="Supplier ID")


class ProductCreate(ProductBase):
    """Schema for product creation"""
    pass


class ProductUpdate(BaseModel):
    """Schema for product update (every field optional, unset fields are kept)"""
    name: Optional[str] = Field(None, min_length=1)
    price: Optional[Decimal] = Field(None, ge=0, max_digits=10, decimal_places=2)
    category_id: Optional[int] = None
    supplier_id: Optional[int] = None


class ProductView(BaseModel):
    """
    Product together with its populated category and supplier

    Either side is None when the reference is unset.
    """
    id: int
    name: str
    price: Decimal
    category_id: Optional[int] = None
    supplier_id: Optional[int] = None
    category: Optional[CategoryView] = None
    supplier: Optional[SupplierView] = None

    class Config:
        from_attributes = True
