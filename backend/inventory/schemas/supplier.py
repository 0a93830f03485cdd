from pydantic import BaseModel, Field
from typing import Optional


class SupplierBase(BaseModel):
    """Base schema for Supplier"""
    name: str = Field(..., min_length=1, description="Supplier name")
    contact: Optional[str] = Field(None, description="Email, phone or contact person")


class SupplierCreate(SupplierBase):
    """Schema for supplier creation"""
    pass


class SupplierView(SupplierBase):
    """Supplier as rendered in pages"""
    id: int

    class Config:
        from_attributes = True
