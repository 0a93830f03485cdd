from inventory.schemas.category import CategoryCreate, CategoryView
from inventory.schemas.supplier import SupplierCreate, SupplierView
from inventory.schemas.product import ProductCreate, ProductUpdate, ProductView

__all__ = [
    "CategoryCreate",
    "CategoryView",
    "SupplierCreate",
    "SupplierView",
    "ProductCreate",
    "ProductUpdate",
    "ProductView",
]
