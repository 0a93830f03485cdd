"""
System models

Product -> Category and Product -> Supplier are many-to-one.
"""

from inventory.models.base import Base, TimestampMixin
from inventory.models.category import Category
from inventory.models.supplier import Supplier
from inventory.models.product import Product

__all__ = [
    "Base",
    "TimestampMixin",
    "Category",
    "Supplier",
    "Product",
]
