from sqlalchemy import Column, Integer, Text, Numeric, ForeignKey, Index
from sqlalchemy.orm import relationship
from inventory.models.base import Base, TimestampMixin


class Product(Base, TimestampMixin):
    """
    Products held in inventory

    Each product belongs to one category and is bought from one supplier.
    """
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)

    name = Column(Text, nullable=False)
    price = Column(Numeric(10, 2), nullable=False)

    # References (no ON DELETE action: referenced rows cannot be removed)
    category_id = Column(Integer, ForeignKey('categories.id'), nullable=True)
    supplier_id = Column(Integer, ForeignKey('suppliers.id'), nullable=True)

    # Relationships
    category = relationship("Category", back_populates="products")
    supplier = relationship("Supplier", back_populates="products")

    def __repr__(self):
        return f"<Product {self.id} - {self.name}>"

    __table_args__ = (
        Index('idx_products_category', 'category_id'),
        Index('idx_products_supplier', 'supplier_id'),
    )
