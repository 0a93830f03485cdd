from sqlalchemy import Column, Integer, Text
from sqlalchemy.orm import relationship
from inventory.models.base import Base, TimestampMixin


class Category(Base, TimestampMixin):
    """
    Product categories

    Examples:
    - Electronics
    - Books
    """
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(Text, nullable=False)

    # Relationships
    products = relationship("Product", back_populates="category")

    def __repr__(self):
        return f"<Category {self.name}>"
