from sqlalchemy import Column, Integer, Text
from sqlalchemy.orm import relationship
from inventory.models.base import Base, TimestampMixin


class Supplier(Base, TimestampMixin):
    """
    Suppliers of products

    contact is free text: an email, a phone number or a person's name.
    """
    __tablename__ = "suppliers"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(Text, nullable=False)
    contact = Column(Text, nullable=True)

    # Relationships
    products = relationship("Product", back_populates="supplier")

    def __repr__(self):
        return f"<Supplier {self.name}>"
