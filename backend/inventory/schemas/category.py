from pydantic import BaseModel, Field


class CategoryBase(BaseModel):
    """Base schema for Category"""
    name: str = Field(..., min_length=1, description="Category name")


class CategoryCreate(CategoryBase):
    """Schema for category creation"""
    pass


class CategoryView(CategoryBase):
    """Category as rendered in pages"""
    id: int

    class Config:
        from_attributes = True
