from pydantic import BaseModel, Field, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Optional
from datetime import datetime

class ProductBase(BaseModel):
    name: str = Field(..., min_length=1, description="Product name")
    price: float = Field(..., ge=0, description="Unit price")
    image_url: Optional[str] = Field(None, description="Public image URL")

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

class ProductCreate(ProductBase):
    store_id: int = Field(..., description="ID of the store this product belongs to")

class Product(ProductBase):
    id: int
    store_id: int
    created_at: Optional[datetime] = None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
