from pydantic import BaseModel, Field, ConfigDict
from pydantic.alias_generators import to_camel
from typing import List, Optional
from datetime import datetime
from app.db.models.store import StoreStatus
from .product import Product

camel_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

class StoreCreate(BaseModel):
    name: str = Field(..., min_length=1, description="Display name of the store")

class MaintenanceUpdate(BaseModel):
    is_maintenance_mode: bool

    model_config = camel_config

class TemplateUpdate(BaseModel):
    template: Optional[str] = None
    hero_title: Optional[str] = None
    hero_description: Optional[str] = None
    primary_color: Optional[str] = None

    model_config = camel_config

class StoreInDB(BaseModel):
    id: int
    name: str
    slug: str
    status: StoreStatus
    is_maintenance_mode: bool
    template: Optional[str] = None
    hero_title: Optional[str] = None
    hero_description: Optional[str] = None
    primary_color: Optional[str] = None
    user_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

class Store(StoreInDB):
    products: List[Product] = []
