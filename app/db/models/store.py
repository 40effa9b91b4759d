# models/store.py
import enum
from sqlalchemy import Column, Integer, String, Boolean, DateTime, Enum, ForeignKey
from datetime import datetime
from sqlalchemy.orm import relationship
from app.database import Base


class StoreStatus(str, enum.Enum):
    DRAFT = "DRAFT"
    BUILT = "BUILT"


class Store(Base):
    __tablename__ = "stores"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    slug = Column(String, nullable=False, unique=True, index=True)
    status = Column(Enum(StoreStatus, name="store_status"), nullable=False, default=StoreStatus.DRAFT)
    is_maintenance_mode = Column(Boolean, nullable=False, default=False)
    # Appearance
    template = Column(String, nullable=True)
    hero_title = Column(String, nullable=True)
    hero_description = Column(String, nullable=True)
    primary_color = Column(String, nullable=True)
    # One store per user
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, unique=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    user = relationship("User", back_populates="store")
    products = relationship(
        "Product",
        back_populates="store",
        cascade="all, delete-orphan",
        order_by="Product.id",
    )

    def __repr__(self):
        return f"<Store(id={self.id}, slug='{self.slug}', status={self.status})>"
