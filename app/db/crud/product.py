from sqlalchemy.orm import Session, joinedload
from typing import Optional
from app.db.models.product import Product
from app.db.schemas.product import ProductCreate

def get_product(db: Session, product_id: int) -> Optional[Product]:
    return (
        db.query(Product)
        .options(joinedload(Product.store))
        .filter(Product.id == product_id)
        .first()
    )

def create_product(db: Session, product: ProductCreate) -> Product:
    db_product = Product(**product.model_dump())
    db.add(db_product)
    db.commit()
    db.refresh(db_product)
    return db_product

def delete_product(db: Session, db_product: Product) -> None:
    db.delete(db_product)
    db.commit()
