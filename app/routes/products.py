import logging
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from app.auth.dependencies import get_current_user_id
from app.database import get_db
from app.db.crud import product as product_crud
from app.db.crud import store as store_crud
from app.db.schemas.product import Product, ProductCreate
from app.errors import InternalError, NotFound
from app.permissions import assert_owner

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/products",
    tags=["products"]
)

@router.post("", response_model=Product, status_code=status.HTTP_201_CREATED)
def create_product(
    product: ProductCreate,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Add a product to one of the caller's stores"""
    assert_owner(store_crud.get_store(db, product.store_id), user_id)
    try:
        return product_crud.create_product(db, product)
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"Failed to create product in store {product.store_id}")
        raise InternalError("Could not create the product.")

@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(
    product_id: str,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Delete a product owned by the caller"""
    db_product = None
    # Any id that cannot name a row is simply unknown.
    if product_id.isascii() and product_id.isdigit() and len(product_id) <= 18:
        db_product = product_crud.get_product(db, int(product_id))
    if not db_product:
        raise NotFound("Product not found.")
    assert_owner(db_product.store, user_id, "You do not have permission to delete this product.")
    try:
        product_crud.delete_product(db, db_product)
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"Failed to delete product {product_id}")
        raise InternalError("Could not delete the product.")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
