# routers/store.py
import logging
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from app.auth.dependencies import get_current_user_id
from app.database import get_db
from app.db.crud import store as store_crud
from app.db.schemas.store import Store, StoreCreate, MaintenanceUpdate, TemplateUpdate
from app.errors import Conflict, DuplicateRecordError, InternalError, NotFound, ValidationError
from app.utils.slug import generate_slug

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/store",
    tags=["store"]
)

NO_STORE = "This user does not have a store yet."

@router.get("", response_model=Store)
def get_my_store(user_id: int = Depends(get_current_user_id), db: Session = Depends(get_db)):
    """Get the caller's store with its products"""
    db_store = store_crud.get_store_for_user(db, user_id)
    if not db_store:
        raise NotFound(NO_STORE)
    return db_store

@router.post("", response_model=Store, status_code=status.HTTP_201_CREATED)
def create_store(
    store: StoreCreate,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Create the caller's store under a unique slug"""
    if not generate_slug(store.name):
        raise ValidationError("Store name must contain at least one letter or digit.")
    try:
        db_store = store_crud.create_store(db, store.name, user_id)
    except DuplicateRecordError:
        raise Conflict("This user already has a store.")
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"Failed to create store for user {user_id}")
        raise InternalError("Could not create the store.")
    logger.info(f"Created store {db_store.id} with slug '{db_store.slug}' for user {user_id}")
    return db_store

@router.put("/publish", response_model=Store)
def publish_store(user_id: int = Depends(get_current_user_id), db: Session = Depends(get_db)):
    """Mark the caller's store as BUILT so it is publicly visible"""
    try:
        db_store = store_crud.publish_store(db, user_id)
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"Failed to publish store for user {user_id}")
        raise InternalError("Could not publish the store.")
    if not db_store:
        raise NotFound(NO_STORE)
    logger.info(f"Published store {db_store.id} ('{db_store.slug}')")
    return db_store

@router.put("/maintenance", response_model=Store)
def set_maintenance_mode(
    maintenance: MaintenanceUpdate,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Turn maintenance mode on or off for the caller's store"""
    try:
        db_store = store_crud.set_maintenance_mode(db, user_id, maintenance.is_maintenance_mode)
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"Failed to update maintenance mode for user {user_id}")
        raise InternalError("Could not update maintenance mode.")
    if not db_store:
        raise NotFound(NO_STORE)
    return db_store

@router.put("/template", response_model=Store)
def update_template(
    template: TemplateUpdate,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Save template and hero settings for the caller's store"""
    try:
        db_store = store_crud.update_template(db, user_id, template)
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"Failed to save template for user {user_id}")
        raise InternalError("Could not save the store configuration.")
    if not db_store:
        raise NotFound(NO_STORE)
    return db_store
