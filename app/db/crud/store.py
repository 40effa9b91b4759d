import logging
from sqlalchemy.orm import Session, selectinload
from sqlalchemy.exc import IntegrityError
from typing import Optional
from app.db.models.store import Store, StoreStatus
from app.db.schemas.store import TemplateUpdate
from app.errors import DuplicateRecordError
from app.utils.slug import unique_slug

logger = logging.getLogger(__name__)

def get_store(db: Session, store_id: int) -> Optional[Store]:
    return db.query(Store).filter(Store.id == store_id).first()

def get_store_for_user(db: Session, user_id: int) -> Optional[Store]:
    return (
        db.query(Store)
        .options(selectinload(Store.products))
        .filter(Store.user_id == user_id)
        .first()
    )

def slug_exists(db: Session, slug: str) -> bool:
    return db.query(Store.id).filter(Store.slug == slug).first() is not None

def get_published_store(db: Session, slug: str) -> Optional[Store]:
    return (
        db.query(Store)
        .options(selectinload(Store.products))
        .filter(Store.slug == slug, Store.status == StoreStatus.BUILT)
        .first()
    )

def create_store(db: Session, name: str, user_id: int) -> Store:
    """Create the user's store under a free slug.

    Raises DuplicateRecordError when the user already owns a store, or when
    a concurrent request claimed the same slug between check and insert.
    """
    slug = unique_slug(name, lambda candidate: slug_exists(db, candidate))
    db_store = Store(name=name, slug=slug, user_id=user_id)
    db.add(db_store)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"Integrity error creating store for user {user_id}: {e.orig}")
        raise DuplicateRecordError(f"Store for user {user_id} or slug '{slug}' already exists") from e
    db.refresh(db_store)
    return db_store

def publish_store(db: Session, user_id: int) -> Optional[Store]:
    db_store = get_store_for_user(db, user_id)
    if db_store:
        db_store.status = StoreStatus.BUILT
        db.commit()
        db.refresh(db_store)
    return db_store

def set_maintenance_mode(db: Session, user_id: int, is_maintenance_mode: bool) -> Optional[Store]:
    db_store = get_store_for_user(db, user_id)
    if db_store:
        db_store.is_maintenance_mode = is_maintenance_mode
        db.commit()
        db.refresh(db_store)
    return db_store

def update_template(db: Session, user_id: int, template: TemplateUpdate) -> Optional[Store]:
    db_store = get_store_for_user(db, user_id)
    if not db_store:
        return None

    update_data = template.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(db_store, field, value)

    db.commit()
    db.refresh(db_store)
    return db_store
