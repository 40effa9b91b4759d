from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.database import get_db
from app.db.crud import store as store_crud
from app.db.schemas.store import Store
from app.errors import NotFound

router = APIRouter(
    prefix="/api/tiendas",
    tags=["storefront"]
)

@router.get("/{slug}", response_model=Store)
def get_published_store(slug: str, db: Session = Depends(get_db)):
    """Public storefront: only published stores are visible"""
    db_store = store_crud.get_published_store(db, slug)
    if not db_store:
        raise NotFound("Store not found or not published.")
    return db_store
