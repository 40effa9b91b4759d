from typing import Optional

from app.db.models.store import Store
from app.errors import Forbidden


def assert_owner(store: Optional[Store], caller_id: int, message: str = None) -> Store:
    """Allow only the owner of ``store`` through; a missing store is treated the same."""
    if store is None or store.user_id != caller_id:
        raise Forbidden(message)
    return store
