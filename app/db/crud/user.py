import logging
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from typing import Optional
from app.db.models.user import User
from app.errors import DuplicateRecordError

logger = logging.getLogger(__name__)

def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()

def create_user(db: Session, email: str, password_hash: str) -> User:
    db_user = User(email=email, password_hash=password_hash)
    db.add(db_user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"Integrity error creating user: {e.orig}")
        raise DuplicateRecordError(f"User with email {email} already exists") from e
    db.refresh(db_user)
    return db_user
