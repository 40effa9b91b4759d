import logging
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from app import config
from app.auth.passwords import hash_password, verify_password
from app.auth.tokens import create_token
from app.database import get_db
from app.db.crud import user as user_crud
from app.db.schemas.user import UserCreate, UserLogin, UserResponse, TokenResponse
from app.errors import Conflict, DuplicateRecordError, InternalError, ValidationError

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/auth",
    tags=["auth"]
)

@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register(user: UserCreate, db: Session = Depends(get_db)):
    """Register a new user"""
    try:
        db_user = user_crud.create_user(db, user.email, hash_password(user.password))
    except DuplicateRecordError:
        raise Conflict("Email is already in use.")
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to register user")
        raise InternalError("Could not register the user.")
    logger.info(f"Registered user {db_user.id}")
    return db_user

@router.post("/login", response_model=TokenResponse)
def login(credentials: UserLogin, db: Session = Depends(get_db)):
    """Exchange email and password for a bearer token"""
    db_user = user_crud.get_user_by_email(db, credentials.email)
    if not db_user or not verify_password(credentials.password, db_user.password_hash):
        raise ValidationError("Invalid credentials.")
    access_token = create_token(db_user.id, config.JWT_SECRET, config.TOKEN_EXPIRY_HOURS)
    return TokenResponse(access_token=access_token)
