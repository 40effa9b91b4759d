import os
import logging

logger = logging.getLogger(__name__)

# Loaded once at process start; treat as read-only afterwards.
ENV = os.getenv("ENV", "production")
JWT_SECRET = os.getenv("JWT_SECRET", "")
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./storefront.db")
CLIENT_ORIGIN = os.getenv("CLIENT_ORIGIN", "http://localhost:3000")
TOKEN_EXPIRY_HOURS = int(os.getenv("TOKEN_EXPIRY_HOURS", "24"))
BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "10"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

if not JWT_SECRET:
    logger.warning("JWT_SECRET is not set; issued tokens will be insecure")
