import bcrypt

from app import config

# bcrypt only looks at the first 72 bytes of a password.
MAX_PASSWORD_BYTES = 72


def _password_bytes(plaintext: str) -> bytes:
    return plaintext.encode("utf-8")[:MAX_PASSWORD_BYTES]


def hash_password(plaintext: str) -> str:
    """Hash a plaintext password with a fresh bcrypt salt."""
    salt = bcrypt.gensalt(rounds=config.BCRYPT_ROUNDS)
    return bcrypt.hashpw(_password_bytes(plaintext), salt).decode("utf-8")


def verify_password(plaintext: str, digest: str) -> bool:
    """Check a plaintext password against a stored bcrypt hash.

    A malformed digest raises ``ValueError``.
    """
    return bcrypt.checkpw(_password_bytes(plaintext), digest.encode("utf-8"))
