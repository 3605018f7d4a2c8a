# app/utils/security.py
# Password hashing and JWT issuance/verification
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

import bcrypt
from jose import JWTError, jwt

from app.config.settings import settings, ACCESS_TOKEN_EXPIRE_DAYS, BCRYPT_ROUNDS
from app.utils.errors import InvalidToken

REQUIRED_CLAIMS = ("id", "email", "role")


def hash_password(password: str) -> str:
    """Hash a password with a fresh bcrypt salt"""
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a password against a stored bcrypt hash"""
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        # Stored hash is not a bcrypt hash
        return False


def create_access_token(data: Dict[str, Any], expires_delta: timedelta = None) -> str:
    """Sign the {id, email, role} claims into a bearer token"""
    missing = [claim for claim in REQUIRED_CLAIMS if data.get(claim) is None]
    if missing:
        raise ValueError(f"Token claims missing: {', '.join(missing)}")

    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(days=ACCESS_TOKEN_EXPIRE_DAYS))
    to_encode = {
        "sub": str(data["id"]),
        "id": data["id"],
        "email": data["email"],
        "role": data["role"],
        "exp": expire,
    }
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> Dict[str, Any]:
    """Verify signature and expiry, returning the claims"""
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError:
        raise InvalidToken()

    if any(payload.get(claim) is None for claim in REQUIRED_CLAIMS):
        raise InvalidToken()
    return payload
