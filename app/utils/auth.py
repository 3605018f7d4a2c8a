# app/utils/auth.py
from dataclasses import dataclass
from typing import Optional

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer

from app.models.user import UserRole
from app.utils.errors import Forbidden, InvalidToken
from app.utils.security import decode_access_token

# auto_error=False so a missing token gets the API's own 401 message
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login", auto_error=False)


@dataclass(frozen=True)
class CurrentUser:
    """Identity taken from the token claims of the current request"""

    id: int
    email: str
    role: str

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN


def _user_from_token(token: str) -> CurrentUser:
    payload = decode_access_token(token)
    try:
        return CurrentUser(id=int(payload["id"]), email=payload["email"], role=payload["role"])
    except (TypeError, ValueError):
        raise InvalidToken()


def get_current_user(token: Optional[str] = Depends(oauth2_scheme)) -> CurrentUser:
    # Role is trusted from the token; it is not re-read from the database
    if not token:
        raise InvalidToken("Authentication token required")
    return _user_from_token(token)


def get_optional_user(token: Optional[str] = Depends(oauth2_scheme)) -> Optional[CurrentUser]:
    """Caller identity when a valid token is sent; anonymous otherwise"""
    if not token:
        return None
    try:
        return _user_from_token(token)
    except InvalidToken:
        return None


def require_admin(current_user: CurrentUser = Depends(get_current_user)) -> CurrentUser:
    if not current_user.is_admin:
        raise Forbidden("Admin access required")
    return current_user
