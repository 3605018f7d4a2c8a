from datetime import datetime
from typing import Literal, Optional

from pydantic import EmailStr, Field

from app.schemas.common import CamelModel, RequestModel


class UserRegister(RequestModel):
    email: EmailStr
    password: str = Field(min_length=1)
    name: str = Field(min_length=1)
    # "admin" is only honoured when the request is made by an admin
    role: Optional[Literal["admin", "user"]] = None


class UserLogin(RequestModel):
    # No format check: unknown addresses must fail like a wrong password
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class UserOut(CamelModel):
    id: int
    email: str
    name: str
    role: str
    created_at: datetime
    updated_at: datetime
