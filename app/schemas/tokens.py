# app/schemas/tokens.py
from app.schemas.common import CamelModel
from app.schemas.user import UserOut


class AuthData(CamelModel):
    user: UserOut
    token: str
