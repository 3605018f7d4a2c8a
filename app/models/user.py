# app/models/user.py
from datetime import datetime

from sqlalchemy import Column, Integer, String, DateTime
from app.database import Base


class UserRole:
    ADMIN = "admin"
    USER = "user"

    ALL = (ADMIN, USER)


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    name = Column(String, nullable=False)
    role = Column(String, default=UserRole.USER, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
