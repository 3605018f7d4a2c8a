import logging
from typing import Optional, Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models.user import User, UserRole
from app.schemas.user import UserRegister, UserLogin
from app.utils.auth import CurrentUser
from app.utils.errors import DuplicateEmail, Forbidden, InvalidCredentials, NotFound
from app.utils.security import hash_password, verify_password, create_access_token

logger = logging.getLogger(__name__)


def issue_token(user: User) -> str:
    return create_access_token({"id": user.id, "email": user.email, "role": user.role})


class AuthService:
    @staticmethod
    def resolve_role(requested: Optional[str], requested_by: Optional[CurrentUser]) -> str:
        """Self-registration always yields "user"; only an admin may create another admin"""
        if not requested or requested == UserRole.USER:
            return UserRole.USER
        if requested_by is not None and requested_by.is_admin:
            return requested
        raise Forbidden("Only an admin can create admin accounts")

    @staticmethod
    def register(
        db: Session, data: UserRegister, requested_by: Optional[CurrentUser] = None
    ) -> Tuple[User, str]:
        role = AuthService.resolve_role(data.role, requested_by)

        if db.query(User.id).filter(User.email == data.email).first():
            raise DuplicateEmail("User with this email already exists")

        user = User(
            email=data.email,
            hashed_password=hash_password(data.password),
            name=data.name,
            role=role,
        )
        db.add(user)
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            raise DuplicateEmail("User with this email already exists")
        db.refresh(user)

        logger.info(f"User {user.id} registered with role {user.role}")
        return user, issue_token(user)

    @staticmethod
    def login(db: Session, data: UserLogin) -> Tuple[User, str]:
        user = db.query(User).filter(User.email == data.email).first()
        # Same error for unknown email and wrong password
        if not user or not verify_password(data.password, user.hashed_password):
            logger.info("Failed login attempt")
            raise InvalidCredentials("Invalid email or password")

        return user, issue_token(user)

    @staticmethod
    def get_profile(db: Session, user_id: int) -> User:
        user = db.query(User).filter(User.id == user_id).first()
        if not user:
            raise NotFound("User not found")
        return user
