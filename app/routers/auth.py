from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas.common import ApiResponse
from app.schemas.tokens import AuthData
from app.schemas.user import UserRegister, UserLogin, UserOut
from app.services.auth_service import AuthService
from app.utils.auth import CurrentUser, get_current_user, get_optional_user
from app.utils.errors import unhandled

router = APIRouter()


@router.post("/register", response_model=ApiResponse[AuthData], status_code=status.HTTP_201_CREATED)
def register(
    user: UserRegister,
    db: Session = Depends(get_db),
    requested_by: Optional[CurrentUser] = Depends(get_optional_user),
):
    try:
        new_user, token = AuthService.register(db, user, requested_by)
        return ApiResponse(
            message="User registered successfully",
            data=AuthData(user=UserOut.model_validate(new_user), token=token),
        )
    except HTTPException:
        raise
    except Exception as e:
        raise unhandled(e, "registering user", db)


@router.post("/login", response_model=ApiResponse[AuthData])
def login(user: UserLogin, db: Session = Depends(get_db)):
    try:
        db_user, token = AuthService.login(db, user)
        return ApiResponse(
            message="Login successful",
            data=AuthData(user=UserOut.model_validate(db_user), token=token),
        )
    except HTTPException:
        raise
    except Exception as e:
        raise unhandled(e, "logging in", db)


@router.get("/profile", response_model=ApiResponse[UserOut])
def profile(
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user),
):
    try:
        user = AuthService.get_profile(db, current_user.id)
        return ApiResponse(data=UserOut.model_validate(user))
    except HTTPException:
        raise
    except Exception as e:
        raise unhandled(e, "loading profile", db)
