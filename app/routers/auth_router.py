# /app/routers/auth_router.py

"""
Authentication endpoints:
- User registration (`/register`)
- User login and token generation (`/token`)
- Retrieving the current user's profile (`/me`)

The router only translates between HTTP and `user_service`; password hashing
and token signing live in `app.core.security`.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm

from app.core import security
from app.core.deps import get_current_active_user
from app.core.exceptions import InvalidInputError
from app.db.models.user_models import User as UserModel
from app.models.response_model import ApiResponse
from app.models.user_model import User, UserCreate, Token
from app.services import user_service
from app.services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.post("/register", response_model=ApiResponse[User], status_code=status.HTTP_201_CREATED)
def register_user(
    user_in: UserCreate,
    db: DatabaseService = Depends(get_db_service),
):
    # user_service raises InvalidInputError when the email is already registered.
    try:
        new_user = user_service.create_user(db=db, user=user_in)
    except InvalidInputError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        print(f"ERROR at /api/auth/register: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error while registering user",
        )
    return ApiResponse(
        success=True,
        message="User registered successfully",
        data=User.model_validate(new_user),
    )


@router.post("/token", response_model=Token)
def login_for_access_token(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: DatabaseService = Depends(get_db_service),
):
    """
    OAuth2 password flow: the email goes in the `username` field. Answers
    with the bare token body OAuth2 clients expect, not the envelope.
    """
    user = user_service.authenticate_user(db, email=form_data.username, password=form_data.password)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    access_token = security.create_access_token(subject=user.id)
    return Token(access_token=access_token, token_type="bearer")


@router.get("/me", response_model=ApiResponse[User])
def read_current_user(current_user: UserModel = Depends(get_current_active_user)):
    return ApiResponse(success=True, message="User fetched successfully", data=User.model_validate(current_user))
