# /app/services/user_service.py

import uuid
from typing import Optional

from app.core import security
from app.core.exceptions import InvalidInputError
from app.db.models.user_models import User
from app.models.user_model import UserCreate
from .database_service import DatabaseService


def create_user(db: DatabaseService, user: UserCreate) -> User:
    """Registers a new account. Raises ValueError if the email is taken."""
    email = user.email.strip().lower()
    if db.get_user_by_email(email):
        raise InvalidInputError("User already exists")

    return db.add_user({
        "id": f"usr_{uuid.uuid4().hex[:16]}",
        "name": user.name.strip(),
        "email": email,
        "password": security.hash_password(user.password),
    })


def authenticate_user(db: DatabaseService, email: str, password: str) -> Optional[User]:
    user = db.get_user_by_email((email or "").strip().lower())
    if not user:
        return None
    if not security.verify_password(password, user.password):
        return None
    return user
