# /app/models/user_model.py

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class UserCreate(BaseModel):
    """Request body for POST /api/auth/register."""
    name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    password: str = Field(..., min_length=6, max_length=128)


class User(BaseModel):
    """Public view of a user. The password hash never leaves the service."""
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str
    name: str
    email: str
    createdAt: Optional[datetime] = Field(None, validation_alias="created_at")


class Token(BaseModel):
    access_token: str
    token_type: str
