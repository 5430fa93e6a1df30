# /app/models/response_model.py

from typing import Generic, Optional, TypeVar
from pydantic import BaseModel

DataT = TypeVar("DataT")


class ApiResponse(BaseModel, Generic[DataT]):
    """
    The envelope every endpoint answers with, success or failure.
    Errors carry no `data`; see the exception handlers in `app.main`.
    """
    success: bool
    message: str
    data: Optional[DataT] = None
