# doctor_profiles/schemas/shared.py
from typing import Generic, Optional, TypeVar
from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    """Uniform response wrapper: ``{success, data?, message?, error?}``."""
    success: bool = True
    message: Optional[str] = None
    data: Optional[T] = None
    error: Optional[str] = None


class UserRef(BaseModel):
    """A user reference expanded to the account email."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    email: str
