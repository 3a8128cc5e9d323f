from pydantic import BaseModel, EmailStr
from typing import Optional
from datetime import date, datetime
from .common import ORMModel

class UserRequest(BaseModel):
    first_name: Optional[str] = None
    middle_name: Optional[str] = None
    surname: Optional[str] = None
    dob: Optional[date] = None  # YYYY-MM-DD
    email: EmailStr
    password: Optional[str] = None

class UserResponse(ORMModel):
    id: int
    first_name: Optional[str] = None
    middle_name: Optional[str] = None
    surname: Optional[str] = None
    dob: Optional[date] = None
    email: str
    created_at: datetime
    updated_at: datetime
