"""
User model for local authentication.
"""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserStatus(str, Enum):
    """User account status."""
    ACTIVE = "active"
    DISABLED = "disabled"


class User(BaseModel):
    """
    User document model for the users collection.
    """
    model_config = ConfigDict(populate_by_name=True, use_enum_values=True, extra="ignore")

    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")
    email: EmailStr = Field(..., description="Unique, lowercased email address")
    hashed_password: str = Field(..., description="Bcrypt hashed password")
    status: UserStatus = Field(default=UserStatus.ACTIVE, description="Account status")
