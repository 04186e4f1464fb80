from pydantic import BaseModel, ConfigDict, EmailStr, Field
from typing import Optional, Dict, Any

from services.user_management.models.users import UserRole


class UserProfile(BaseModel):
    """Profile as persisted under ``user_profile_{userId}``."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(alias="userId")
    email: str
    name: Optional[str] = None
    # Kept as a plain string so a corrupted record still loads and ranks 0
    role: Optional[str] = None
    created_at: str = Field(alias="createdAt")
    created_by: str = Field(alias="createdBy")
    updated_at: Optional[str] = Field(default=None, alias="updatedAt")
    hidden: Optional[bool] = None

    @property
    def is_protected(self) -> bool:
        return self.role == UserRole.SUPER_ADMIN.value or bool(self.hidden)

    def to_store(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class UserCreate(BaseModel):
    name: str
    email: EmailStr
    password: str = Field(min_length=6)
    role: UserRole


class UserUpdate(BaseModel):
    name: str
    role: UserRole


class UserOut(BaseModel):
    id: str
    email: str
    name: Optional[str] = None


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class LoginResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserOut
