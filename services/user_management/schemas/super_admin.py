from pydantic import BaseModel, EmailStr, Field


class SuperAdminCreate(BaseModel):
    name: str
    email: EmailStr
    password: str = Field(min_length=6)


class SuperAdminStatus(BaseModel):
    hasSuperAdmin: bool
