from pydantic import BaseModel, ConfigDict, EmailStr, Field
from typing import List, Optional


class UserCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    phone_number: str = Field(alias="phoneNumber", min_length=1, max_length=20)
    email: EmailStr
    password: str = Field(min_length=1, max_length=72)
    country_code: Optional[str] = Field(default=None, alias="countryCode", min_length=2, max_length=2)
    auto_generated_contacts: bool = Field(default=False, alias="autoGeneratedContacts")


class UserLogin(BaseModel):
    phone_number: str = Field(alias="phoneNumber", min_length=1)
    password: str = Field(min_length=1)


class UserProfile(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    name: str
    phone_number: str = Field(alias="phoneNumber")
    email: str


class TokenResponse(BaseModel):
    token: str


class UserListResponse(BaseModel):
    users: List[UserProfile]
