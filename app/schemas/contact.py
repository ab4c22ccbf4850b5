from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class ContactCreate(BaseModel):
    user_id: int = Field(alias="userID")
    name: str = Field(min_length=1, max_length=100)
    phone_number: str = Field(alias="phoneNumber", min_length=1, max_length=20)
    country_code: Optional[str] = Field(default=None, alias="countryCode", min_length=2, max_length=2)


class ContactResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    user_id: int = Field(alias="userID")
    name: str
    phone_number: str = Field(alias="phoneNumber")


class ContactEnvelope(BaseModel):
    contact: ContactResponse


class ContactListResponse(BaseModel):
    contacts: List[ContactResponse]
