from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Union


class NameSearchResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    phone_number: str = Field(alias="phoneNumber")
    spam_likelihood: int = Field(alias="spamLikelihood")
    registered: bool


class PhoneSearchUser(BaseModel):
    """号码归属的注册用户"""
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    name: str
    phone_number: str = Field(alias="phoneNumber")
    email: str


class AssociatedUser(BaseModel):
    """保存该联系人的用户"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str


class PhoneSearchContact(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    phone_number: str = Field(alias="phoneNumber")
    associated_user: Optional[AssociatedUser] = Field(default=None, alias="associatedUser")


class NameSearchResponse(BaseModel):
    users: List[NameSearchResult]


class PhoneSearchResponse(BaseModel):
    users: List[Union[PhoneSearchUser, PhoneSearchContact]]
