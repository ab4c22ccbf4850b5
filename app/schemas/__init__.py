"""
请求/响应数据模型
"""
from .user import UserCreate, UserLogin, UserProfile, UserListResponse, TokenResponse
from .contact import ContactCreate, ContactResponse, ContactEnvelope, ContactListResponse
from .search import (
    NameSearchResult,
    PhoneSearchUser,
    AssociatedUser,
    PhoneSearchContact,
    NameSearchResponse,
    PhoneSearchResponse,
)
from .spam import SpamReportRequest, SpamReportResponse

__all__ = [
    "UserCreate",
    "UserLogin",
    "UserProfile",
    "UserListResponse",
    "TokenResponse",
    "ContactCreate",
    "ContactResponse",
    "ContactEnvelope",
    "ContactListResponse",
    "NameSearchResult",
    "PhoneSearchUser",
    "AssociatedUser",
    "PhoneSearchContact",
    "NameSearchResponse",
    "PhoneSearchResponse",
    "SpamReportRequest",
    "SpamReportResponse",
]
