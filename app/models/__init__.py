"""
数据模型模块
"""
from .user import User
from .contact import Contact
from .spam import Spam

__all__ = [
    "User",
    "Contact",
    "Spam",
]
