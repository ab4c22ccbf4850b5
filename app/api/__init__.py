"""
API路由模块
"""
from .users import router as users_router
from .search import router as search_router
from .contacts import router as contacts_router
from .spam import router as spam_router

__all__ = ["users_router", "search_router", "contacts_router", "spam_router"]
