"""
数据库模块
"""
from .database import Base, get_db, init_db, close_db, engine

__all__ = ["Base", "get_db", "init_db", "close_db", "engine"]
