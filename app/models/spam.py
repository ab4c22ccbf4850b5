"""
垃圾号码举报计数模型
"""
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from app.db.database import Base


class Spam(Base):
    """号码举报汇总表 (每个号码一条记录)"""
    __tablename__ = "spam"
    
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    phone_number = Column(String(20), unique=True, index=True, nullable=False, comment="电话号码")
    spam_count = Column(Integer, default=1, nullable=False, comment="被举报次数")
    created_at = Column(DateTime(timezone=True), server_default=func.now(), comment="创建时间")
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), comment="更新时间")
    
    def __repr__(self):
        return f"<Spam(phone={self.phone_number}, count={self.spam_count})>"
