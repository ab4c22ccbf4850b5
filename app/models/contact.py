"""
联系人模型
"""
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.db.database import Base


class Contact(Base):
    """用户通讯录条目 (同一号码可被不同用户以不同名字保存)"""
    __tablename__ = "contacts"
    __table_args__ = (
        UniqueConstraint("user_id", "phone_number", name="uq_contacts_user_phone"),
    )
    
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True, comment="所属用户ID")
    name = Column(String(100), nullable=False, index=True, comment="联系人名称(用户填写)")
    phone_number = Column(String(20), nullable=False, index=True, comment="联系人号码")
    created_at = Column(DateTime(timezone=True), server_default=func.now(), comment="创建时间")
    
    user = relationship("User", back_populates="contacts")
    
    def __repr__(self):
        return f"<Contact(id={self.id}, user_id={self.user_id}, phone={self.phone_number})>"
