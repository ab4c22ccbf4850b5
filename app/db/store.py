"""
目录数据访问层

路由只通过 DirectoryStore 读写用户、联系人和举报计数。
唯一约束冲突统一转换为 DuplicateRecordError，业务层不依赖具体数据库的错误码。
"""
from typing import Iterable, List, Optional, Sequence

from fastapi import Depends
from sqlalchemy import select, func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.db.database import get_db
from app.models.user import User
from app.models.contact import Contact
from app.models.spam import Spam
from app.core.logger import get_logger

logger = get_logger(__name__)


class DuplicateRecordError(Exception):
    """违反唯一约束"""

    def __init__(self, field: Optional[str] = None):
        self.field = field
        super().__init__(f"Duplicate value for {field or 'unique field'}")


def _conflicting_field(error: IntegrityError, candidates: Iterable[str]) -> Optional[str]:
    """从驱动错误信息中推断冲突字段"""
    text = str(error.orig).lower()
    for name in candidates:
        if name in text:
            return name
    return None


class DirectoryStore:
    """用户/联系人/举报计数的存储接口"""

    def __init__(self, db: AsyncSession):
        self.db = db

    # ---------- 用户 ----------

    async def create_user(self, name: str, phone_number: str, email: str, password_hash: str) -> User:
        user = User(
            name=name,
            phone_number=phone_number,
            email=email,
            password_hash=password_hash,
        )
        self.db.add(user)
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            raise DuplicateRecordError(_conflicting_field(e, ("phone_number", "email"))) from e
        await self.db.refresh(user)
        return user

    async def get_user(self, user_id: int) -> Optional[User]:
        result = await self.db.execute(select(User).where(User.id == user_id))
        return result.scalar_one_or_none()

    async def list_users(self) -> Sequence[User]:
        result = await self.db.execute(select(User).order_by(User.id))
        return result.scalars().all()

    async def get_user_by_phone(self, phone_number: str) -> Optional[User]:
        result = await self.db.execute(select(User).where(User.phone_number == phone_number))
        return result.scalar_one_or_none()

    async def find_users_by_name(self, query: str, prefix: bool = True) -> Sequence[User]:
        """
        prefix=True: 名字以 query 开头
        prefix=False: 名字包含 query 但不以其开头
        """
        stmt = select(User).where(_name_filter(User.name, query, prefix)).order_by(User.id)
        result = await self.db.execute(stmt)
        return result.scalars().all()

    async def find_user_ids_by_name_prefix(self, prefix: str) -> List[int]:
        stmt = select(User.id).where(User.name.istartswith(prefix, autoescape=True)).order_by(User.id)
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def sample_users(self, limit: int, exclude_id: Optional[int] = None) -> Sequence[User]:
        """随机抽取已注册用户"""
        stmt = select(User).order_by(func.random()).limit(limit)
        if exclude_id is not None:
            stmt = stmt.where(User.id != exclude_id)
        result = await self.db.execute(stmt)
        return result.scalars().all()

    # ---------- 联系人 ----------

    async def get_contact(self, user_id: int, phone_number: str) -> Optional[Contact]:
        result = await self.db.execute(
            select(Contact).where(
                Contact.user_id == user_id,
                Contact.phone_number == phone_number,
            )
        )
        return result.scalar_one_or_none()

    async def create_contact(self, user_id: int, name: str, phone_number: str) -> Contact:
        contact = Contact(user_id=user_id, name=name, phone_number=phone_number)
        self.db.add(contact)
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            raise DuplicateRecordError("phone_number") from e
        await self.db.refresh(contact)
        return contact

    async def create_contacts(self, user_id: int, entries: Iterable[tuple]) -> int:
        """批量写入 (name, phone_number) 联系人，返回写入条数"""
        contacts = [Contact(user_id=user_id, name=name, phone_number=phone) for name, phone in entries]
        self.db.add_all(contacts)
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            raise DuplicateRecordError("phone_number") from e
        return len(contacts)

    async def list_contacts(self, user_id: int) -> Sequence[Contact]:
        result = await self.db.execute(
            select(Contact).where(Contact.user_id == user_id).order_by(Contact.id)
        )
        return result.scalars().all()

    async def find_contacts_by_name(self, query: str, prefix: bool = True) -> Sequence[Contact]:
        stmt = select(Contact).where(_name_filter(Contact.name, query, prefix)).order_by(Contact.id)
        result = await self.db.execute(stmt)
        return result.scalars().all()

    async def find_contacts_by_phone(self, phone_number: str) -> Sequence[Contact]:
        result = await self.db.execute(
            select(Contact)
            .options(selectinload(Contact.user))
            .where(Contact.phone_number == phone_number)
            .order_by(Contact.id)
        )
        return result.scalars().all()

    # ---------- 举报计数 ----------

    async def get_spam_count(self, phone_number: str) -> int:
        result = await self.db.execute(
            select(Spam.spam_count).where(Spam.phone_number == phone_number)
        )
        count = result.scalar_one_or_none()
        return count or 0

    async def increment_spam(self, phone_number: str) -> int:
        """举报计数 +1，号码首次被举报时创建记录"""
        for _ in range(2):
            result = await self.db.execute(select(Spam).where(Spam.phone_number == phone_number))
            spam = result.scalar_one_or_none()
            if spam is not None:
                spam.spam_count = Spam.spam_count + 1
                await self.db.commit()
                await self.db.refresh(spam)
                return spam.spam_count

            self.db.add(Spam(phone_number=phone_number, spam_count=1))
            try:
                await self.db.commit()
                return 1
            except IntegrityError:
                # 并发请求已创建该号码，改走累加分支
                await self.db.rollback()
        raise DuplicateRecordError("phone_number")


def _name_filter(column, query: str, prefix: bool):
    starts = column.istartswith(query, autoescape=True)
    if prefix:
        return starts
    return column.icontains(query, autoescape=True) & ~starts


async def get_store(db: AsyncSession = Depends(get_db)) -> DirectoryStore:
    """依赖注入: 每个请求一个绑定到会话的存储实例"""
    return DirectoryStore(db)
