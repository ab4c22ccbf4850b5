"""
目录检索服务
功能：按姓名模糊检索 (前缀匹配优先)、按号码精确检索 (注册用户优先)
"""
from typing import List, Union

from app.db.store import DirectoryStore
from app.schemas.search import (
    NameSearchResult,
    PhoneSearchUser,
    PhoneSearchContact,
    AssociatedUser,
)
from app.core.logger import get_logger

logger = get_logger(__name__)


class DirectoryService:

    async def search_by_name(self, store: DirectoryStore, query: str) -> List[NameSearchResult]:
        """
        返回名字匹配 query 的注册用户与联系人。
        第一组为名字以 query 开头的记录，第二组为包含但不以其开头的记录，
        两组互不重叠，组内保持数据库顺序。
        """
        # 1. 前缀匹配组
        starts_users = await store.find_users_by_name(query, prefix=True)
        starts_contacts = await store.find_contacts_by_name(query, prefix=True)

        # 2. 仅子串匹配组
        contains_users = await store.find_users_by_name(query, prefix=False)
        contains_contacts = await store.find_contacts_by_name(query, prefix=False)

        ranked = [
            *((user, True) for user in starts_users),
            *((contact, False) for contact in starts_contacts),
            *((user, True) for user in contains_users),
            *((contact, False) for contact in contains_contacts),
        ]

        # 3. 逐条合并举报计数
        results = []
        for record, registered in ranked:
            spam_count = await store.get_spam_count(record.phone_number)
            results.append(NameSearchResult(
                id=record.id,
                name=record.name,
                phone_number=record.phone_number,
                spam_likelihood=spam_count,
                registered=registered,
            ))

        logger.info(f"Name search '{query}': {len(starts_users) + len(starts_contacts)} prefix, "
                    f"{len(contains_users) + len(contains_contacts)} substring matches")
        return results

    async def search_by_phone(
        self, store: DirectoryStore, phone_number: str
    ) -> List[Union[PhoneSearchUser, PhoneSearchContact]]:
        """
        号码属于注册用户时只返回该用户；
        否则返回所有保存了该号码的联系人，并附带保存者信息。
        """
        registered_user = await store.get_user_by_phone(phone_number)
        if registered_user is not None:
            return [PhoneSearchUser.model_validate(registered_user)]

        contacts = await store.find_contacts_by_phone(phone_number)
        return [
            PhoneSearchContact(
                name=contact.name,
                phone_number=contact.phone_number,
                associated_user=(
                    AssociatedUser.model_validate(contact.user) if contact.user is not None else None
                ),
            )
            for contact in contacts
        ]


# 全局单例
directory_service = DirectoryService()
