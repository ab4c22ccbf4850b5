"""
存储层测试：唯一约束转换与举报计数累加
"""
import asyncio

import pytest
from sqlalchemy import select
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

import app.models  # noqa: F401
from app.db.database import Base
from app.db.store import DirectoryStore, DuplicateRecordError
from app.models.spam import Spam


def run_with_store(scenario):
    """在独立的内存数据库上执行 scenario(store)"""
    async def _run():
        engine = create_async_engine(
            "sqlite+aiosqlite:///:memory:",
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        session_factory = async_sessionmaker(engine, expire_on_commit=False)
        try:
            async with session_factory() as session:
                return await scenario(DirectoryStore(session))
        finally:
            await engine.dispose()
    return asyncio.run(_run())


def test_create_contact_twice_raises_duplicate():
    async def scenario(store):
        user = await store.create_user("Ann", "+14155550100", "ann@example.com", "hash")
        await store.create_contact(user.id, "Bob", "+14155550101")
        with pytest.raises(DuplicateRecordError):
            await store.create_contact(user.id, "Robert", "+14155550101")
        return await store.list_contacts(user.id)

    contacts = run_with_store(scenario)
    assert [c.name for c in contacts] == ["Bob"]


def test_create_user_duplicate_phone_raises_duplicate():
    async def scenario(store):
        await store.create_user("Ann", "+14155550100", "ann@example.com", "hash")
        with pytest.raises(DuplicateRecordError):
            await store.create_user("Other", "+14155550100", "other@example.com", "hash")
        return await store.list_users()

    assert [u.name for u in run_with_store(scenario)] == ["Ann"]


def test_increment_spam_existing_row():
    async def scenario(store):
        store.db.add(Spam(phone_number="+14155550999", spam_count=1))
        await store.db.commit()
        return await store.increment_spam("+14155550999")

    assert run_with_store(scenario) == 2


def test_increment_spam_retries_after_insert_conflict():
    async def scenario(store):
        store.db.add(Spam(phone_number="+14155550999", spam_count=1))
        await store.db.commit()

        # 第一次查询模拟并发: 看不到已存在的记录，插入时触发唯一约束
        execute = store.db.execute
        calls = []

        async def stale_first_lookup(statement, *args, **kwargs):
            calls.append(statement)
            if len(calls) == 1:
                statement = select(Spam).where(Spam.phone_number == "+10000000000")
            return await execute(statement, *args, **kwargs)

        store.db.execute = stale_first_lookup
        count = await store.increment_spam("+14155550999")
        return count, len(calls)

    count, lookups = run_with_store(scenario)
    assert count == 2
    assert lookups == 2
