"""
数据库连接配置
"""
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool
from app.core.config import settings
from app.core.logger import get_logger

logger = get_logger(__name__)

# 针对不同数据库应用不同的连接池策略
if settings.DATABASE_URL.startswith("sqlite"):
    # SQLite (本地/测试): 单连接，内存库在整个进程内共享
    pool_kwargs = {"poolclass": StaticPool, "connect_args": {"check_same_thread": False}}
else:
    pool_kwargs = {"pool_pre_ping": True, "pool_size": 20, "max_overflow": 20}

engine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG,
    **pool_kwargs
)

AsyncSessionLocal = async_sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)
Base = declarative_base()


async def get_db():
    """获取数据库会话"""
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except SQLAlchemyError as e:
            logger.error(f"Database transaction failed, rolling back: {e}", exc_info=True)
            await session.rollback()
            raise
        except Exception:
            await session.rollback()
            raise


async def init_db():
    """初始化数据库"""
    # 注册所有模型到 Base.metadata
    import app.models  # noqa: F401

    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database schema initialized successfully")
    except Exception as e:
        logger.critical(f"Database initialization failed: {e}", exc_info=True)
        raise


async def close_db():
    """释放连接池"""
    await engine.dispose()
    logger.info("Database connections closed")
