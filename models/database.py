"""
数据库连接模块
提供引擎、会话工厂和请求级会话依赖
"""
from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from config.settings import settings

# 创建基础模型类
Base = declarative_base()


def _build_engine(database_url: str):
    """根据连接串创建引擎，SQLite 需要额外的连接参数"""
    if database_url.startswith("sqlite"):
        engine_kwargs = {"connect_args": {"check_same_thread": False}}
        # 内存数据库在所有连接间共享同一个连接
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            engine_kwargs["poolclass"] = StaticPool
        return create_engine(database_url, echo=settings.DATABASE_ECHO, **engine_kwargs)

    return create_engine(
        database_url,
        echo=settings.DATABASE_ECHO,
        pool_pre_ping=True
    )


engine = _build_engine(settings.database_url)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """数据库会话依赖注入：成功时提交，异常时回滚"""
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
