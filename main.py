import logging
from contextlib import asynccontextmanager

import uvicorn

from config.app_config import configure_routes, create_app
from config.exception_handlers import configure_exception_handlers
from config.middleware import configure_middleware
from config.settings import settings
from models.database import Base, engine
from utils.init_default_users import init_default_admin
from utils.logging_middleware import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    """启动时初始化日志、数据库表结构和默认管理员"""
    setup_logging(
        settings.LOG_LEVEL,
        log_file=settings.LOG_FILE,
        max_bytes=settings.LOG_MAX_SIZE,
        backup_count=settings.LOG_BACKUP_COUNT
    )

    logger.info("正在检查数据库表结构...")
    Base.metadata.create_all(bind=engine)

    if init_default_admin():
        logger.info("默认管理员检查完成")

    logger.info(f"{settings.APP_NAME} v{settings.VERSION} 启动完成 (环境: {settings.ENVIRONMENT})")
    yield
    logger.info("服务已停止")


# 创建FastAPI应用
app = create_app(lifespan=lifespan)

# 配置中间件
configure_middleware(app)

# 配置异常处理器
configure_exception_handlers(app)

# 配置路由
configure_routes(app)


if __name__ == "__main__":
    uvicorn.run(
        app,
        host=settings.SERVER_HOST,
        port=settings.SERVER_PORT,
        log_level=settings.LOG_LEVEL.lower()
    )
