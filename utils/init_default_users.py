"""
默认管理员初始化模块
在系统启动时按配置创建默认管理员账户
"""
import logging

from config.settings import settings
from models.database import SessionLocal
from services.user_service import UserService

logger = logging.getLogger(__name__)


def init_default_admin() -> bool:
    """
    初始化默认管理员

    仅在 AUTO_CREATE_ADMIN 开启且配置了 ADMIN_PASSWORD 时执行

    Returns:
        bool: 是否执行了初始化
    """
    if not settings.AUTO_CREATE_ADMIN:
        return False

    if not settings.ADMIN_PASSWORD:
        logger.warning("已开启 AUTO_CREATE_ADMIN 但未配置 ADMIN_PASSWORD，跳过默认管理员创建")
        return False

    db = SessionLocal()
    try:
        UserService(db).ensure_default_admin(settings.ADMIN_USERNAME, settings.ADMIN_PASSWORD)
        return True
    finally:
        db.close()
