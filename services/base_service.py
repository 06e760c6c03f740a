"""服务基类模块

各资源服务共用的查询与提交逻辑
"""
import logging
from typing import Optional, Type, TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from models import User
from utils.exceptions import DatabaseException, ResourceConflictException, ResourceNotFoundException

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")


class BaseService:
    """服务基类"""

    def __init__(self, db: Session):
        self.db = db

    def _get_or_404(self, model: Type[ModelT], object_id: str, message: str) -> ModelT:
        """按主键查询，不存在时抛出 ResourceNotFoundException"""
        instance = self.db.get(model, object_id)
        if instance is None:
            raise ResourceNotFoundException(message)
        return instance

    def _ensure_user_exists(self, user_id: Optional[str]) -> None:
        """检查负责人等用户引用是否存在"""
        if user_id and self.db.get(User, user_id) is None:
            raise ResourceNotFoundException(f"用户 {user_id} 不存在")

    def _commit(self, conflict_message: str = "资源冲突") -> None:
        """提交事务：唯一性冲突转换为 ResourceConflictException，其余数据库错误转换为 DatabaseException"""
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(f"数据完整性冲突: {e.orig}")
            raise ResourceConflictException(conflict_message) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"提交事务失败: {e}")
            raise DatabaseException() from e
