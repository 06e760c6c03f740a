"""模型基类模块

包含模型的混入类和主键生成
"""
import uuid

from sqlalchemy import Column, DateTime, String
from sqlalchemy.sql import func


def generate_id() -> str:
    """生成随机主键（uuid4 字符串），由服务端在创建时分配"""
    return str(uuid.uuid4())


class IdMixin:
    """主键混入类"""

    id = Column(String(36), primary_key=True, index=True, default=generate_id, comment='主键ID，uuid4')


class TimestampMixin:
    """时间戳混入类"""

    created_at = Column(DateTime, default=func.now(), comment='创建时间')
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now(), comment='更新时间')


class BaseModelMixin(IdMixin, TimestampMixin):
    """基础模型混入类，包含主键和时间戳"""
    pass
