"""分页工具模块

提供分页参数解析和数据库查询分页功能
"""

from typing import Any, List, Optional

from fastapi import Query as QueryParam
from sqlalchemy.orm import Query

from config.settings import settings

# 数据库 OFFSET 为64位有符号整数
MAX_OFFSET = 2 ** 63 - 1


def _parse_positive_int(value: Optional[str], default: int) -> int:
    """解析正整数，无法解析或小于1时回退到默认值"""
    try:
        parsed = int(value) if value is not None else default
    except (TypeError, ValueError):
        return default
    return parsed if parsed >= 1 else default


class Pagination:
    """分页参数依赖

    page 默认1，per_page 默认10；非法值（非数字、小于1）回退到默认值，
    per_page 超过 MAX_PAGE_SIZE 时截断
    """

    def __init__(
        self,
        page: Optional[str] = QueryParam(None, description="页码，从1开始"),
        per_page: Optional[str] = QueryParam(None, description="每页数量"),
    ):
        self.page = _parse_positive_int(page, settings.DEFAULT_PAGE)
        self.per_page = min(
            _parse_positive_int(per_page, settings.DEFAULT_PAGE_SIZE),
            settings.MAX_PAGE_SIZE
        )

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.per_page

    def __repr__(self) -> str:
        return f"Pagination(page={self.page}, per_page={self.per_page})"


def paginate_query(query: Query, pagination: Pagination) -> List[Any]:
    """
    对SQLAlchemy查询进行分页处理

    Args:
        query: SQLAlchemy查询对象（调用方负责排序）
        pagination: 分页参数

    Returns:
        当前页数据列表
    """
    if pagination.offset > MAX_OFFSET:
        return []
    return query.offset(pagination.offset).limit(pagination.per_page).all()
