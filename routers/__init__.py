"""路由模块

auth: 公开接口；projects / tasks / subtasks / users: 需要登录；users.admin_router: 仅限管理员
"""
from typing import Optional

from fastapi import Query

from models.enums import TaskStatus
from schemas.base import ErrorResponse
from utils.exceptions import ValidationException

# 受保护路由共用的错误响应文档
PROTECTED_RESPONSES = {
    400: {"model": ErrorResponse, "description": "请求参数错误"},
    401: {"model": ErrorResponse, "description": "未认证"},
    403: {"model": ErrorResponse, "description": "权限不足"},
    404: {"model": ErrorResponse, "description": "资源不存在"},
}


def status_filter(
    status: Optional[str] = Query(None, description="状态筛选，空值表示不筛选")
) -> Optional[TaskStatus]:
    """任务/子任务列表的状态筛选参数"""
    if not status:
        return None
    try:
        return TaskStatus(status)
    except ValueError as e:
        raise ValidationException(
            errors=[{"field": "status", "message": f"无效的状态: {status}"}]
        ) from e
