"""权限检查工具模块

所有资源共用的归属关系校验：管理员放行，其余用户必须与资源存在指定关系之一
"""
import enum
import logging
from typing import Iterable, Optional

from sqlalchemy import false, or_

from utils.auth import Identity
from utils.exceptions import PermissionException

logger = logging.getLogger(__name__)


class Relation(str, enum.Enum):
    """调用者与资源之间的关系"""
    OWNER = "owner"        # 项目所有者
    CREATOR = "creator"    # 任务/子任务创建人
    ASSIGNEE = "assignee"  # 任务/子任务负责人
    SELF = "self"          # 用户本人


def is_authorized(
    identity: Identity,
    allowed: Iterable[Relation],
    *,
    owner_id: Optional[str] = None,
    creator_id: Optional[str] = None,
    assignee_id: Optional[str] = None,
    subject_id: Optional[str] = None,
) -> bool:
    """检查调用者是否具备 allowed 中任一关系

    Args:
        identity: 调用者身份
        allowed: 允许的关系集合
        owner_id / creator_id / assignee_id / subject_id: 资源上对应字段的值

    Returns:
        bool: 是否有权限
    """
    if identity.is_admin:
        return True

    relation_ids = {
        Relation.OWNER: owner_id,
        Relation.CREATOR: creator_id,
        Relation.ASSIGNEE: assignee_id,
        Relation.SELF: subject_id,
    }
    for relation in allowed:
        related_id = relation_ids.get(relation)
        # 空值永远不匹配（未指派负责人时 assignee_id 为空）
        if related_id and related_id == identity.user_id:
            return True
    return False


def ensure_authorized(
    identity: Identity,
    allowed: Iterable[Relation],
    message: str = "权限不足",
    **resource_ids: Optional[str],
) -> None:
    """同 is_authorized，无权限时抛出 PermissionException"""
    allowed = tuple(allowed)
    if not is_authorized(identity, allowed, **resource_ids):
        logger.info(
            f"拒绝访问: 用户 {identity.user_id} ({identity.role}) 需要关系 "
            f"{[relation.value for relation in allowed]}"
        )
        raise PermissionException(message)


def visibility_filter(identity: Identity, *conditions):
    """列表查询的可见性条件：管理员不加限制，其余用户满足任一条件即可见"""
    if identity.is_admin:
        return None
    if not conditions:
        return false()
    return or_(*conditions)
