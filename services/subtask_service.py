"""子任务服务模块"""
import logging
from typing import List, Optional

from models import Subtask, Task, TaskStatus
from schemas.subtask import SubtaskCreate, SubtaskUpdate
from services.base_service import BaseService
from utils.auth import Identity
from utils.pagination import Pagination, paginate_query
from utils.permissions import Relation, ensure_authorized, visibility_filter

logger = logging.getLogger(__name__)


class SubtaskService(BaseService):
    """子任务服务类"""

    def create_subtask(self, subtask_data: SubtaskCreate, identity: Identity) -> Subtask:
        self._get_or_404(Task, subtask_data.task_id, f"任务 {subtask_data.task_id} 不存在")
        self._ensure_user_exists(subtask_data.assignee_id)

        subtask = Subtask(
            title=subtask_data.title,
            status=TaskStatus.PENDING,
            task_id=subtask_data.task_id,
            assignee_id=subtask_data.assignee_id,
            creator_id=identity.user_id
        )
        self.db.add(subtask)
        self._commit()
        self.db.refresh(subtask)

        logger.info(f"子任务 {subtask.id} 已由 {identity.user_id} 创建")
        return subtask

    def list_subtasks(self,
                      pagination: Pagination,
                      identity: Identity,
                      status: Optional[TaskStatus] = None,
                      task_id: Optional[str] = None) -> List[Subtask]:
        query = self.db.query(Subtask)

        if status:
            query = query.filter(Subtask.status == status)
        if task_id:
            query = query.filter(Subtask.task_id == task_id)

        condition = visibility_filter(
            identity,
            Subtask.creator_id == identity.user_id,
            Subtask.assignee_id == identity.user_id
        )
        if condition is not None:
            query = query.filter(condition)

        query = query.order_by(Subtask.created_at, Subtask.id)
        return paginate_query(query, pagination)

    def update_subtask(self, subtask_id: str, subtask_data: SubtaskUpdate, identity: Identity) -> Subtask:
        subtask = self._get_or_404(Subtask, subtask_id, "子任务不存在")
        ensure_authorized(
            identity, {Relation.CREATOR, Relation.ASSIGNEE}, "无权限更新此子任务",
            creator_id=subtask.creator_id, assignee_id=subtask.assignee_id
        )

        update_data = subtask_data.model_dump(exclude_unset=True)
        if "assignee_id" in update_data:
            self._ensure_user_exists(update_data["assignee_id"])

        for field, value in update_data.items():
            setattr(subtask, field, value)

        self._commit()
        self.db.refresh(subtask)

        logger.info(f"子任务 {subtask.id} 已被 {identity.user_id} 更新")
        return subtask

    def delete_subtask(self, subtask_id: str, identity: Identity) -> None:
        subtask = self._get_or_404(Subtask, subtask_id, "子任务不存在")
        ensure_authorized(identity, {Relation.CREATOR}, "无权限删除此子任务", creator_id=subtask.creator_id)

        self.db.delete(subtask)
        self._commit()
        logger.info(f"子任务 {subtask_id} 已被 {identity.user_id} 删除")
