"""任务服务模块

包含任务相关的业务逻辑处理
"""
import logging
from typing import List, Optional

from models import Project, Task, TaskStatus
from schemas.task import TaskCreate, TaskUpdate
from services.base_service import BaseService
from utils.auth import Identity
from utils.pagination import Pagination, paginate_query
from utils.permissions import Relation, ensure_authorized, visibility_filter

logger = logging.getLogger(__name__)


class TaskService(BaseService):
    """任务服务类"""

    def create_task(self, task_data: TaskCreate, identity: Identity) -> Task:
        """创建新任务，状态固定为 pending"""
        # 检查项目是否存在
        self._get_or_404(Project, task_data.project_id, f"项目 {task_data.project_id} 不存在")
        # 检查负责人是否存在
        self._ensure_user_exists(task_data.assignee_id)

        task = Task(
            title=task_data.title,
            description=task_data.description,
            status=TaskStatus.PENDING,
            project_id=task_data.project_id,
            assignee_id=task_data.assignee_id,
            creator_id=identity.user_id
        )
        self.db.add(task)
        self._commit()
        self.db.refresh(task)

        logger.info(f"任务 {task.id} 已由 {identity.user_id} 创建")
        return task

    def list_tasks(self,
                   pagination: Pagination,
                   identity: Identity,
                   status: Optional[TaskStatus] = None,
                   project_id: Optional[str] = None) -> List[Task]:
        """获取任务列表：非管理员只能看到自己创建或负责的任务"""
        query = self.db.query(Task)

        # 应用筛选条件
        if status:
            query = query.filter(Task.status == status)
        if project_id:
            query = query.filter(Task.project_id == project_id)

        # 权限过滤
        condition = visibility_filter(
            identity,
            Task.creator_id == identity.user_id,
            Task.assignee_id == identity.user_id
        )
        if condition is not None:
            query = query.filter(condition)

        query = query.order_by(Task.created_at, Task.id)
        return paginate_query(query, pagination)

    def update_task(self, task_id: str, task_data: TaskUpdate, identity: Identity) -> Task:
        """更新任务：创建人、负责人或管理员"""
        task = self._get_or_404(Task, task_id, "任务不存在")
        ensure_authorized(
            identity, {Relation.CREATOR, Relation.ASSIGNEE}, "无权限更新此任务",
            creator_id=task.creator_id, assignee_id=task.assignee_id
        )

        update_data = task_data.model_dump(exclude_unset=True)
        if "assignee_id" in update_data:
            self._ensure_user_exists(update_data["assignee_id"])

        for field, value in update_data.items():
            setattr(task, field, value)

        self._commit()
        self.db.refresh(task)

        logger.info(f"任务 {task.id} 已被 {identity.user_id} 更新")
        return task

    def delete_task(self, task_id: str, identity: Identity) -> None:
        """删除任务：只有创建人或管理员"""
        task = self._get_or_404(Task, task_id, "任务不存在")
        ensure_authorized(identity, {Relation.CREATOR}, "无权限删除此任务", creator_id=task.creator_id)

        self.db.delete(task)
        self._commit()
        logger.info(f"任务 {task_id} 已被 {identity.user_id} 删除")
