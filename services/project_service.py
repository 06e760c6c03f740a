"""项目服务模块

包含项目及项目成员相关的业务逻辑处理
"""
import logging
from typing import List

from sqlalchemy.orm import selectinload

from models import Project, User
from schemas.project import ProjectCreate, ProjectUpdate
from services.base_service import BaseService
from utils.auth import Identity
from utils.pagination import Pagination, paginate_query
from utils.permissions import Relation, ensure_authorized, visibility_filter

logger = logging.getLogger(__name__)


class ProjectService(BaseService):
    """项目服务类"""

    def create_project(self, project_data: ProjectCreate, identity: Identity) -> Project:
        """创建项目，所有者为当前用户"""
        project = Project(
            name=project_data.name,
            description=project_data.description,
            owner_id=identity.user_id
        )
        self.db.add(project)
        self._commit()
        self.db.refresh(project)

        logger.info(f"项目 {project.id} 已由 {identity.user_id} 创建")
        return project

    def list_projects(self, pagination: Pagination, identity: Identity) -> List[Project]:
        """获取项目列表：非管理员只能看到自己拥有或参与的项目"""
        query = self.db.query(Project).options(selectinload(Project.members))

        condition = visibility_filter(
            identity,
            Project.owner_id == identity.user_id,
            Project.members.any(User.id == identity.user_id)
        )
        if condition is not None:
            query = query.filter(condition)

        query = query.order_by(Project.created_at, Project.id)
        return paginate_query(query, pagination)

    def update_project(self, project_id: str, project_data: ProjectUpdate, identity: Identity) -> Project:
        """更新项目：所有者或管理员"""
        project = self._get_or_404(Project, project_id, "项目不存在")
        ensure_authorized(identity, {Relation.OWNER}, "无权限更新此项目", owner_id=project.owner_id)

        for field, value in project_data.model_dump(exclude_unset=True).items():
            setattr(project, field, value)

        self._commit()
        self.db.refresh(project)

        logger.info(f"项目 {project.id} 已被 {identity.user_id} 更新")
        return project

    def delete_project(self, project_id: str, identity: Identity) -> None:
        """删除项目：所有者或管理员"""
        project = self._get_or_404(Project, project_id, "项目不存在")
        ensure_authorized(identity, {Relation.OWNER}, "无权限删除此项目", owner_id=project.owner_id)

        self.db.delete(project)
        self._commit()
        logger.info(f"项目 {project_id} 已被 {identity.user_id} 删除")

    def add_member(self, project_id: str, user_id: str, identity: Identity) -> Project:
        """添加项目成员：所有者或管理员；重复添加不产生重复记录"""
        project = self._get_or_404(Project, project_id, "项目不存在")
        ensure_authorized(identity, {Relation.OWNER}, "无权限管理此项目成员", owner_id=project.owner_id)

        user = self._get_or_404(User, user_id, "用户不存在")
        if user not in project.members:
            project.members.append(user)
            self._commit()
            logger.info(f"用户 {user_id} 已加入项目 {project_id}")
        else:
            logger.info(f"用户 {user_id} 已是项目 {project_id} 的成员")

        self.db.refresh(project)
        return project
