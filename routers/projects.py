from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from models.database import get_db
from routers import PROTECTED_RESPONSES
from schemas.project import AddMemberRequest, ProjectCreate, ProjectResponse, ProjectUpdate
from services.project_service import ProjectService
from utils.auth import Identity, get_current_identity
from utils.pagination import Pagination

router = APIRouter(responses=PROTECTED_RESPONSES)


# 创建项目
@router.post("/createproject", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
def create_project(
    project_data: ProjectCreate,
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity)
):
    """创建项目，所有者为当前用户"""
    return ProjectService(db).create_project(project_data, identity)


# 项目列表
@router.get("/getproject", response_model=List[ProjectResponse])
def get_projects(
    pagination: Pagination = Depends(),
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity)
):
    """获取项目列表：管理员可见全部，其他用户可见自己拥有或参与的项目"""
    return ProjectService(db).list_projects(pagination, identity)


# 更新项目
@router.put("/updateproject/{project_id}", response_model=ProjectResponse)
def update_project(
    project_id: str,
    project_data: ProjectUpdate,
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity)
):
    """更新项目名称和描述（所有者或管理员）"""
    return ProjectService(db).update_project(project_id, project_data, identity)


# 删除项目
@router.delete("/deleteproject/{project_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_project(
    project_id: str,
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity)
):
    """删除项目（所有者或管理员）"""
    ProjectService(db).delete_project(project_id, identity)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# 添加项目成员
@router.post("/projects/{project_id}/members", response_model=ProjectResponse)
def add_project_member(
    project_id: str,
    member_data: AddMemberRequest,
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity)
):
    """添加项目成员（所有者或管理员），重复添加不会产生重复成员"""
    return ProjectService(db).add_member(project_id, member_data.user_id, identity)
