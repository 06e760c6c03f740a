from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from models.database import get_db
from models.enums import TaskStatus
from routers import PROTECTED_RESPONSES, status_filter
from schemas.task import TaskCreate, TaskResponse, TaskUpdate
from services.task_service import TaskService
from utils.auth import Identity, get_current_identity
from utils.pagination import Pagination

router = APIRouter(responses=PROTECTED_RESPONSES)


# 创建任务
@router.post("/createtask", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
def create_task(
    task_data: TaskCreate,
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity)
):
    """创建任务，初始状态为 pending"""
    return TaskService(db).create_task(task_data, identity)


# 任务列表
@router.get("/gettask", response_model=List[TaskResponse])
def get_tasks(
    pagination: Pagination = Depends(),
    status: Optional[TaskStatus] = Depends(status_filter),
    project_id: Optional[str] = Query(None, description="项目ID"),
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity)
):
    """获取任务列表：管理员可见全部，其他用户可见自己创建或负责的任务"""
    return TaskService(db).list_tasks(pagination, identity, status=status, project_id=project_id)


# 更新任务
@router.put("/updatetask/{task_id}", response_model=TaskResponse)
def update_task(
    task_id: str,
    task_data: TaskUpdate,
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity)
):
    """更新任务（创建人、负责人或管理员）"""
    return TaskService(db).update_task(task_id, task_data, identity)


# 删除任务
@router.delete("/deletetask/{task_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_task(
    task_id: str,
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity)
):
    """删除任务（创建人或管理员）"""
    TaskService(db).delete_task(task_id, identity)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
