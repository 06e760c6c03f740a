from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from models.database import get_db
from models.enums import TaskStatus
from routers import PROTECTED_RESPONSES, status_filter
from schemas.subtask import SubtaskCreate, SubtaskResponse, SubtaskUpdate
from services.subtask_service import SubtaskService
from utils.auth import Identity, get_current_identity
from utils.pagination import Pagination

router = APIRouter(responses=PROTECTED_RESPONSES)


@router.post("/createsubtask", response_model=SubtaskResponse, status_code=status.HTTP_201_CREATED)
def create_subtask(
    subtask_data: SubtaskCreate,
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity)
):
    """创建子任务，初始状态为 pending"""
    return SubtaskService(db).create_subtask(subtask_data, identity)


@router.get("/getsubtask", response_model=List[SubtaskResponse])
def get_subtasks(
    pagination: Pagination = Depends(),
    status: Optional[TaskStatus] = Depends(status_filter),
    task_id: Optional[str] = Query(None, description="所属任务ID"),
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity)
):
    return SubtaskService(db).list_subtasks(pagination, identity, status=status, task_id=task_id)


@router.put("/updatesubtask/{subtask_id}", response_model=SubtaskResponse)
def update_subtask(
    subtask_id: str,
    subtask_data: SubtaskUpdate,
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity)
):
    return SubtaskService(db).update_subtask(subtask_id, subtask_data, identity)


@router.delete("/deletesubtask/{subtask_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_subtask(
    subtask_id: str,
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity)
):
    SubtaskService(db).delete_subtask(subtask_id, identity)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
