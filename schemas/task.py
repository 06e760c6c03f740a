from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional
from datetime import datetime
from models.enums import TaskStatus
from .base import not_null


# 任务创建模式：status 固定为 pending，creator_id 取自当前用户
class TaskCreate(BaseModel):
    title: str = Field(..., min_length=3, max_length=100)
    description: Optional[str] = Field(None, max_length=500)
    project_id: str = Field(..., min_length=1)
    assignee_id: Optional[str] = None


# 任务更新模式
class TaskUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=3, max_length=100)  # 任务标题
    description: Optional[str] = Field(None, max_length=500)  # 任务描述
    status: Optional[TaskStatus] = None  # 任务状态
    assignee_id: Optional[str] = None  # 负责人ID，传 null 取消指派

    @field_validator('title', 'status')
    @classmethod
    def reject_null(cls, v, info):
        return not_null(v, info.field_name)


# 任务响应模式
class TaskResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    description: Optional[str] = None
    status: TaskStatus
    project_id: str
    assignee_id: Optional[str] = None
    creator_id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
