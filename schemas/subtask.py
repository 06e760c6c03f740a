from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional
from datetime import datetime
from models.enums import TaskStatus
from .base import not_null


class SubtaskCreate(BaseModel):
    title: str = Field(..., min_length=3, max_length=100)
    task_id: str = Field(..., min_length=1)
    assignee_id: Optional[str] = None


class SubtaskUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=3, max_length=100)
    status: Optional[TaskStatus] = None
    assignee_id: Optional[str] = None

    @field_validator('title', 'status')
    @classmethod
    def reject_null(cls, v, info):
        return not_null(v, info.field_name)


class SubtaskResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    status: TaskStatus
    task_id: str
    assignee_id: Optional[str] = None
    creator_id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
