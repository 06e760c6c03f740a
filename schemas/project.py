from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional, List
from datetime import datetime
from .base import not_null
from .user import UserBrief


# 项目创建模式：id 与 owner_id 由服务端设置
class ProjectCreate(BaseModel):
    name: str = Field(..., min_length=3, max_length=10)
    description: Optional[str] = Field(None, max_length=500)


# 项目更新模式：只允许修改名称和描述
class ProjectUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=3, max_length=10)
    description: Optional[str] = Field(None, max_length=500)

    @field_validator('name')
    @classmethod
    def reject_null(cls, v, info):
        return not_null(v, info.field_name)


class AddMemberRequest(BaseModel):
    user_id: str = Field(..., min_length=1, description="要加入项目的用户ID")


# 项目响应模式
class ProjectResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: Optional[str] = None
    owner_id: str
    members: List[UserBrief] = Field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
