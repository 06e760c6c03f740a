from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional
from datetime import datetime
from models.enums import UserRole
from .base import not_null

PASSWORD_MIN_LENGTH = 6


# 注册模式
class RegisterRequest(BaseModel):
    username: str = Field(..., min_length=3, max_length=50)
    password: str = Field(..., min_length=PASSWORD_MIN_LENGTH)
    role: Optional[UserRole] = Field(None, description="不传时默认为 team_member")


# 登录模式
class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


# 登录响应模式
class TokenResponse(BaseModel):
    token: str
    token_type: str = "bearer"


class UserUpdate(BaseModel):
    username: Optional[str] = Field(None, min_length=3, max_length=50)
    password: Optional[str] = Field(None, description="新密码，为空时保留原密码")
    role: Optional[UserRole] = None

    @field_validator('username', 'role')
    @classmethod
    def reject_null(cls, v, info):
        return not_null(v, info.field_name)

    @field_validator('password')
    @classmethod
    def validate_password(cls, v):
        """空字符串视为不修改密码"""
        if not v:
            return None
        if len(v) < PASSWORD_MIN_LENGTH:
            raise ValueError(f'密码长度至少需要 {PASSWORD_MIN_LENGTH} 个字符')
        return v


# 用户简要信息（用于项目成员列表）
class UserBrief(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    username: str
    role: UserRole


# 用户返回体定义，不包含密码哈希
class UserResponse(UserBrief):
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
