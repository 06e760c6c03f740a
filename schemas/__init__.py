# 基础模式
from .base import ErrorResponse, FieldError

# 用户相关模式
from .user import (
    RegisterRequest, LoginRequest, TokenResponse, UserUpdate, UserBrief, UserResponse
)

# 项目相关模式
from .project import ProjectCreate, ProjectUpdate, AddMemberRequest, ProjectResponse

# 任务相关模式
from .task import TaskCreate, TaskUpdate, TaskResponse

# 子任务相关模式
from .subtask import SubtaskCreate, SubtaskUpdate, SubtaskResponse

__all__ = [
    "ErrorResponse", "FieldError",
    "RegisterRequest", "LoginRequest", "TokenResponse", "UserUpdate", "UserBrief", "UserResponse",
    "ProjectCreate", "ProjectUpdate", "AddMemberRequest", "ProjectResponse",
    "TaskCreate", "TaskUpdate", "TaskResponse",
    "SubtaskCreate", "SubtaskUpdate", "SubtaskResponse",
]
