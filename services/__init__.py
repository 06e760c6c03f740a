"""服务层模块初始化文件

提供服务层的统一导入接口
"""

from .user_service import UserService
from .project_service import ProjectService
from .task_service import TaskService
from .subtask_service import SubtaskService

__all__ = [
    "UserService",
    "ProjectService",
    "TaskService",
    "SubtaskService"
]
