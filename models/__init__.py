"""
模型模块初始化文件
提供统一的导入接口
"""

# 导入数据库基础配置
from .database import Base, engine, SessionLocal, get_db

# 导入枚举类型
from .enums import UserRole, TaskStatus

# 导入关联表
from .associations import project_members

# 导入模型类
from .user import User
from .project import Project
from .task import Task
from .subtask import Subtask

__all__ = [
    # 数据库配置
    'Base', 'engine', 'SessionLocal', 'get_db',

    # 枚举类型
    'UserRole', 'TaskStatus',

    # 关联表
    'project_members',

    # 模型类
    'User', 'Project', 'Task', 'Subtask'
]
