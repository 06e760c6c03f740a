"""
枚举定义模块
包含系统中所有的枚举类型定义
"""
import enum


class UserRole(str, enum.Enum):
    """用户角色枚举"""
    ADMIN = "admin"              # 系统管理员
    MANAGER = "manager"          # 管理者
    TEAM_MEMBER = "team_member"  # 团队成员


class TaskStatus(str, enum.Enum):
    """任务/子任务状态枚举"""
    PENDING = "pending"          # 待处理
    IN_PROGRESS = "in_progress"  # 进行中
    COMPLETED = "completed"      # 已完成
