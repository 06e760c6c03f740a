"""
任务模型模块
包含任务相关的数据模型定义
"""
from sqlalchemy import Column, Enum, ForeignKey, String, Text
from sqlalchemy.orm import relationship
from .database import Base
from .enums import TaskStatus
from models.base import BaseModelMixin


class Task(Base, BaseModelMixin):
    """任务表模型"""
    __tablename__ = "tasks"

    title = Column(String(255), nullable=False, comment='任务标题')
    description = Column(Text, comment='任务描述')
    status = Column(Enum(TaskStatus), default=TaskStatus.PENDING, nullable=False, index=True, comment='任务状态')
    project_id = Column(String(36), ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True, comment='任务所属项目ID')
    assignee_id = Column(String(36), ForeignKey("users.id"), nullable=True, index=True, comment='任务负责人ID')
    creator_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True, comment='任务创建人ID')

    # 关系
    project = relationship("Project", back_populates="tasks")
    assignee = relationship("User", foreign_keys=[assignee_id])
    creator = relationship("User", foreign_keys=[creator_id])
    subtasks = relationship("Subtask", back_populates="task", passive_deletes=True)
