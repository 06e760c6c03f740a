"""
子任务模型模块
"""
from sqlalchemy import Column, Enum, ForeignKey, String
from sqlalchemy.orm import relationship
from .database import Base
from .enums import TaskStatus
from models.base import BaseModelMixin


class Subtask(Base, BaseModelMixin):
    """子任务表模型"""
    __tablename__ = "subtasks"

    title = Column(String(255), nullable=False, comment='子任务标题')
    status = Column(Enum(TaskStatus), default=TaskStatus.PENDING, nullable=False, index=True, comment='子任务状态')
    task_id = Column(String(36), ForeignKey("tasks.id", ondelete="CASCADE"), nullable=False, index=True, comment='所属任务ID')
    assignee_id = Column(String(36), ForeignKey("users.id"), nullable=True, index=True, comment='子任务负责人ID')
    creator_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True, comment='子任务创建人ID')

    # 关系
    task = relationship("Task", back_populates="subtasks")
    assignee = relationship("User", foreign_keys=[assignee_id])
    creator = relationship("User", foreign_keys=[creator_id])
