"""
项目模型模块
包含项目相关的数据模型定义
"""
from sqlalchemy import Column, ForeignKey, String, Text
from sqlalchemy.orm import relationship
from .database import Base
from .associations import project_members
from models.base import BaseModelMixin


class Project(Base, BaseModelMixin):
    """项目表模型"""
    __tablename__ = "projects"

    name = Column(String(255), nullable=False, comment='项目名称')
    description = Column(Text, comment='项目描述')
    owner_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True, comment='项目所有者ID')

    # 关系
    owner = relationship("User", foreign_keys=[owner_id])
    members = relationship("User", secondary=project_members, back_populates="projects")
    tasks = relationship("Task", back_populates="project", passive_deletes=True)
