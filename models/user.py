"""
用户模型模块
包含用户相关的数据模型定义
"""
from sqlalchemy import Column, Enum, String
from sqlalchemy.orm import relationship
from .database import Base
from .enums import UserRole
from .associations import project_members
from models.base import BaseModelMixin


class User(Base, BaseModelMixin):
    """用户表模型"""
    __tablename__ = "users"

    username = Column(String(50), unique=True, index=True, nullable=False, comment='用户名，唯一标识')
    password_hash = Column(String(255), nullable=False, comment='密码哈希值，不保存明文')
    role = Column(Enum(UserRole), default=UserRole.TEAM_MEMBER, nullable=False, comment='用户角色')

    # 关系
    projects = relationship("Project", secondary=project_members, back_populates="members")

    def __repr__(self) -> str:
        return f"<User {self.username} ({self.role.value if self.role else None})>"
