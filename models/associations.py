"""
关联表定义模块
包含多对多关系的关联表定义
"""
from sqlalchemy import Column, DateTime, ForeignKey, String, Table
from sqlalchemy.sql import func
from .database import Base


# 项目成员关联表
project_members = Table(
    'project_members',
    Base.metadata,
    Column('project_id', String(36), ForeignKey('projects.id', ondelete='CASCADE'), primary_key=True, comment='项目ID'),
    Column('user_id', String(36), ForeignKey('users.id', ondelete='CASCADE'), primary_key=True, comment='用户ID'),
    Column('joined_at', DateTime, default=func.now(), comment='加入时间')
)
