"""用户服务模块

注册、登录、用户列表、更新与删除
"""
import logging
from typing import List

from models import User, UserRole
from schemas.user import LoginRequest, RegisterRequest, UserUpdate
from services.base_service import BaseService
from utils.auth import (
    Identity, create_access_token, dummy_verify_password, get_password_hash, verify_password
)
from utils.exceptions import (
    InvalidCredentialsException, PermissionException, ResourceConflictException
)
from utils.pagination import Pagination, paginate_query
from utils.permissions import Relation, ensure_authorized

logger = logging.getLogger(__name__)


class UserService(BaseService):
    """用户服务类"""

    def register(self, register_data: RegisterRequest) -> User:
        """用户注册，未指定角色时为 team_member"""
        if self.db.query(User).filter(User.username == register_data.username).first():
            raise ResourceConflictException("用户名已存在")

        user = User(
            username=register_data.username,
            password_hash=get_password_hash(register_data.password),
            role=register_data.role or UserRole.TEAM_MEMBER
        )
        self.db.add(user)
        self._commit("用户名已存在")
        self.db.refresh(user)

        logger.info(f"用户注册成功: {user.username} ({user.role.value})")
        return user

    def authenticate(self, login_data: LoginRequest) -> User:
        """认证用户：用户不存在与密码错误返回同一异常"""
        user = self.db.query(User).filter(User.username == login_data.username).first()
        if user is None:
            dummy_verify_password()
            raise InvalidCredentialsException()
        if not verify_password(login_data.password, user.password_hash):
            raise InvalidCredentialsException()
        return user

    def login(self, login_data: LoginRequest) -> str:
        """登录并签发访问令牌"""
        user = self.authenticate(login_data)
        logger.info(f"用户登录: {user.username}")
        return create_access_token(user.id, user.role.value)

    def list_users(self, pagination: Pagination) -> List[User]:
        """获取用户列表（仅管理员路由调用）"""
        query = self.db.query(User).order_by(User.created_at, User.id)
        return paginate_query(query, pagination)

    def update_user(self, user_id: str, user_data: UserUpdate, identity: Identity) -> User:
        """更新用户：本人或管理员；非管理员不能修改自己的角色"""
        user = self._get_or_404(User, user_id, "用户不存在")
        ensure_authorized(identity, {Relation.SELF}, "无权限更新此用户", subject_id=user.id)

        update_data = user_data.model_dump(exclude_unset=True)

        new_role = update_data.get("role")
        if new_role is not None and new_role != user.role and not identity.is_admin:
            logger.warning(f"用户 {identity.user_id} 尝试修改自己的角色为 {new_role.value}")
            raise PermissionException("只有管理员可以修改用户角色")

        new_username = update_data.get("username")
        if new_username is not None and new_username != user.username:
            if self.db.query(User).filter(User.username == new_username).first():
                raise ResourceConflictException("用户名已存在")
            user.username = new_username

        # 空密码在校验阶段已转换为 None，保留原哈希
        if update_data.get("password"):
            user.password_hash = get_password_hash(update_data["password"])

        if new_role is not None:
            user.role = new_role

        self._commit("用户名已存在")
        self.db.refresh(user)

        logger.info(f"用户 {user.id} 已被 {identity.user_id} 更新")
        return user

    def delete_user(self, user_id: str, identity: Identity) -> None:
        """删除用户（仅管理员路由调用）"""
        user = self._get_or_404(User, user_id, "用户不存在")
        self.db.delete(user)
        self._commit()
        logger.info(f"用户 {user_id} 已被管理员 {identity.user_id} 删除")

    def ensure_default_admin(self, username: str, password: str) -> User:
        """创建默认管理员，已存在时跳过"""
        existing_user = self.db.query(User).filter(User.username == username).first()
        if existing_user:
            logger.info(f"用户 {username} 已存在，跳过创建")
            return existing_user

        user = User(
            username=username,
            password_hash=get_password_hash(password),
            role=UserRole.ADMIN
        )
        self.db.add(user)
        self._commit("用户名已存在")
        self.db.refresh(user)

        logger.info(f"创建默认管理员成功: {user.username}")
        return user
