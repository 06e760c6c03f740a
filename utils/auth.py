"""认证工具模块

令牌签发与校验、密码哈希，以及路由使用的两道鉴权依赖：
get_current_identity（认证）与 require_admin（管理员角色）
"""
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from passlib.context import CryptContext

from config.settings import settings
from models.enums import UserRole
from utils.exceptions import (
    AuthenticationException, InvalidTokenException, MissingSubjectException, PermissionException
)

logger = logging.getLogger(__name__)

# 配置
SECRET_KEY = settings.SECRET_KEY
ALGORITHM = settings.ALGORITHM
ACCESS_TOKEN_EXPIRE_MINUTES = settings.ACCESS_TOKEN_EXPIRE_MINUTES

# 密码加密
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS
)

# 由 get_current_identity 自己处理缺失凭据，统一返回401
security = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class Identity:
    """已认证的调用者身份，显式传入各服务方法"""
    user_id: str
    role: str

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN.value


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """验证密码"""
    return pwd_context.verify(plain_password, hashed_password)


def dummy_verify_password() -> None:
    """用户不存在时执行一次等价耗时的校验，避免通过响应时间枚举用户名"""
    pwd_context.dummy_verify()


def get_password_hash(password: str) -> str:
    """生成密码哈希"""
    return pwd_context.hash(password)


def create_access_token(user_id: str, role: str, expires_delta: Optional[timedelta] = None) -> str:
    """创建访问令牌，携带用户ID、角色和绝对过期时间"""
    if expires_delta is None:
        expires_delta = timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)
    expire = datetime.now(timezone.utc) + expires_delta

    to_encode = {"sub": user_id, "role": role, "exp": expire}
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)


def verify_token(token: str) -> Identity:
    """验证令牌

    签名错误、格式错误或已过期抛出 InvalidTokenException；
    签名有效但用户ID为空抛出 MissingSubjectException
    """
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError as e:
        raise InvalidTokenException() from e

    user_id = payload.get("sub")
    if not user_id:
        raise MissingSubjectException()

    return Identity(user_id=str(user_id), role=str(payload.get("role") or ""))


def get_current_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> Identity:
    """认证依赖：校验 Authorization: Bearer <token>，返回调用者身份"""
    if credentials is None or not credentials.credentials:
        raise AuthenticationException("缺少认证凭据")

    try:
        return verify_token(credentials.credentials)
    except AuthenticationException as e:
        logger.info(f"令牌校验失败: {e.message}")
        raise AuthenticationException("无效的认证凭据") from e


def require_admin(identity: Identity = Depends(get_current_identity)) -> Identity:
    """管理员依赖：必须在认证依赖之后执行"""
    if not identity.is_admin:
        logger.info(f"用户 {identity.user_id} 尝试访问管理员接口")
        raise PermissionException("仅限管理员访问")
    return identity
