"""统一异常处理模块

定义系统中使用的自定义异常类，每个异常对应一个HTTP状态码，
由 config.exception_handlers 统一转换为 {"status": int, "message": str} 响应
"""
from typing import Any, List, Optional


class BusinessException(Exception):
    """业务异常基类"""

    def __init__(self, message: str, status_code: int = 400, errors: Optional[List[Any]] = None):
        self.message = message
        self.status_code = status_code
        self.errors = errors
        super().__init__(message)


class InvalidInputException(BusinessException):
    """请求体格式错误"""

    def __init__(self, message: str = "请求参数格式错误"):
        super().__init__(message=message, status_code=400)


class ValidationException(BusinessException):
    """数据验证异常"""

    def __init__(self, message: str = "数据验证失败", errors: Optional[List[Any]] = None):
        super().__init__(message=message, status_code=400, errors=errors)


class AuthenticationException(BusinessException):
    """认证异常"""

    def __init__(self, message: str = "未认证或认证已失效"):
        super().__init__(message=message, status_code=401)


class InvalidTokenException(AuthenticationException):
    """令牌签名错误、格式错误或已过期"""

    def __init__(self, message: str = "无效的认证令牌"):
        super().__init__(message=message)


class MissingSubjectException(AuthenticationException):
    """令牌签名有效但缺少用户ID"""

    def __init__(self, message: str = "认证令牌缺少用户标识"):
        super().__init__(message=message)


class InvalidCredentialsException(AuthenticationException):
    """用户名或密码错误（两种情况返回同一响应）"""

    def __init__(self, message: str = "用户名或密码错误"):
        super().__init__(message=message)


class PermissionException(BusinessException):
    """权限异常"""

    def __init__(self, message: str = "权限不足"):
        super().__init__(message=message, status_code=403)


class ResourceNotFoundException(BusinessException):
    """资源不存在异常"""

    def __init__(self, message: str = "资源不存在"):
        super().__init__(message=message, status_code=404)


class ResourceConflictException(BusinessException):
    """资源冲突异常（唯一性冲突），与普通参数错误一样返回400"""

    def __init__(self, message: str = "资源冲突"):
        super().__init__(message=message, status_code=400)


class DatabaseException(BusinessException):
    """数据库操作异常"""

    def __init__(self, message: str = "数据库操作失败"):
        super().__init__(message=message, status_code=500)
