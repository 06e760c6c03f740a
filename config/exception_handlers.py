"""异常处理器配置模块

所有错误统一返回 {"status": int, "message": str, "errors"?: [...]}，status 与HTTP状态码一致
"""
import logging
from typing import Any, List, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from utils.exceptions import BusinessException, InvalidInputException, ValidationException

logger = logging.getLogger(__name__)

# 参数所在位置前缀，不计入字段路径
_LOCATION_PREFIXES = {"body", "query", "path", "header", "cookie"}

_HTTP_MESSAGES = {
    404: "接口不存在",
    405: "请求方法不允许",
}


def error_response(status_code: int, message: str, errors: Optional[List[Any]] = None) -> JSONResponse:
    """构造统一错误响应"""
    content = {"status": status_code, "message": message}
    if errors:
        content["errors"] = errors
    return JSONResponse(status_code=status_code, content=content)


def _field_path(loc) -> str:
    parts = [str(part) for part in loc]
    if parts and parts[0] in _LOCATION_PREFIXES:
        parts = parts[1:]
    return ".".join(parts) or "body"


def _translate_validation_error(exc: RequestValidationError) -> BusinessException:
    """请求体无法解析视为格式错误，其余为字段校验错误"""
    errors = exc.errors()
    for error in errors:
        # 请求体不是合法JSON，或缺失整个请求体
        if error.get("type") == "json_invalid" or tuple(error.get("loc", ())) == ("body",):
            return InvalidInputException()

    field_errors = [
        {"field": _field_path(error.get("loc", ())), "message": error.get("msg", "")}
        for error in errors
    ]
    return ValidationException(errors=field_errors)


def configure_exception_handlers(app: FastAPI) -> None:
    """配置全局异常处理器"""

    @app.exception_handler(BusinessException)
    async def business_exception_handler(request: Request, exc: BusinessException):
        """业务异常处理器"""
        return error_response(exc.status_code, exc.message, exc.errors)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """请求参数校验异常处理器"""
        translated = _translate_validation_error(exc)
        logger.info(f"请求参数校验失败: {request.method} {request.url.path} - {translated.message}")
        return error_response(translated.status_code, translated.message, translated.errors)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """HTTP异常处理器（路由不存在、方法不允许等）"""
        detail = exc.detail
        if not isinstance(detail, str) or detail in ("Not Found", "Method Not Allowed"):
            detail = _HTTP_MESSAGES.get(exc.status_code, str(detail))
        return error_response(exc.status_code, detail)

    @app.exception_handler(IntegrityError)
    async def integrity_exception_handler(request: Request, exc: IntegrityError):
        """唯一性等约束冲突"""
        logger.warning(f"数据约束冲突: {request.method} {request.url.path} - {exc.orig}")
        return error_response(400, "数据冲突，请检查唯一性字段")

    @app.exception_handler(SQLAlchemyError)
    async def database_exception_handler(request: Request, exc: SQLAlchemyError):
        """数据库异常处理器"""
        logger.error(f"数据库操作失败: {request.method} {request.url.path}", exc_info=exc)
        return error_response(500, "数据库操作失败")

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """通用异常处理器"""
        logger.error(f"未处理的异常: {request.method} {request.url.path}", exc_info=exc)
        return error_response(500, "服务器内部错误")
