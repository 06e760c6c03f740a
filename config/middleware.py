"""中间件配置模块

包含所有中间件的配置
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config.settings import settings
from utils.logging_middleware import REQUEST_ID_HEADER, RequestResponseLoggingMiddleware


def configure_middleware(app: FastAPI) -> None:
    """配置应用中间件"""
    # CORS中间件
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=settings.CORS_ALLOW_METHODS,
        allow_headers=settings.CORS_ALLOW_HEADERS,
        expose_headers=[REQUEST_ID_HEADER],
    )

    # 请求响应日志中间件
    app.add_middleware(RequestResponseLoggingMiddleware, debug_mode=settings.DEBUG)
