"""
请求和响应日志中间件
记录每个请求的方法、路径、状态码和耗时，并通过 X-Request-ID 响应头回传请求ID
"""

import json
import logging
import os
import time
import uuid
from logging.handlers import RotatingFileHandler
from typing import Callable, Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("API_Logger")

REQUEST_ID_HEADER = "X-Request-ID"

SENSITIVE_HEADERS = {
    'authorization', 'cookie', 'x-api-key', 'x-auth-token',
    'password', 'secret', 'token'
}


class RequestResponseLoggingMiddleware(BaseHTTPMiddleware):
    """请求响应日志中间件"""

    def __init__(self, app, debug_mode: bool = False):
        super().__init__(app)
        self.debug_mode = debug_mode

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        # 客户端传入的请求ID优先，便于跨服务追踪
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())[:8]
        start_time = time.time()

        method = request.method
        path = request.url.path
        client_ip = request.client.host if request.client else "unknown"

        if self.debug_mode:
            self._log_debug_request(request_id, method, path, dict(request.query_params))
        else:
            self._log_request(request_id, method, path, dict(request.headers), client_ip)

        try:
            response = await call_next(request)
        except Exception as e:
            process_time = time.time() - start_time
            logger.error(f"[{request_id}] 请求处理异常: {str(e)}, 耗时: {process_time:.3f}s")
            raise

        process_time = time.time() - start_time
        response.headers[REQUEST_ID_HEADER] = request_id

        if response.status_code >= 500:
            logger.error(f"[{request_id}] {method} {path} -> {response.status_code} ({process_time:.3f}s)")
        elif response.status_code >= 400:
            logger.warning(f"[{request_id}] {method} {path} -> {response.status_code} ({process_time:.3f}s)")
        else:
            logger.info(f"[{request_id}] {method} {path} -> {response.status_code} ({process_time:.3f}s)")

        return response

    def _log_debug_request(self, request_id: str, method: str, path: str, query: dict):
        """调试模式下记录精简请求日志"""
        logger.debug(f"[{request_id}] 接口: {method} {path}")
        if query:
            logger.debug(f"[{request_id}] 查询参数: {json.dumps(query, ensure_ascii=False)}")

    def _log_request(self, request_id: str, method: str, path: str, headers: dict, client_ip: str):
        """记录请求日志，敏感请求头脱敏"""
        filtered_headers = self._filter_headers(headers)
        logger.info(f"[{request_id}] 收到请求 {method} {path} 客户端IP: {client_ip}")
        if filtered_headers:
            logger.debug(f"[{request_id}] 请求头: {json.dumps(filtered_headers, ensure_ascii=False)}")

    @staticmethod
    def _filter_headers(headers: dict) -> dict:
        """过滤敏感的请求头信息"""
        filtered = {}
        for key, value in headers.items():
            key_lower = key.lower()
            if any(sensitive in key_lower for sensitive in SENSITIVE_HEADERS):
                filtered[key] = "***MASKED***"
            else:
                filtered[key] = value
        return filtered


def setup_logging(
    log_level: str = "INFO",
    log_file: Optional[str] = None,
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 5
):
    """设置日志配置：控制台输出，配置了 log_file 时同时写入轮转日志文件"""
    level = getattr(logging, log_level.upper(), logging.INFO)
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    handlers = [logging.StreamHandler()]
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handlers.append(RotatingFileHandler(log_file, maxBytes=max_bytes, backupCount=backup_count))

    for handler in handlers:
        handler.setFormatter(formatter)

    logging.basicConfig(level=level, handlers=handlers, force=True)
