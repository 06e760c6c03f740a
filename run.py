#!/usr/bin/env python3
"""
项目启动脚本
"""

import uvicorn

from config.settings import settings


def main():
    """启动FastAPI应用"""
    debug = settings.DEBUG

    print(f"启动服务器...")
    print(f"地址: http://{settings.SERVER_HOST}:{settings.SERVER_PORT}")
    print(f"调试模式: {debug}")
    print(f"API文档: http://{settings.SERVER_HOST}:{settings.SERVER_PORT}/docs")

    # 开发模式使用import string以支持reload
    uvicorn.run(
        "main:app",
        host=settings.SERVER_HOST,
        port=settings.SERVER_PORT,
        reload=debug,
        log_level="debug" if debug else settings.LOG_LEVEL.lower()
    )


if __name__ == "__main__":
    main()
