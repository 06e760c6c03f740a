"""应用配置模块

负责创建FastAPI应用实例和配置路由
"""
from fastapi import FastAPI

from config.settings import settings
from routers import auth, projects, subtasks, tasks, users


def create_app(lifespan=None) -> FastAPI:
    """创建FastAPI应用实例"""
    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESCRIPTION,
        version=settings.VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan
    )

    return app


def configure_routes(app: FastAPI) -> None:
    """配置应用路由"""
    # 公开路由
    app.include_router(auth.router, tags=["认证"])

    # 需要登录的路由
    app.include_router(projects.router, tags=["项目管理"])
    app.include_router(tasks.router, tags=["任务管理"])
    app.include_router(subtasks.router, tags=["子任务管理"])
    app.include_router(users.router, tags=["用户管理"])

    # 管理员路由
    app.include_router(users.admin_router, tags=["管理员"])

    # 健康检查
    @app.get("/health", tags=["系统"])
    def health_check():
        return {"status": "healthy", "version": settings.VERSION}
