from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from models.database import get_db
from routers import PROTECTED_RESPONSES
from schemas.user import UserResponse, UserUpdate
from services.user_service import UserService
from utils.auth import Identity, get_current_identity, require_admin
from utils.pagination import Pagination

router = APIRouter(responses=PROTECTED_RESPONSES)

# 管理员路由：认证之后再校验角色
admin_router = APIRouter(dependencies=[Depends(require_admin)], responses=PROTECTED_RESPONSES)


# 更新用户（本人或管理员）
@router.put("/updateuser/{user_id}", response_model=UserResponse)
def update_user(
    user_id: str,
    user_data: UserUpdate,
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity)
):
    """更新用户名、密码或角色；非管理员不能修改自己的角色"""
    return UserService(db).update_user(user_id, user_data, identity)


# 获取用户列表（仅管理员）
@admin_router.get("/users", response_model=List[UserResponse])
def get_users(
    pagination: Pagination = Depends(),
    db: Session = Depends(get_db)
):
    """获取用户列表"""
    return UserService(db).list_users(pagination)


# 删除用户（仅管理员）
@admin_router.delete("/deleteusers/{user_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_user(
    user_id: str,
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_admin)
):
    """删除用户"""
    UserService(db).delete_user(user_id, identity)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
