from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from models.database import get_db
from schemas.base import ErrorResponse
from schemas.user import LoginRequest, RegisterRequest, TokenResponse, UserResponse
from services.user_service import UserService

router = APIRouter()


@router.post(
    "/register",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}}
)
def register(register_data: RegisterRequest, db: Session = Depends(get_db)):
    """用户注册，不传角色时默认为 team_member"""
    return UserService(db).register(register_data)


@router.post(
    "/login",
    response_model=TokenResponse,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}}
)
def login(login_data: LoginRequest, db: Session = Depends(get_db)):
    """用户登录，返回访问令牌"""
    token = UserService(db).login(login_data)
    return TokenResponse(token=token)
