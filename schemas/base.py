from pydantic import BaseModel, Field
from typing import Optional, List


# 错误明细
class FieldError(BaseModel):
    """单个字段的校验错误"""
    field: str = Field(..., description="字段路径")
    message: str = Field(..., description="违反的约束")


# 错误响应模式
class ErrorResponse(BaseModel):
    """统一错误响应：status 与HTTP状态码一致"""
    status: int = Field(..., description="HTTP状态码")
    message: str = Field(..., description="错误信息")
    errors: Optional[List[FieldError]] = Field(None, description="校验失败的字段列表")


def not_null(value, field_name: str):
    """更新请求中不允许显式传 null 的字段"""
    if value is None:
        raise ValueError(f"{field_name} 不能为空")
    return value
