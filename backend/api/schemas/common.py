import math
from pydantic import BaseModel
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")

class ApiResponse(BaseModel, Generic[T]):
    """全エンドポイント共通のレスポンスエンベロープ"""
    is_success: bool
    data: Optional[T] = None
    error_message: Optional[str] = None
    status_code: int = 200

    @classmethod
    def ok(cls, data: Optional[T] = None) -> "ApiResponse[T]":
        return cls(is_success=True, data=data, status_code=200)

    @classmethod
    def fail(cls, error_message: str, status_code: int = 500) -> "ApiResponse[T]":
        return cls(is_success=False, error_message=error_message, status_code=status_code)

class PaginatedResult(BaseModel, Generic[T]):
    items: List[T]
    total_count: int
    page: int
    page_size: int
    total_pages: int

    @classmethod
    def build(cls, items: List[T], total_count: int, page: int, page_size: int) -> "PaginatedResult[T]":
        return cls(
            items=items,
            total_count=total_count,
            page=page,
            page_size=page_size,
            total_pages=math.ceil(total_count / page_size) if page_size > 0 else 0,
        )
