"""API 응답 봉투(envelope) 모델."""

from typing import Optional, Any

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """구조화된 API 에러 정보."""

    code: str = Field(description="에러 코드 (예: BOARD_NOT_FOUND)")
    message: str = Field(description="에러 메시지")


class ApiResponse(BaseModel):
    """모든 엔드포인트가 공통으로 사용하는 응답 형식."""

    success: bool
    data: Optional[Any] = None
    error: Optional[ErrorDetail] = None

    @classmethod
    def ok(cls, data: Any) -> dict:
        return cls(success=True, data=data).model_dump(exclude_none=True)

    @classmethod
    def fail(cls, code: str, message: str) -> dict:
        return cls(
            success=False, error=ErrorDetail(code=code, message=message)
        ).model_dump(exclude_none=True)
