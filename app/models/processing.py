"""
처리 파이프라인 관련 데이터 모델입니다.
실행 단계(Step)와 진행 상태 신호를 정의합니다.
"""

from enum import Enum
from pydantic import BaseModel, Field


class ProcessingStep(str, Enum):
    """
    파이프라인 진행 단계입니다.
    error 는 어느 단계에서든 도달할 수 있는 종료 상태입니다.
    """

    IDLE = "idle"               # 대기 중
    CONNECTING = "connecting"   # 보드 연결 중
    READING = "reading"         # 콘텐츠 추출 중
    ANALYZING = "analyzing"     # 프롬프트 준비 중
    GENERATING = "generating"   # 모델 호출 및 응답 해석 중
    COMPLETE = "complete"       # 완료됨
    ERROR = "error"             # 실패함


class ProcessingStatus(BaseModel):
    """
    실시간 진행 상황 신호입니다.
    호출자가 넘긴 콜백으로 전달되며 저장되지 않습니다.
    """

    step: ProcessingStep
    message: str
    progress: int = Field(default=0, ge=0, le=100)
