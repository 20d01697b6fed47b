"""
입력 관련 데이터 모델입니다.
사용자가 업로드하는 파일이나 보드 참조, 그리고 추출된 콘텐츠 문서의 형식을 정의합니다.
"""

from enum import Enum
from typing import Optional, Union
from pydantic import BaseModel, ConfigDict, Field


class SourceKind(str, Enum):
    """추출된 콘텐츠의 원본 종류입니다."""

    IMAGE = "image"
    PDF = "pdf"
    JSON = "json"
    TEXT = "text"
    BOARD = "board"


class FileInput(BaseModel):
    """업로드된 파일 하나 (바이너리 + MIME 타입 + 파일명)."""

    content: bytes = Field(..., description="파일 바이너리 내용")
    mime_type: str = Field(default="", description="클라이언트가 보낸 MIME 타입")
    filename: str = Field(default="", description="원본 파일명")


class BoardReference(BaseModel):
    """보드 URL 또는 보드 ID."""

    reference: str = Field(..., description="Miro 보드 URL 또는 보드 ID")


# 추출기(Extractor)가 받는 입력 디스크립터
InputDescriptor = Union[FileInput, BoardReference]


class ContentDocument(BaseModel):
    """
    한 번의 처리 실행에서 추출기가 만들어내는 평문 문서입니다.
    생성 후 변경되지 않으며 프롬프트 빌더가 소비합니다.
    """

    model_config = ConfigDict(frozen=True)

    text: str = Field(..., description="추출된 순수 텍스트")
    source_kind: SourceKind
    word_count: int = Field(default=0, ge=0)
    page_count: Optional[int] = None  # PDF인 경우에만
    board_name: Optional[str] = None  # 보드인 경우에만

    @classmethod
    def from_text(
        cls,
        text: str,
        source_kind: SourceKind,
        **extra,
    ) -> "ContentDocument":
        """텍스트로부터 단어 수를 계산하여 문서를 만듭니다."""
        return cls(
            text=text,
            source_kind=source_kind,
            word_count=count_words(text),
            **extra,
        )


def count_words(text: str) -> int:
    """공백으로 구분된 비어있지 않은 토큰의 개수."""
    return len(text.split())
