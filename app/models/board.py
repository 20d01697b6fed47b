"""
보드(Miro) 관련 데이터 모델입니다.
라이브 API와 mock 데이터가 공유하는 계약(contract)을 정의합니다.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class BoardItemType(str, Enum):
    """내용을 담고 있는 보드 요소 종류."""

    STICKY_NOTE = "sticky_note"
    FRAME = "frame"
    TEXT = "text"
    SHAPE = "shape"


# 콘텐츠로 취급하는 요소 종류 (그 외 connector, image 등은 버림)
CONTENT_ITEM_TYPES = {t.value for t in BoardItemType}


class Board(BaseModel):
    """보드 목록 조회 결과의 한 항목."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    description: Optional[str] = None
    last_modified: str = Field(default="", alias="lastModified")
    thumbnail_url: Optional[str] = Field(default=None, alias="thumbnailUrl")


class BoardMeta(BaseModel):
    """보드 기본 정보."""

    id: str
    name: str


class BoardItem(BaseModel):
    """보드 요소 하나 (원본 타입 그대로)."""

    id: str
    type: str
    content: str = ""
    parent_id: Optional[str] = None
    position: Optional[dict] = None
    color: Optional[str] = None


class BoardItemsPage(BaseModel):
    """커서 기반 페이지 하나."""

    items: list[BoardItem] = Field(default_factory=list)
    next_cursor: Optional[str] = None


class BoardContent(BaseModel):
    """필터링이 끝난 보드 전체 내용."""

    board_id: str
    board_name: str
    elements: list[BoardItem] = Field(default_factory=list)

    def to_outline(self) -> str:
        """
        보드 요소를 평평한 텍스트 개요로 직렬화합니다.
        프레임은 제목(###)이 되고 나머지 요소는 글머리표가 됩니다.
        """
        lines = []
        for element in self.elements:
            if element.type == BoardItemType.FRAME.value:
                lines.append(f"\n### {element.content}\n")
            else:
                lines.append(f"- {element.content}")
        return f"Miro Board: {self.board_name}\n\n" + "\n".join(lines)
