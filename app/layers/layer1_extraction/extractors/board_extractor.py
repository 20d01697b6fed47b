"""Board (Miro) extractor."""

import logging
from typing import Optional

from app.exceptions import EmptyBoard
from app.models import ContentDocument, SourceKind
from app.services.board_source import BoardSource
from ..base_extractor import BaseExtractor

logger = logging.getLogger(__name__)


class BoardExtractor(BaseExtractor):
    """
    보드 요소를 텍스트 개요로 변환하는 추출기.

    라이브/mock 어느 소스가 활성화되어 있는지는 호출자에게 드러나지 않습니다.
    """

    def __init__(self, board_source: BoardSource):
        self.board_source = board_source

    @property
    def supported_kinds(self) -> list[SourceKind]:
        return [SourceKind.BOARD]

    async def extract(
        self,
        source: str,
        metadata: Optional[dict] = None,
    ) -> ContentDocument:
        """source는 이미 해석된 보드 ID입니다."""
        content = await self.board_source.get_board_content(source)

        if not content.elements:
            raise EmptyBoard(
                "Board has no content to process",
                details={"board_id": source},
            )

        logger.info(f"[BoardExtractor] '{content.board_name}' 요소 {len(content.elements)}개")

        return ContentDocument.from_text(
            content.to_outline(),
            SourceKind.BOARD,
            board_name=content.board_name,
        )
