"""
텍스트 파일(.txt)과 마크다운 파일(.md) 추출기입니다.
"""

from typing import Optional

from app.models import ContentDocument, FileInput, SourceKind
from ..base_extractor import BaseExtractor


class TextExtractor(BaseExtractor):
    """일반 텍스트 및 마크다운 문서를 그대로 읽는 추출기입니다."""

    @property
    def supported_kinds(self) -> list[SourceKind]:
        return [SourceKind.TEXT]

    async def extract(
        self,
        source: FileInput,
        metadata: Optional[dict] = None,
    ) -> ContentDocument:
        """텍스트를 UTF-8로 읽습니다 (디코딩할 수 없는 바이트는 대체 문자로)."""
        raw_text = source.content.decode("utf-8", errors="replace")
        return ContentDocument.from_text(raw_text, SourceKind.TEXT)
