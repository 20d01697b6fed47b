"""
콘텐츠 추출기(Content Extractor) 모듈입니다.
입력 디스크립터(파일 또는 보드 참조)의 종류를 판별하고
알맞은 추출기를 골라 단일 평문 문서(ContentDocument)를 만들어줍니다.
"""

import logging
import re
from typing import Dict, Optional

from app.exceptions import InvalidReferenceFormat, UnsupportedInputKind
from app.models import (
    BoardReference,
    ContentDocument,
    FileInput,
    InputDescriptor,
    SourceKind,
)
from app.services.board_source import BoardSource
from .base_extractor import BaseExtractor

logger = logging.getLogger(__name__)


# Miro 보드 URL 예시:
#   https://miro.com/app/board/uXjVGYoUDTk=/
#   https://miro.com/app/board/uXjVGYoUDTk=/?moveToWidget=...
BOARD_URL_PATTERN = re.compile(r"miro\.com/app/board/([a-zA-Z0-9_=-]+)")
BOARD_ID_PATTERN = re.compile(r"^[a-zA-Z0-9_=-]+$")

# 컨텐츠 타입(MIME Type) → 입력 종류 (접두어 일치)
MIME_KIND_MAP = [
    ("image/", SourceKind.IMAGE),
    ("application/pdf", SourceKind.PDF),
    ("application/json", SourceKind.JSON),
    ("text/", SourceKind.TEXT),
]

EXTENSION_KIND_MAP = {
    # 이미지
    "jpg": SourceKind.IMAGE,
    "jpeg": SourceKind.IMAGE,
    "png": SourceKind.IMAGE,
    "gif": SourceKind.IMAGE,
    "bmp": SourceKind.IMAGE,
    "webp": SourceKind.IMAGE,
    "tiff": SourceKind.IMAGE,
    # 문서
    "pdf": SourceKind.PDF,
    "json": SourceKind.JSON,
    # 텍스트
    "txt": SourceKind.TEXT,
    "md": SourceKind.TEXT,
    "markdown": SourceKind.TEXT,
}


class ContentExtractor:
    """
    입력 종류에 맞는 추출기를 선택해서 실행하는 클래스입니다.
    """

    def __init__(self, generation_client, board_source: BoardSource):
        """
        초기화 함수.

        Args:
            generation_client: 이미지/PDF OCR에 사용할 생성 클라이언트
            board_source: 라이브 또는 mock 보드 소스
        """
        self.generation_client = generation_client
        self.board_source = board_source
        self._extractors: Dict[SourceKind, BaseExtractor] = {}

        self._register_extractors()

    def _register_extractors(self):
        """모든 종류의 추출기를 등록하는 내부 함수"""
        from .extractors import TextExtractor, JSONExtractor, VisionExtractor, BoardExtractor

        extractors = [
            TextExtractor(),
            JSONExtractor(),
            VisionExtractor(self.generation_client),  # 이미지 + PDF
            BoardExtractor(self.board_source),
        ]
        for extractor in extractors:
            for kind in extractor.supported_kinds:
                self._extractors[kind] = extractor

    def get_extractor(self, kind: SourceKind) -> BaseExtractor:
        """입력 종류에 맞는 추출기 인스턴스를 반환합니다."""
        extractor = self._extractors.get(kind)
        if extractor is None:
            raise UnsupportedInputKind(f"Unsupported input kind: {kind}")
        return extractor

    def detect_kind(self, filename: str, mime_type: Optional[str] = None) -> SourceKind:
        """
        MIME 타입을 먼저 보고, 판별이 안 되면 확장자로 입력 종류를 판단합니다.
        둘 다 실패하면 UnsupportedInputKind.
        """
        mime = (mime_type or "").lower().strip()
        for prefix, kind in MIME_KIND_MAP:
            if mime.startswith(prefix):
                return kind

        ext = filename.lower().split(".")[-1] if "." in filename else ""
        kind = EXTENSION_KIND_MAP.get(ext)
        if kind is None:
            raise UnsupportedInputKind(
                f"Unsupported file type: {mime_type or 'unknown'}",
                details={"filename": filename, "mime_type": mime_type},
            )
        return kind

    def resolve_board_id(self, reference: str) -> str:
        """보드 URL에서 ID를 뽑아내거나, 이미 ID라면 그대로 사용합니다."""
        reference = (reference or "").strip()

        match = BOARD_URL_PATTERN.search(reference)
        if match:
            return match.group(1)

        if BOARD_ID_PATTERN.match(reference):
            return reference

        raise InvalidReferenceFormat(
            "Invalid Miro URL format",
            details={"reference": reference},
        )

    async def extract(self, descriptor: InputDescriptor) -> ContentDocument:
        """디스크립터 종류에 따라 파일 또는 보드 추출을 수행합니다."""
        if isinstance(descriptor, FileInput):
            return await self.extract_file(descriptor)
        if isinstance(descriptor, BoardReference):
            board_id = self.resolve_board_id(descriptor.reference)
            return await self.extract_board(board_id)
        raise UnsupportedInputKind(f"Unsupported input descriptor: {type(descriptor).__name__}")

    async def extract_file(self, file: FileInput) -> ContentDocument:
        """업로드 파일에서 텍스트를 추출합니다."""
        kind = self.detect_kind(file.filename, file.mime_type)
        extractor = self.get_extractor(kind)

        document = await extractor.extract(file, metadata={"kind": kind})
        logger.info(
            f"[ContentExtractor] {kind.value} 파일에서 {document.word_count}개 단어 추출"
        )
        return document

    async def extract_board(self, board_id: str) -> ContentDocument:
        """해석된 보드 ID로 보드 내용을 추출합니다."""
        document = await self.get_extractor(SourceKind.BOARD).extract(board_id)
        logger.info(f"[ContentExtractor] 보드 {board_id}에서 {document.word_count}개 단어 추출")
        return document
