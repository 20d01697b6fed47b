"""Image and PDF extractor using Gemini vision for OCR."""

import io
import logging
from typing import Optional

from PyPDF2 import PdfReader

from app.exceptions import MalformedInput
from app.models import ContentDocument, FileInput, SourceKind
from app.services.gemini_client import Attachment
from ..base_extractor import BaseExtractor
from ..prompts.extraction_prompts import IMAGE_EXTRACTION_PROMPT, PDF_EXTRACTION_PROMPT

logger = logging.getLogger(__name__)


IMAGE_MEDIA_TYPES = {
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".bmp": "image/bmp",
    ".webp": "image/webp",
    ".tiff": "image/tiff",
}


class VisionExtractor(BaseExtractor):
    """Sends image/PDF payloads to a vision-capable model with an OCR instruction."""

    def __init__(self, generation_client):
        self.generation_client = generation_client

    @property
    def supported_kinds(self) -> list[SourceKind]:
        return [SourceKind.IMAGE, SourceKind.PDF]

    async def extract(
        self,
        source: FileInput,
        metadata: Optional[dict] = None,
    ) -> ContentDocument:
        """
        OCR the payload. The model's text is trimmed and returned verbatim.

        metadata["kind"] selects image vs pdf; defaults to image.
        """
        kind = (metadata or {}).get("kind", SourceKind.IMAGE)

        if kind == SourceKind.PDF:
            # 로컬에서 먼저 열어봄: 손상된 PDF는 네트워크 호출 전에 거부
            page_count = self._count_pdf_pages(source)
            attachment = Attachment(data=source.content, mime_type="application/pdf")
            prompt = PDF_EXTRACTION_PROMPT
        else:
            page_count = None
            attachment = Attachment(data=source.content, mime_type=self._image_media_type(source))
            prompt = IMAGE_EXTRACTION_PROMPT

        text = await self.generation_client.generate(prompt, attachment)
        text = text.strip()

        logger.info(f"[VisionExtractor] {kind.value}: {len(text)} chars 추출 ({source.filename})")

        return ContentDocument.from_text(text, kind, page_count=page_count)

    def _image_media_type(self, source: FileInput) -> str:
        """MIME 타입이 이미지면 그대로, 아니면 확장자로 추정 (기본 image/png)."""
        mime_type = (source.mime_type or "").lower()
        if mime_type.startswith("image/"):
            return mime_type
        ext = "." + source.filename.lower().split(".")[-1] if "." in source.filename else ""
        return IMAGE_MEDIA_TYPES.get(ext, "image/png")

    def _count_pdf_pages(self, source: FileInput) -> int:
        """PyPDF2로 페이지 수를 셉니다. 열 수 없으면 MalformedInput."""
        try:
            reader = PdfReader(io.BytesIO(source.content))
            return len(reader.pages)
        except Exception as e:
            raise MalformedInput(
                f"Failed to read PDF file: {e}",
                details={"filename": source.filename},
            ) from e
