"""JSON file extractor."""

import json
from typing import Optional

from app.exceptions import MalformedInput
from app.models import ContentDocument, FileInput, SourceKind
from ..base_extractor import BaseExtractor


class JSONExtractor(BaseExtractor):
    """Parses JSON and re-serializes it with stable indentation."""

    @property
    def supported_kinds(self) -> list[SourceKind]:
        return [SourceKind.JSON]

    async def extract(
        self,
        source: FileInput,
        metadata: Optional[dict] = None,
    ) -> ContentDocument:
        try:
            data = json.loads(source.content.decode("utf-8-sig"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise MalformedInput(
                f"Failed to parse JSON file: {e}",
                details={"filename": source.filename},
            ) from e

        text = json.dumps(data, indent=2, ensure_ascii=False)
        return ContentDocument.from_text(text, SourceKind.JSON)
