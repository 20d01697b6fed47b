"""모든 콘텐츠 추출기(Extractor)들이 상속받는 기본 클래스입니다.

각 추출기는 하나 이상의 입력 종류(이미지, PDF, JSON, 텍스트, 보드)를 담당하고
결과를 단일 평문 문서(ContentDocument)로 정규화합니다.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from app.models import ContentDocument, SourceKind


class BaseExtractor(ABC):
    """
    모든 추출기의 부모(Base) 클래스입니다.

    모든 추출기는 이 클래스를 상속받아 `supported_kinds`와 `extract`를 구현해야 합니다.
    ContentExtractor는 `supported_kinds`를 보고 추출기를 등록합니다.
    """

    @property
    @abstractmethod
    def supported_kinds(self) -> list[SourceKind]:
        """이 추출기가 처리할 수 있는 입력 종류 목록 (예: [SourceKind.TEXT])"""
        pass

    @abstractmethod
    async def extract(
        self,
        source: Any,
        metadata: Optional[dict] = None,
    ) -> ContentDocument:
        """
        입력에서 텍스트를 추출하는 함수. (자식 클래스에서 반드시 구현해야 함)

        Args:
            source: 파일 입력(FileInput) 또는 보드 ID
            metadata: 추가 정보

        Returns:
            ContentDocument: 추출된 평문 문서
        """
        pass
