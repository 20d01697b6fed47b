"""
디버그 산출물 저장소입니다.
응답 복구에 실패했을 때 생성 모델의 원시 응답을 파일로 남겨서
나중에 프롬프트/모델 문제를 분석할 수 있게 합니다.
"""

import logging
import uuid
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

import aiofiles

logger = logging.getLogger(__name__)


class DebugArtifactStore:
    """원시 응답 텍스트 파일 저장소."""

    def __init__(self, base_path: Union[str, Path] = "workspace/debug"):
        self.base_path = Path(base_path)

    def _build_path(self) -> Path:
        timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
        return self.base_path / f"raw-response-{timestamp}-{uuid.uuid4().hex[:8]}.txt"

    async def save_raw_response(self, raw_text: str) -> Optional[str]:
        """
        원시 응답을 저장하고 파일 경로를 반환합니다.

        저장 실패는 로그만 남기고 None을 반환합니다.
        (호출자가 처리 중인 원래 오류를 가리면 안 되기 때문)
        """
        file_path = self._build_path()
        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            async with aiofiles.open(file_path, "w", encoding="utf-8") as f:
                await f.write(raw_text)
        except OSError as e:
            logger.error(f"[DebugStore] 원시 응답 저장 실패 {file_path}: {e}", exc_info=True)
            return None

        logger.info(f"[DebugStore] 원시 응답 저장: {file_path} ({len(raw_text)}자)")
        return str(file_path)
