"""
프롬프트 빌더(Prompt Builder) 모듈입니다.
추출된 문서를 생성 모델에 보낼 단일 프롬프트 문자열로 조립합니다.

템플릿은 prompts/{role}.md 파일에서 읽고, 읽을 수 없으면
같은 지시문을 가진 내장(fallback) 템플릿을 사용합니다.
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from app.models import ContentDocument
from .prompts.orchestrator_prompts import ORCHESTRATOR_FALLBACK_TEMPLATE

logger = logging.getLogger(__name__)

DEFAULT_PROMPTS_DIR = Path(__file__).parent / "prompts"
PLACEHOLDER_PATTERN = re.compile(r"\{\{(\w+)\}\}")


@dataclass(frozen=True)
class TemplateLoad:
    """템플릿 로드 결과. value 또는 error 중 하나만 채워집니다."""

    value: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.value is not None

    def unwrap_or(self, fallback: str) -> str:
        return self.value if self.value is not None else fallback


class PromptBuilder:
    """문서 → 프롬프트 변환기. 같은 입력에는 항상 같은 출력을 냅니다."""

    ROLE = "orchestrator"

    def __init__(self, prompts_dir: Optional[Union[str, Path]] = None):
        self.prompts_dir = Path(prompts_dir) if prompts_dir else DEFAULT_PROMPTS_DIR

    def load_template(self, role: str) -> TemplateLoad:
        """prompts/{role}.md 를 읽습니다. 실패해도 예외 대신 error를 돌려줍니다."""
        path = self.prompts_dir / f"{role}.md"
        try:
            return TemplateLoad(value=path.read_text(encoding="utf-8"))
        except OSError as e:
            return TemplateLoad(error=f"{path}: {e}")

    def build_context(self, document: ContentDocument) -> dict[str, str]:
        return {
            "content": document.text,
            "source_kind": document.source_kind.value,
            "word_count": str(document.word_count),
            "board_name": document.board_name or "Uploaded content",
        }

    def build(self, document: ContentDocument) -> str:
        """
        문서로 최종 프롬프트를 만듭니다.

        치환은 한 번의 정규식 패스로 처리하므로 본문 안에 {{...}} 같은 문자열이
        들어 있어도 다시 치환되지 않습니다. 알 수 없는 플레이스홀더는 그대로 둡니다.
        """
        loaded = self.load_template(self.ROLE)
        if not loaded.ok:
            logger.warning(f"[PromptBuilder] 템플릿 로드 실패, 내장 템플릿 사용: {loaded.error}")
        template = loaded.unwrap_or(ORCHESTRATOR_FALLBACK_TEMPLATE)

        context = self.build_context(document)
        prompt = PLACEHOLDER_PATTERN.sub(
            lambda m: context.get(m.group(1), m.group(0)),
            template,
        )

        logger.debug(f"[PromptBuilder] 프롬프트 생성 완료 ({len(prompt)}자)")
        return prompt
