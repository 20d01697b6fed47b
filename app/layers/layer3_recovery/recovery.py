"""
응답 복구(Response Recovery) 모듈입니다.
생성 모델의 원시 텍스트 응답을 JSON 값으로 되살립니다.

모델 응답은 종종 마크다운 코드 블록, 앞뒤 설명 문장, 또는
출력 토큰 한도에 걸려 잘린 JSON을 포함하므로 단계별 전략을 순서대로 적용합니다.
"""

import json
import logging
from enum import Enum
from typing import Any, Optional

from app.exceptions import UnrecoverableResponse

logger = logging.getLogger(__name__)


class RecoveryStrategy(str, Enum):
    DIRECT = "direct"
    BRACE_EXTRACTION = "brace_extraction"
    TRUNCATION_REPAIR = "truncation_repair"


def strip_code_fences(text: str) -> str:
    """```json / ``` 로 감싼 응답에서 코드 블록 표시를 제거합니다."""
    cleaned = text.strip()
    if cleaned.startswith("```json"):
        cleaned = cleaned[7:]
    elif cleaned.startswith("```"):
        cleaned = cleaned[3:]
    if cleaned.endswith("```"):
        cleaned = cleaned[:-3]
    return cleaned.strip()


class ResponseRecovery:
    """
    원시 응답 → JSON 값 복구기.

    복구 전략 (순서 고정):
    ┌──────────────────────────────────────────────────────────────────┐
    │ 단계       │ 방법                                 │ 성공 조건     │
    ├──────────────────────────────────────────────────────────────────┤
    │ 1. 직접    │ 코드 블록 제거 후 그대로 파싱        │ 파싱 성공     │
    │ 2. 추출    │ 첫 '{' ~ 마지막 '}' 구간만 파싱      │ 파싱 성공     │
    │ 3. 잘림    │ 직접 파싱 오류 위치 앞의 마지막 '},' │ 결과가 dict   │
    │    복구    │ 까지 자르고 ']}' 를 덧붙여 파싱      │               │
    │ 4. 실패    │ -                                    │ 예외 발생     │
    └──────────────────────────────────────────────────────────────────┘

    잘림 복구는 최상위 배열 안에서 잘린 응답만 살릴 수 있는 휴리스틱입니다.
    """

    def __init__(self):
        self.last_strategy: Optional[RecoveryStrategy] = None

    def recover(self, raw_text: str) -> Any:
        value, _ = self.recover_with_strategy(raw_text)
        return value

    def recover_with_strategy(self, raw_text: str) -> tuple[Any, RecoveryStrategy]:
        """
        응답을 복구하고 성공한 전략을 함께 반환합니다.

        Raises:
            UnrecoverableResponse: 모든 전략이 실패한 경우 (직접 파싱 오류 메시지 포함)
        """
        self.last_strategy = None
        cleaned = strip_code_fences(raw_text or "")

        # 1단계: 직접 파싱
        try:
            return self._succeed(json.loads(cleaned), RecoveryStrategy.DIRECT)
        except json.JSONDecodeError as e:
            direct_error = e
            logger.warning(f"[Recovery] 직접 파싱 실패: {e}")

        # 2단계: 중괄호 구간 추출
        start_idx = cleaned.find("{")
        end_idx = cleaned.rfind("}")
        if start_idx != -1 and end_idx > start_idx:
            try:
                value = json.loads(cleaned[start_idx:end_idx + 1])
                return self._succeed(value, RecoveryStrategy.BRACE_EXTRACTION)
            except json.JSONDecodeError as e:
                logger.warning(f"[Recovery] 중괄호 추출 파싱 실패: {e}")
        else:
            logger.warning("[Recovery] 중괄호 구간을 찾지 못함")

        # 3단계: 잘린 응답 복구
        repaired = self._repair_truncation(cleaned, direct_error.pos)
        if repaired is not None:
            return self._succeed(repaired, RecoveryStrategy.TRUNCATION_REPAIR)

        logger.error(f"[Recovery] 최종 복구 실패 (응답 {len(cleaned)}자)")
        raise UnrecoverableResponse(
            f"Failed to parse AI response as JSON: {direct_error}",
            details={"parse_error": str(direct_error), "position": direct_error.pos},
        )

    def _repair_truncation(self, cleaned: str, error_pos: int) -> Optional[dict]:
        head = cleaned[:error_pos]
        cut = head.rfind("},")
        if cut == -1:
            logger.warning("[Recovery] 잘림 복구 불가: '},' 경계 없음")
            return None

        candidate = head[:cut + 1] + "]}"
        try:
            value = json.loads(candidate)
        except json.JSONDecodeError as e:
            logger.warning(f"[Recovery] 잘림 복구 파싱 실패: {e}")
            return None

        if not isinstance(value, dict):
            logger.warning(f"[Recovery] 잘림 복구 결과가 객체가 아님: {type(value).__name__}")
            return None
        return value

    def _succeed(self, value: Any, strategy: RecoveryStrategy) -> tuple[Any, RecoveryStrategy]:
        self.last_strategy = strategy
        if strategy is not RecoveryStrategy.DIRECT:
            logger.info(f"[Recovery] '{strategy.value}' 전략으로 복구 성공")
        return value, strategy
