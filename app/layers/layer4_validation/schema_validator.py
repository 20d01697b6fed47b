"""
스키마 검증(Schema Validation) 모듈입니다.
복구된 JSON 값이 백로그 스키마(ProjectOutput)를 완전히 만족하는지 확인합니다.
"""

import logging
from typing import Any, Sequence, Union

from pydantic import BaseModel, ValidationError

from app.exceptions import SchemaViolation
from app.models import ProjectOutput

logger = logging.getLogger(__name__)

ROOT_PATH = "(root)"


class SchemaIssue(BaseModel):
    """스키마 위반 한 건. path 예: epics[0].stories[1].id"""
    path: str
    message: str


def format_path(loc: Sequence[Union[str, int]]) -> str:
    """pydantic loc 튜플을 epics[0].stories[1].id 형태의 경로로 변환합니다."""
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}" if path else str(part)
    return path or ROOT_PATH


class SchemaValidator:
    """ProjectOutput 스키마 검증기."""

    def validate(self, value: Any) -> ProjectOutput:
        """
        값을 검증하고 타입이 지정된 ProjectOutput을 반환합니다.

        Raises:
            SchemaViolation: 위반 사항이 하나라도 있으면 전체 목록과 함께 발생
        """
        if not isinstance(value, dict):
            issue = SchemaIssue(
                path=ROOT_PATH,
                message=f"Expected object, received {type(value).__name__}",
            )
            logger.error(f"[Validator] 최상위 값이 객체가 아님: {type(value).__name__}")
            raise SchemaViolation([issue])

        try:
            output = ProjectOutput.model_validate(value)
        except ValidationError as e:
            issues = [
                SchemaIssue(path=format_path(err["loc"]), message=err["msg"])
                for err in e.errors()
            ]
            logger.error(f"[Validator] 스키마 위반 {len(issues)}건")
            raise SchemaViolation(issues) from e

        logger.info(
            f"[Validator] 검증 성공 - 에픽 {len(output.epics)}개, 스토리 {output.story_count}개, "
            f"리스크 {len(output.risks)}개, 가정 {len(output.assumptions)}개"
        )
        return output
