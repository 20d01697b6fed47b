"""
백로그 생성 시스템 커스텀 예외 계층입니다.
파이프라인 각 단계별 구조화된 에러 코드와 메시지를 제공합니다.

모든 예외는 현재 실행(run)에 대해 종료 조건이며, 내부에서 재시도하지 않습니다.
"""

from typing import Optional, Any


class BacklogGeneratorError(Exception):
    """백로그 생성 시스템 기본 예외 클래스."""

    def __init__(
        self,
        message: str,
        error_code: str = "ERR_UNKNOWN",
        details: Optional[Any] = None,
    ):
        self.message = message
        self.error_code = error_code
        self.details = details
        super().__init__(self.message)


class UnsupportedInputKind(BacklogGeneratorError):
    """Layer 1: MIME 타입과 확장자 모두로 입력 종류를 판별할 수 없음."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_INPUT_KIND", details=details)


class MalformedInput(BacklogGeneratorError):
    """Layer 1: 입력 내용이 손상되었거나 형식이 잘못됨 (예: 잘못된 JSON)."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_MALFORMED_INPUT", details=details)


class InvalidReferenceFormat(BacklogGeneratorError):
    """Layer 1: 보드 URL/ID 형식이 올바르지 않음."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_BOARD_REF", details=details)


class BoardNotFound(BacklogGeneratorError):
    """Layer 1: 보드를 찾을 수 없음 (404)."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_BOARD_NOT_FOUND", details=details)


class EmptyBoard(BacklogGeneratorError):
    """Layer 1: 필터링 후 내용이 있는 요소가 하나도 없음."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_BOARD_EMPTY", details=details)


class BoardSourceError(BacklogGeneratorError):
    """보드 소스(Miro API) 통신 에러 (404 이외의 실패)."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_BOARD_SOURCE", details=details)


class GenerationUnavailable(BacklogGeneratorError):
    """생성 모델 자격 증명이 설정되지 않음 (호출 시점에 검사)."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_GEN_UNAVAILABLE", details=details)


class UnrecoverableResponse(BacklogGeneratorError):
    """Layer 3: 모든 복구 전략이 실패하여 모델 응답을 JSON으로 해석할 수 없음."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_RECOVERY", details=details)


class SchemaViolation(BacklogGeneratorError):
    """Layer 4: 스키마 검증 실패. 위반 사항 전체를 issues에 담습니다."""

    def __init__(self, issues: list, details: Optional[Any] = None):
        self.issues = issues
        summary = ", ".join(f"{issue.path}: {issue.message}" for issue in issues)
        super().__init__(
            f"Schema validation failed: {summary}",
            error_code="ERR_SCHEMA",
            details=details if details is not None else [i.model_dump() for i in issues],
        )


class InputValidationError(BacklogGeneratorError):
    """요청 입력 유효성 검증 에러 (400 응답)."""

    def __init__(self, message: str, error_code: str = "ERR_INPUT_001", details: Optional[Any] = None):
        super().__init__(message, error_code=error_code, details=details)
