"""입력 유효성 검증 유틸리티.

/process 요청 경계에서 업로드 파일과 보드 URL을 검증합니다.
파이프라인 내부(추출기)는 이미 검증된 입력만 받는다고 가정하지 않으므로
종류 판별/형식 오류는 여전히 추출 단계에서 처리됩니다.
"""

import os
import re
from typing import Optional

from app.config import Settings, get_settings
from app.exceptions import InputValidationError


# 위험한 파일명 패턴
DANGEROUS_PATTERNS = re.compile(r"[<>:\"|?*\x00-\x1f]")


def validate_filename(filename: Optional[str], settings: Optional[Settings] = None) -> str:
    """
    파일명 유효성 검증.

    - 경로 순회 공격 방지 (../, / 등)
    - 널 바이트 제거
    - 위험 문자 검사
    - 길이 제한

    Args:
        filename: 원본 파일명

    Returns:
        정리된 안전한 파일명

    Raises:
        InputValidationError: 유효하지 않은 파일명 (INVALID_FILENAME)
    """
    settings = settings or get_settings()

    if not filename or not filename.strip():
        raise InputValidationError("Filename is empty", error_code="INVALID_FILENAME")

    # 널 바이트 제거
    cleaned = filename.replace("\x00", "")

    # 경로 순회 방지
    basename = os.path.basename(cleaned)
    if basename != cleaned or ".." in cleaned:
        raise InputValidationError(
            "Invalid filename: path traversal detected",
            error_code="INVALID_FILENAME",
            details={"filename": filename},
        )

    if DANGEROUS_PATTERNS.search(basename):
        raise InputValidationError(
            "Filename contains forbidden characters",
            error_code="INVALID_FILENAME",
            details={"filename": filename},
        )

    if len(basename) > settings.max_filename_length:
        raise InputValidationError(
            f"Filename is too long (max {settings.max_filename_length} characters)",
            error_code="INVALID_FILENAME",
            details={"filename": basename, "length": len(basename)},
        )

    return basename


def validate_file_size(file_size: int, settings: Optional[Settings] = None) -> None:
    """
    파일 크기 검증.

    Raises:
        InputValidationError: 크기 제한 초과 (FILE_TOO_LARGE)
    """
    settings = settings or get_settings()
    max_bytes = settings.max_file_size_mb * 1024 * 1024

    if file_size > max_bytes:
        raise InputValidationError(
            f"File size exceeds {settings.max_file_size_mb}MB limit",
            error_code="FILE_TOO_LARGE",
            details={
                "file_size_bytes": file_size,
                "max_size_bytes": max_bytes,
            },
        )


def validate_miro_url(miro_url: Optional[str]) -> str:
    """공백만 있는 URL을 거부하고 앞뒤 공백을 제거한 값을 돌려줍니다."""
    if miro_url is None or not miro_url.strip():
        raise InputValidationError("Invalid Miro URL provided", error_code="INVALID_MIRO_URL")
    return miro_url.strip()
