"""
백로그 생성 처리 API입니다.
업로드 파일 하나 또는 Miro 보드 URL 하나를 받아 파이프라인을 실행하고
검증된 백로그(ProjectOutput)를 반환합니다.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.responses import JSONResponse

from app.api.deps import get_app_settings, get_orchestrator
from app.config import Settings
from app.exceptions import (
    InputValidationError,
    InvalidReferenceFormat,
    MalformedInput,
    UnsupportedInputKind,
)
from app.models import ApiResponse, BoardReference, FileInput
from app.services.orchestrator import PipelineOrchestrator
from app.utils import validate_file_size, validate_filename, validate_miro_url

logger = logging.getLogger(__name__)

router = APIRouter()


def classify_error(message: str) -> tuple[int, str]:
    """
    에러 메시지로 HTTP 상태 코드와 에러 코드를 결정합니다.

    메시지 문자열 기반 규칙 (위에서부터 먼저 일치하는 것 적용):
    - "not found"               → 404 BOARD_NOT_FOUND
    - "validation" / "schema"   → 400 VALIDATION_ERROR
    - "Unsupported" / "Invalid" → 400 INVALID_INPUT
    - 그 외                     → 500 PROCESSING_FAILED
    """
    if "not found" in message:
        return 404, "BOARD_NOT_FOUND"
    if "validation" in message or "schema" in message:
        return 400, "VALIDATION_ERROR"
    if "Unsupported" in message or "Invalid" in message:
        return 400, "INVALID_INPUT"
    return 500, "PROCESSING_FAILED"


# 입력 자체의 문제는 메시지와 관계없이 400
INPUT_ERRORS = (MalformedInput, UnsupportedInputKind, InvalidReferenceFormat)


def classify_exception(error: Exception) -> tuple[int, str]:
    """입력 에러 타입을 먼저 확인하고, 나머지는 메시지 규칙(classify_error)으로 분류합니다."""
    if isinstance(error, INPUT_ERRORS):
        return 400, "INVALID_INPUT"
    return classify_error(str(error))


def _fail(status_code: int, code: str, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ApiResponse.fail(code, message))


async def _run(orchestrator: PipelineOrchestrator, descriptor) -> JSONResponse:
    """파이프라인을 실행하고 결과 또는 분류된 에러 응답을 만듭니다."""
    try:
        output = await orchestrator.process(descriptor)
    except Exception as e:
        message = str(e) or "Processing failed"
        status_code, code = classify_exception(e)
        logger.error(f"[API] 처리 실패 ({code}): {message}", exc_info=status_code == 500)
        return _fail(status_code, code, message)

    return JSONResponse(content=ApiResponse.ok(output.to_wire()))


@router.post("")
async def process_input(
    file: Optional[UploadFile] = File(None),
    miro_url: Optional[str] = Form(None, alias="miroUrl"),
    orchestrator: PipelineOrchestrator = Depends(get_orchestrator),
    settings: Settings = Depends(get_app_settings),
):
    """
    백로그 생성 API.

    - file: 이미지(png, jpg...), PDF, JSON, 텍스트(txt, md) 파일
    - miroUrl: Miro 보드 URL 또는 보드 ID

    둘 중 정확히 하나만 보내야 합니다.
    """
    if file is None and not miro_url:
        return _fail(400, "MISSING_INPUT", "Either file or miroUrl must be provided")
    if file is not None and miro_url:
        return _fail(400, "MULTIPLE_INPUTS", "Only one of file or miroUrl should be provided")

    try:
        if file is not None:
            content = await file.read()
            validate_file_size(len(content), settings)
            filename = validate_filename(file.filename, settings)
            logger.info(f"[API] 파일 처리: {filename} ({len(content)} bytes)")
            descriptor = FileInput(
                content=content,
                mime_type=file.content_type or "",
                filename=filename,
            )
        else:
            reference = validate_miro_url(miro_url)
            logger.info(f"[API] 보드 처리: {reference}")
            descriptor = BoardReference(reference=reference)
    except InputValidationError as e:
        return _fail(400, e.error_code, e.message)

    return await _run(orchestrator, descriptor)


@router.post("/{board_id}")
async def process_board(
    board_id: str,
    orchestrator: PipelineOrchestrator = Depends(get_orchestrator),
):
    """보드 ID로 바로 처리하는 기존 경로."""
    logger.info(f"[API] 보드 처리 (ID): {board_id}")
    return await _run(orchestrator, BoardReference(reference=board_id))
