"""
보드 목록 API입니다.
현재 활성화된 보드 소스(Miro 또는 mock)에서 선택 가능한 보드를 보여줍니다.
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.api.deps import get_board_source
from app.models import ApiResponse
from app.services.board_source import BoardSource

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("")
async def list_boards(board_source: BoardSource = Depends(get_board_source)):
    """접근 가능한 보드 목록을 반환합니다."""
    try:
        boards = await board_source.list_boards()
    except Exception as e:
        logger.error(f"[API] 보드 목록 조회 실패: {e}")
        return JSONResponse(
            status_code=500,
            content=ApiResponse.fail("BOARDS_FETCH_FAILED", str(e) or "Failed to fetch boards"),
        )

    return ApiResponse.ok({
        "boards": [board.model_dump(mode="json", by_alias=True) for board in boards],
    })
