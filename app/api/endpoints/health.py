"""
헬스 체크(Health Check) 엔드포인트입니다.
서버가 살아서 정상적으로 응답하는지 확인하는 용도입니다.
"""

from datetime import datetime

from fastapi import APIRouter, Depends

from app.api.deps import get_app_settings
from app.config import Settings

router = APIRouter()


@router.get("")
async def health_check(settings: Settings = Depends(get_app_settings)):
    """
    기본 상태 확인 함수.
    Miro가 활성화되어 있는데 API 키가 없으면 "degraded"를 반환합니다.
    """
    has_api_key = bool(settings.miro_api_key)
    status = "ok"
    if settings.miro_enabled and not has_api_key:
        status = "degraded"

    return {
        "status": status,
        "timestamp": datetime.now().isoformat(),
        "miro": {
            "enabled": settings.miro_enabled,
            "connected": settings.miro_enabled and has_api_key,
            "hasApiKey": has_api_key,
        },
    }


@router.get("/detail")
async def health_check_detail(settings: Settings = Depends(get_app_settings)):
    """
    상세 상태 확인 함수.
    현재 설정 정보(어떤 AI 모델을 쓰는지, 보드 소스 모드 등)도 같이 보여줍니다.
    """
    return {
        "status": "ok",
        "config": {
            "gemini_model": settings.gemini_model,  # 사용 중인 AI 모델
            "max_output_tokens": settings.max_output_tokens,
            "api_key_configured": bool(settings.google_api_key),  # API 키 설정 여부
            "board_mode": "miro" if settings.miro_enabled else "mock",
            "max_file_size_mb": settings.max_file_size_mb,
        },
    }
