"""
API 의존성(Dependency) 모음입니다.
lifespan 에서 만든 구성 요소를 app.state 에서 꺼내 엔드포인트에 주입합니다.
테스트에서는 app.dependency_overrides 로 교체합니다.
"""

from fastapi import Request

from app.config import Settings, get_settings
from app.services.board_source import BoardSource
from app.services.orchestrator import PipelineOrchestrator


def get_orchestrator(request: Request) -> PipelineOrchestrator:
    return request.app.state.orchestrator


def get_board_source(request: Request) -> BoardSource:
    return request.app.state.board_source


def get_app_settings() -> Settings:
    return get_settings()
