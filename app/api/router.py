"""
API 라우터 설정 파일입니다.
각 기능별로 나누어진 API 주소들을 하나로 모으는 역할을 합니다.
"""

from fastapi import APIRouter

from app.api.endpoints import health, boards, process, export

# 메인 API 라우터 생성
api_router = APIRouter()

# 헬스 체크 엔드포인트: 서버 상태 확인용 (/health)
api_router.include_router(
    health.router,
    prefix="/health",
    tags=["health"]
)

# 보드 목록 엔드포인트: 선택 가능한 Miro 보드 조회 (/boards)
api_router.include_router(
    boards.router,
    prefix="/boards",
    tags=["boards"]
)

# 처리 파이프라인 엔드포인트: 파일/보드 → 백로그 생성 (/process)
api_router.include_router(
    process.router,
    prefix="/process",
    tags=["process"]
)

# 내보내기 엔드포인트: 백로그 Markdown/JSON 변환 (/export)
api_router.include_router(
    export.router,
    prefix="/export",
    tags=["export"]
)
