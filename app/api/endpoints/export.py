"""
백로그 내보내기 API입니다.
생성된 백로그(ProjectOutput)를 Markdown 또는 JSON 파일로 변환합니다.
"""

import json

from fastapi import APIRouter
from fastapi.responses import Response

from app.models import ProjectOutput
from app.utils import format_as_markdown

router = APIRouter()


def _attachment(filename: str) -> dict:
    return {"Content-Disposition": f'attachment; filename="{filename}"'}


@router.post("/markdown")
async def export_markdown(output: ProjectOutput):
    """체크리스트 형태의 Markdown 문서로 내보냅니다."""
    return Response(
        content=format_as_markdown(output),
        media_type="text/markdown; charset=utf-8",
        headers=_attachment("backlog.md"),
    )


@router.post("/json")
async def export_json(output: ProjectOutput):
    """들여쓰기된 JSON 파일로 내보냅니다."""
    return Response(
        content=json.dumps(output.to_wire(), indent=2, ensure_ascii=False),
        media_type="application/json",
        headers=_attachment("backlog.json"),
    )
