"""
보드 소스 서비스입니다.
라이브 Miro REST API와 내장 mock 데이터가 같은 계약을 공유합니다.

계약:
- list_boards() -> [Board]
- get_board_meta(board_id) -> BoardMeta
- get_board_items(board_id, cursor) -> BoardItemsPage
- get_board_content(board_id) -> BoardContent (공통 구현: 페이지 순회 + 필터링)
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

import httpx

from app.config import Settings, get_settings
from app.exceptions import BoardNotFound, BoardSourceError
from app.models import (
    Board,
    BoardMeta,
    BoardItem,
    BoardItemsPage,
    BoardContent,
    CONTENT_ITEM_TYPES,
)

logger = logging.getLogger(__name__)


class BoardSource(ABC):
    """모든 보드 소스의 부모 클래스."""

    name: str = "base"

    @abstractmethod
    async def list_boards(self) -> list[Board]:
        """접근 가능한 보드 목록."""
        pass

    @abstractmethod
    async def get_board_meta(self, board_id: str) -> BoardMeta:
        """보드 기본 정보. 없으면 BoardNotFound."""
        pass

    @abstractmethod
    async def get_board_items(
        self,
        board_id: str,
        cursor: Optional[str] = None,
    ) -> BoardItemsPage:
        """보드 요소 한 페이지. next_cursor가 없으면 마지막 페이지."""
        pass

    async def get_board_content(self, board_id: str) -> BoardContent:
        """
        보드 메타데이터와 모든 요소를 가져와 콘텐츠 요소만 남깁니다.

        처리 순서:
        1. 메타데이터 조회
        2. 커서가 없어질 때까지 순차적으로 페이지 조회 (병렬 호출 없음)
        3. 콘텐츠 타입(sticky_note, frame, text, shape)만 남김
        4. 내용이 비어있는 요소 제거
        """
        meta = await self.get_board_meta(board_id)

        items: list[BoardItem] = []
        cursor: Optional[str] = None
        page_count = 0
        while True:
            page = await self.get_board_items(board_id, cursor)
            items.extend(page.items)
            page_count += 1
            cursor = page.next_cursor
            if not cursor:
                break

        elements = [
            item for item in items
            if item.type in CONTENT_ITEM_TYPES and item.content.strip()
        ]

        logger.info(
            f"[{self.name}] 보드 {board_id}: {page_count}페이지, "
            f"전체 {len(items)}개 중 {len(elements)}개 요소 사용"
        )

        return BoardContent(
            board_id=meta.id,
            board_name=meta.name,
            elements=elements,
        )

    async def aclose(self):
        """보유한 연결 리소스 정리 (기본: 없음)."""
        return None


class MiroBoardSource(BoardSource):
    """Miro REST API v2 기반 보드 소스."""

    name = "MiroAPI"

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._settings = settings or get_settings()
        self._base_url = self._settings.miro_api_base
        self._page_size = self._settings.miro_page_size
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """HTTP 클라이언트를 가져옵니다. 키는 첫 사용 시점에 검사합니다."""
        if not self._settings.miro_api_key:
            raise BoardSourceError(
                "MIRO_API_KEY environment variable is not set"
            )
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers={
                    "Authorization": f"Bearer {self._settings.miro_api_key}",
                    "Content-Type": "application/json",
                },
                transport=self._transport,
            )
        return self._client

    async def _fetch(self, endpoint: str, params: Optional[dict] = None, board_id: str = "") -> dict:
        """GET 요청 후 JSON 반환. 404는 BoardNotFound, 그 외 실패는 BoardSourceError."""
        client = self._get_client()
        logger.debug(f"[MiroAPI] GET {endpoint} {params or ''}")

        response = await client.get(endpoint, params=params)

        if response.status_code == 404:
            raise BoardNotFound(f"Board not found: {board_id}", details={"board_id": board_id})
        if response.is_error:
            logger.error(f"[MiroAPI] 에러: {response.status_code} {response.text}")
            raise BoardSourceError(
                f"Miro API error: {response.status_code} - {response.text}",
                details={"status_code": response.status_code},
            )
        return response.json()

    async def list_boards(self) -> list[Board]:
        data = await self._fetch("/boards", params={"limit": self._page_size})
        return [
            Board(
                id=board["id"],
                name=board.get("name", ""),
                description=board.get("description"),
                last_modified=board.get("modifiedAt", ""),
                thumbnail_url=(board.get("picture") or {}).get("imageURL"),
            )
            for board in data.get("data", [])
        ]

    async def get_board_meta(self, board_id: str) -> BoardMeta:
        data = await self._fetch(f"/boards/{board_id}", board_id=board_id)
        return BoardMeta(id=data["id"], name=data.get("name", ""))

    async def get_board_items(
        self,
        board_id: str,
        cursor: Optional[str] = None,
    ) -> BoardItemsPage:
        params = {"limit": self._page_size}
        if cursor:
            params["cursor"] = cursor

        data = await self._fetch(f"/boards/{board_id}/items", params=params, board_id=board_id)

        items = []
        for raw in data.get("data", []):
            item_data = raw.get("data") or {}
            items.append(BoardItem(
                id=str(raw.get("id", "")),
                type=raw.get("type", ""),
                content=item_data.get("content") or item_data.get("title") or "",
                parent_id=(raw.get("parent") or {}).get("id"),
                position=raw.get("position"),
                color=(raw.get("style") or {}).get("fillColor"),
            ))

        return BoardItemsPage(items=items, next_cursor=data.get("cursor") or None)

    async def aclose(self):
        if self._client is not None:
            await self._client.aclose()
            self._client = None


class MockBoardSource(BoardSource):
    """
    개발/데모용 내장 mock 보드 소스.
    라이브 소스와 동일하게 커서 단위로 페이지를 나눠서 반환합니다.
    """

    name = "MockBoards"

    def __init__(
        self,
        boards: Optional[list[Board]] = None,
        contents: Optional[dict[str, BoardContent]] = None,
        page_size: int = 50,
    ):
        from app.services.mock_boards import MOCK_BOARDS, MOCK_BOARD_CONTENT

        self._boards = boards if boards is not None else MOCK_BOARDS
        self._contents = contents if contents is not None else MOCK_BOARD_CONTENT
        self._page_size = page_size

    def _get(self, board_id: str) -> BoardContent:
        content = self._contents.get(board_id)
        if content is None:
            raise BoardNotFound(f"Board not found: {board_id}", details={"board_id": board_id})
        return content

    async def list_boards(self) -> list[Board]:
        return list(self._boards)

    async def get_board_meta(self, board_id: str) -> BoardMeta:
        content = self._get(board_id)
        return BoardMeta(id=content.board_id, name=content.board_name)

    async def get_board_items(
        self,
        board_id: str,
        cursor: Optional[str] = None,
    ) -> BoardItemsPage:
        elements = self._get(board_id).elements
        start = int(cursor) if cursor else 0
        end = start + self._page_size
        next_cursor = str(end) if end < len(elements) else None
        return BoardItemsPage(items=elements[start:end], next_cursor=next_cursor)


def create_board_source(settings: Optional[Settings] = None) -> BoardSource:
    """설정 스위치(miro_enabled)에 따라 라이브 또는 mock 소스를 생성합니다."""
    settings = settings or get_settings()
    if settings.miro_enabled:
        logger.info("[BoardSource] Miro API 사용")
        return MiroBoardSource(settings)
    logger.info("[BoardSource] mock 데이터 사용 (Miro 비활성화)")
    return MockBoardSource()
