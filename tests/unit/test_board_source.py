"""Board source unit tests.

MiroBoardSource is exercised against httpx.MockTransport (no network);
MockBoardSource is checked against the bundled demo boards.
"""

import httpx
import pytest

from app.config import Settings
from app.exceptions import BoardNotFound, BoardSourceError
from app.services.board_source import MiroBoardSource, MockBoardSource, create_board_source
from app.services.mock_boards import MOCK_BOARDS, MOCK_BOARD_CONTENT


def miro_settings(**overrides) -> Settings:
    values = {"miro_enabled": True, "miro_api_key": "test-token", "miro_page_size": 2}
    values.update(overrides)
    return Settings(**values)


ITEM_PAGES = {
    None: {
        "data": [
            {"id": "1", "type": "frame", "data": {"title": "Goals"}},
            {"id": "2", "type": "sticky_note", "data": {"content": "Faster onboarding"},
             "parent": {"id": "1"}, "style": {"fillColor": "yellow"}},
        ],
        "cursor": "page-2",
    },
    "page-2": {
        "data": [
            {"id": "3", "type": "connector", "data": {}},
            {"id": "4", "type": "sticky_note", "data": {"content": "   "}},
        ],
        "cursor": "page-3",
    },
    "page-3": {
        "data": [
            {"id": "5", "type": "text", "data": {"content": "Mobile first"}},
            {"id": "6", "type": "image", "data": {"title": "logo.png"}},
        ],
    },
}


def miro_handler(requests: list):
    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        path = request.url.path

        if path == "/v2/boards":
            return httpx.Response(200, json={"data": [
                {"id": "b1", "name": "Roadmap", "description": "Q3",
                 "modifiedAt": "2024-05-01T10:00:00Z", "picture": {"imageURL": "https://img/1.png"}},
                {"id": "b2", "name": "Retro"},
            ]})
        if path == "/v2/boards/b1":
            return httpx.Response(200, json={"id": "b1", "name": "Roadmap"})
        if path == "/v2/boards/b1/items":
            return httpx.Response(200, json=ITEM_PAGES[request.url.params.get("cursor")])
        if path == "/v2/boards/broken":
            return httpx.Response(500, text="upstream failure")
        return httpx.Response(404, json={"message": "Not found"})

    return handler


@pytest.fixture
def requests():
    return []


@pytest.fixture
async def miro(requests):
    source = MiroBoardSource(miro_settings(), transport=httpx.MockTransport(miro_handler(requests)))
    yield source
    await source.aclose()


class TestMiroBoardSource:
    async def test_list_boards_maps_fields(self, miro, requests):
        boards = await miro.list_boards()

        assert [b.id for b in boards] == ["b1", "b2"]
        assert boards[0].last_modified == "2024-05-01T10:00:00Z"
        assert boards[0].thumbnail_url == "https://img/1.png"
        assert boards[1].thumbnail_url is None
        assert requests[0].headers["Authorization"] == "Bearer test-token"

    async def test_content_follows_cursor_until_absent(self, miro, requests):
        content = await miro.get_board_content("b1")

        item_requests = [r for r in requests if r.url.path.endswith("/items")]
        assert len(item_requests) == 3
        assert item_requests[0].url.params.get("cursor") is None
        assert item_requests[1].url.params["cursor"] == "page-2"
        assert item_requests[2].url.params["cursor"] == "page-3"
        assert item_requests[0].url.params["limit"] == "2"

        assert content.board_name == "Roadmap"
        assert [e.id for e in content.elements] == ["1", "2", "5"]
        assert content.elements[0].content == "Goals"
        assert content.elements[1].parent_id == "1"
        assert content.elements[1].color == "yellow"

    async def test_unknown_board_is_not_found(self, miro):
        with pytest.raises(BoardNotFound) as exc_info:
            await miro.get_board_content("nope")
        assert exc_info.value.message == "Board not found: nope"

    async def test_other_errors(self, miro):
        with pytest.raises(BoardSourceError) as exc_info:
            await miro.get_board_meta("broken")
        assert "500" in exc_info.value.message

    async def test_missing_key_checked_at_first_use(self, requests):
        source = MiroBoardSource(
            miro_settings(miro_api_key=""),
            transport=httpx.MockTransport(miro_handler(requests)),
        )

        with pytest.raises(BoardSourceError) as exc_info:
            await source.list_boards()
        assert "MIRO_API_KEY" in exc_info.value.message
        assert requests == []


class TestMockBoardSource:
    async def test_lists_demo_boards(self):
        boards = await MockBoardSource().list_boards()
        assert [b.id for b in boards] == ["board-001", "board-002", "board-003"]
        assert boards == MOCK_BOARDS

    @pytest.mark.parametrize("board_id", sorted(MOCK_BOARD_CONTENT))
    async def test_demo_content_is_not_empty(self, board_id):
        content = await MockBoardSource().get_board_content(board_id)
        assert content.elements
        assert any(e.type == "frame" for e in content.elements)

    async def test_pagination_matches_unpaged(self, retro_board):
        source = MockBoardSource(boards=[], contents={"retro-1": retro_board}, page_size=4)

        page = await source.get_board_items("retro-1")
        assert len(page.items) == 4
        assert page.next_cursor == "4"

        content = await source.get_board_content("retro-1")
        assert content.elements == retro_board.elements

    async def test_unknown_board(self):
        with pytest.raises(BoardNotFound):
            await MockBoardSource().get_board_content("board-999")


class TestCreateBoardSource:
    def test_mock_by_default(self):
        assert isinstance(create_board_source(Settings(miro_enabled=False)), MockBoardSource)

    def test_live_when_enabled(self):
        assert isinstance(create_board_source(miro_settings()), MiroBoardSource)
