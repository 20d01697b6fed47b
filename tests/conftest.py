"""공유 pytest fixture 모음."""

import copy
import json

import pytest
from unittest.mock import AsyncMock

from app.layers.layer1_extraction import ContentExtractor
from app.layers.layer2_prompt import PromptBuilder
from app.layers.layer3_recovery import ResponseRecovery
from app.layers.layer4_validation import SchemaValidator
from app.models import BoardContent, BoardItem, Board, ProjectOutput
from app.services.board_source import MockBoardSource
from app.services.debug_store import DebugArtifactStore
from app.services.orchestrator import PipelineOrchestrator


SAMPLE_BACKLOG = {
    "projectSummary": {
        "title": "Team Retro Board",
        "description": "A lightweight tool for running remote retrospectives.",
        "objectives": ["Collect feedback quickly", "Track action items"],
    },
    "epics": [
        {
            "id": "EPIC-001",
            "title": "Feedback Collection",
            "description": "Let team members post feedback cards.",
            "stories": [
                {
                    "id": "STORY-001-01",
                    "title": "Post a feedback card",
                    "shortDescription": "As a team member, I want to post a card, so that my feedback is heard",
                    "fullDescription": "Team members can add cards to any column of the board.",
                    "acceptanceCriteria": ["User can add a card", "Card appears in the chosen column"],
                    "tags": ["frontend"],
                },
                {
                    "id": "STORY-001-02",
                    "title": "Vote on cards",
                    "shortDescription": "As a team member, I want to vote on cards, so that we discuss what matters",
                    "fullDescription": "Each member has three votes per session.",
                    "acceptanceCriteria": ["User can vote up to three times"],
                    "tags": ["frontend", "voting"],
                },
            ],
        }
    ],
    "risks": [
        {
            "id": "RISK-001",
            "description": "Low participation in remote sessions",
            "impact": "medium",
            "probability": "high",
            "mitigation": "Send reminders before each session",
        }
    ],
    "assumptions": [
        {
            "id": "ASSUMPTION-001",
            "description": "Teams already use SSO",
            "reason": "Most target customers are enterprises",
        }
    ],
    "openQuestions": {
        "unclassified": [],
        "categories": [
            {
                "category": "Security",
                "questions": [
                    {
                        "id": "Q-001",
                        "question": "Should cards be anonymous?",
                        "type": "clarification",
                        "origin": "Board frame: Ideas",
                    }
                ],
            }
        ],
    },
}


@pytest.fixture
def sample_backlog():
    """유효한 백로그 딕셔너리 (camelCase) fixture. 테스트마다 새 복사본."""
    return copy.deepcopy(SAMPLE_BACKLOG)


@pytest.fixture
def sample_output(sample_backlog):
    """ProjectOutput fixture."""
    return ProjectOutput.model_validate(sample_backlog)


@pytest.fixture
def retro_board():
    """프레임 3개, 스티커 12개로 이루어진 보드 fixture."""
    elements = []
    for f in range(1, 4):
        elements.append(BoardItem(id=f"frame-{f}", type="frame", content=f"Topic {f}"))
        for s in range(1, 5):
            elements.append(
                BoardItem(
                    id=f"sticky-{f}-{s}",
                    type="sticky_note",
                    content=f"Idea {f}.{s}",
                    parent_id=f"frame-{f}",
                )
            )
    return BoardContent(board_id="retro-1", board_name="Team Retro", elements=elements)


@pytest.fixture
def board_source(retro_board):
    """retro_board 하나만 가진 MockBoardSource fixture."""
    return MockBoardSource(
        boards=[Board(id="retro-1", name="Team Retro", lastModified="2024-01-01T00:00:00Z")],
        contents={"retro-1": retro_board},
    )


@pytest.fixture
def mock_generation_client(sample_backlog):
    """GeminiClient mock fixture. 기본 응답은 유효한 백로그 JSON."""
    client = AsyncMock()
    client.generate = AsyncMock(return_value=json.dumps(sample_backlog))
    return client


@pytest.fixture
def orchestrator(mock_generation_client, board_source, tmp_path):
    """모든 구성 요소가 주입된 PipelineOrchestrator fixture (네트워크 없음)."""
    return PipelineOrchestrator(
        extractor=ContentExtractor(mock_generation_client, board_source),
        prompt_builder=PromptBuilder(),
        generation_client=mock_generation_client,
        recovery=ResponseRecovery(),
        validator=SchemaValidator(),
        debug_store=DebugArtifactStore(tmp_path / "debug"),
    )


@pytest.fixture
async def async_client(orchestrator, board_source):
    """httpx AsyncClient fixture (FastAPI 테스트용). 의존성은 테스트 더블로 교체."""
    from httpx import AsyncClient, ASGITransport
    from app.api.deps import get_board_source, get_orchestrator
    from app.main import app

    app.dependency_overrides[get_orchestrator] = lambda: orchestrator
    app.dependency_overrides[get_board_source] = lambda: board_source
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
