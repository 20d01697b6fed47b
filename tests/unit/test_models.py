"""Unit tests for Pydantic data models.

Tests model construction, defaults, camelCase aliases, and helper methods.
"""

import pytest
from pydantic import ValidationError

from app.models import (
    ApiResponse,
    Board,
    BoardContent,
    BoardItem,
    ContentDocument,
    ProcessingStatus,
    ProcessingStep,
    ProjectOutput,
    SourceKind,
    Story,
    count_words,
)


class TestContentDocument:
    @pytest.mark.parametrize(
        "text, expected",
        [("", 0), ("   \n\t ", 0), ("one", 1), ("  two   words\n", 2), ("a\nb\tc d", 4)],
    )
    def test_count_words(self, text, expected):
        assert count_words(text) == expected

    def test_from_text(self):
        doc = ContentDocument.from_text("hello brave new world", SourceKind.TEXT)
        assert doc.word_count == 4
        assert doc.page_count is None

    def test_is_frozen(self):
        doc = ContentDocument.from_text("x", SourceKind.TEXT)
        with pytest.raises(ValidationError):
            doc.text = "y"

    def test_word_count_non_negative(self):
        with pytest.raises(ValidationError):
            ContentDocument(text="", source_kind=SourceKind.TEXT, word_count=-1)


class TestBoardContent:
    def test_outline_format(self):
        content = BoardContent(
            board_id="b1",
            board_name="Roadmap",
            elements=[
                BoardItem(id="1", type="frame", content="Goals"),
                BoardItem(id="2", type="sticky_note", content="Ship v1"),
                BoardItem(id="3", type="text", content="Hire QA"),
            ],
        )
        assert content.to_outline() == "Miro Board: Roadmap\n\n\n### Goals\n\n- Ship v1\n- Hire QA"

    def test_board_aliases(self):
        board = Board(id="b1", name="Roadmap", lastModified="2024-01-01", thumbnailUrl="https://x")
        assert board.last_modified == "2024-01-01"
        assert board.model_dump(by_alias=True)["thumbnailUrl"] == "https://x"


class TestProjectOutput:
    def test_wire_format_is_camel_case(self, sample_output, sample_backlog):
        wire = sample_output.to_wire()
        assert wire == sample_backlog
        assert "projectSummary" in wire
        assert "shortDescription" in wire["epics"][0]["stories"][0]

    def test_populated_by_wire_names(self):
        story = Story(
            id="STORY-002-01",
            title="t",
            shortDescription="As a user, I want to x, so that y",
            fullDescription="d",
            acceptanceCriteria=[],
            tags=[],
        )
        assert story.short_description.startswith("As a user")

    def test_snake_case_names_are_not_accepted(self):
        with pytest.raises(ValidationError) as exc_info:
            Story(
                id="STORY-002-01",
                title="t",
                short_description="As a user, I want to x, so that y",
                full_description="d",
                acceptance_criteria=[],
                tags=[],
            )
        missing = {err["loc"][0] for err in exc_info.value.errors()}
        assert missing == {"shortDescription", "fullDescription", "acceptanceCriteria"}

    def test_story_count(self, sample_output):
        assert sample_output.story_count == 2

    def test_story_id_pattern(self, sample_backlog):
        sample_backlog["epics"][0]["stories"][0]["id"] = "STORY-01-001"
        with pytest.raises(ValidationError):
            ProjectOutput.model_validate(sample_backlog)


class TestProcessingStatus:
    def test_progress_bounds(self):
        with pytest.raises(ValidationError):
            ProcessingStatus(step=ProcessingStep.GENERATING, message="x", progress=101)

    def test_step_values(self):
        assert ProcessingStep.COMPLETE.value == "complete"
        assert ProcessingStatus(step="error", message="boom", progress=0).step is ProcessingStep.ERROR


class TestApiResponse:
    def test_ok(self):
        assert ApiResponse.ok({"a": 1}) == {"success": True, "data": {"a": 1}}

    def test_fail(self):
        assert ApiResponse.fail("BOARD_NOT_FOUND", "Board not found: x") == {
            "success": False,
            "error": {"code": "BOARD_NOT_FOUND", "message": "Board not found: x"},
        }
