"""PipelineOrchestrator unit tests.

Tests status sequencing, error propagation, and debug artifacts for failed
recoveries. All collaborators except the generation client are real.
"""

import json

import pytest

from app.exceptions import (
    BoardNotFound,
    GenerationUnavailable,
    InvalidReferenceFormat,
    SchemaViolation,
    UnrecoverableResponse,
    UnsupportedInputKind,
)
from app.models import BoardReference, FileInput, ProcessingStep, ProjectOutput
from app.services.debug_store import DebugArtifactStore


def steps(statuses):
    return [(s.step, s.progress) for s in statuses]


class TestBoardRun:
    async def test_status_sequence(self, orchestrator):
        statuses = []
        output = await orchestrator.process(
            BoardReference(reference="https://miro.com/app/board/retro-1/"),
            statuses.append,
        )

        assert isinstance(output, ProjectOutput)
        assert len(output.epics) >= 1
        assert steps(statuses) == [
            (ProcessingStep.CONNECTING, 10),
            (ProcessingStep.READING, 20),
            (ProcessingStep.ANALYZING, 40),
            (ProcessingStep.GENERATING, 60),
            (ProcessingStep.GENERATING, 90),
            (ProcessingStep.COMPLETE, 100),
        ]
        assert statuses[0].message == "Connecting to Miro..."
        assert statuses[-1].message == "Processing complete!"

    async def test_prompt_contains_board_outline(self, orchestrator, mock_generation_client, retro_board):
        await orchestrator.process(BoardReference(reference="retro-1"))

        prompt = mock_generation_client.generate.call_args.args[0]
        assert retro_board.to_outline() in prompt
        assert mock_generation_client.generate.call_count == 1

    async def test_async_callback(self, orchestrator):
        received = []

        async def on_status(status):
            received.append(status.step)

        await orchestrator.process(BoardReference(reference="retro-1"), on_status)
        assert received[-1] == ProcessingStep.COMPLETE

    async def test_legacy_board_id_entry(self, orchestrator):
        statuses = []
        await orchestrator.process_board("retro-1", statuses.append)
        assert statuses[0].step == ProcessingStep.CONNECTING

    async def test_unknown_board(self, orchestrator, mock_generation_client):
        statuses = []
        with pytest.raises(BoardNotFound):
            await orchestrator.process(BoardReference(reference="ghost-board"), statuses.append)

        assert statuses[-1].step == ProcessingStep.ERROR
        assert statuses[-1].progress == 0
        assert "not found" in statuses[-1].message
        mock_generation_client.generate.assert_not_called()

    async def test_invalid_reference_fails_after_connecting(self, orchestrator):
        statuses = []
        with pytest.raises(InvalidReferenceFormat):
            await orchestrator.process(BoardReference(reference="http://example.com/x"), statuses.append)

        assert steps(statuses) == [(ProcessingStep.CONNECTING, 10), (ProcessingStep.ERROR, 0)]
        assert statuses[-1].message == "Invalid Miro URL format"


class TestFileRun:
    async def test_text_file(self, orchestrator, mock_generation_client):
        statuses = []
        output = await orchestrator.process(
            FileInput(content=b"We need a retro tool", mime_type="text/plain", filename="notes.txt"),
            statuses.append,
        )

        assert output.project_summary.title == "Team Retro Board"
        assert steps(statuses)[0] == (ProcessingStep.READING, 20)
        assert statuses[0].message == "Extracting content from file..."
        assert "We need a retro tool" in mock_generation_client.generate.call_args.args[0]

    async def test_unsupported_kind_before_any_call(self, orchestrator, mock_generation_client):
        statuses = []
        with pytest.raises(UnsupportedInputKind):
            await orchestrator.process(
                FileInput(content=b"PK\x03\x04", mime_type="application/zip", filename="a.zip"),
                statuses.append,
            )

        assert steps(statuses) == [(ProcessingStep.READING, 20), (ProcessingStep.ERROR, 0)]
        mock_generation_client.generate.assert_not_called()

    async def test_image_file_uses_two_calls(self, orchestrator, mock_generation_client, sample_backlog):
        mock_generation_client.generate.side_effect = ["Whiteboard text", json.dumps(sample_backlog)]

        await orchestrator.process(FileInput(content=b"\x89PNG", mime_type="image/png", filename="w.png"))

        assert mock_generation_client.generate.call_count == 2
        assert "Whiteboard text" in mock_generation_client.generate.call_args_list[1].args[0]


class TestResponseHandling:
    async def test_fenced_response(self, orchestrator, mock_generation_client, sample_backlog):
        mock_generation_client.generate.return_value = "```json\n" + json.dumps(sample_backlog) + "\n```"
        output = await orchestrator.process(BoardReference(reference="retro-1"))
        assert output.story_count == 2

    async def test_schema_violation(self, orchestrator, mock_generation_client, sample_backlog):
        sample_backlog["epics"][0]["id"] = "EPIC-1"
        mock_generation_client.generate.return_value = json.dumps(sample_backlog)

        statuses = []
        with pytest.raises(SchemaViolation) as exc_info:
            await orchestrator.process(BoardReference(reference="retro-1"), statuses.append)

        assert exc_info.value.issues[0].path == "epics[0].id"
        assert statuses[-2].progress == 90
        assert statuses[-1].step == ProcessingStep.ERROR
        assert statuses[-1].message.startswith("Schema validation failed")

    async def test_unrecoverable_response_saves_artifact(self, orchestrator, mock_generation_client, tmp_path):
        mock_generation_client.generate.return_value = "Sorry, I can't do that."

        with pytest.raises(UnrecoverableResponse) as exc_info:
            await orchestrator.process(BoardReference(reference="retro-1"))

        artifact = exc_info.value.details["artifact_path"]
        assert artifact.startswith(str(tmp_path / "debug"))
        with open(artifact, encoding="utf-8") as f:
            assert f.read() == "Sorry, I can't do that."

    async def test_artifact_failure_does_not_mask_error(self, orchestrator, mock_generation_client, tmp_path):
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("x")
        orchestrator.debug_store = DebugArtifactStore(blocker / "debug")
        mock_generation_client.generate.return_value = "no json here"

        with pytest.raises(UnrecoverableResponse) as exc_info:
            await orchestrator.process(BoardReference(reference="retro-1"))
        assert "artifact_path" not in exc_info.value.details

    async def test_generation_unavailable_propagates(self, orchestrator, mock_generation_client):
        mock_generation_client.generate.side_effect = GenerationUnavailable(
            "GOOGLE_API_KEY environment variable is not set"
        )
        statuses = []

        with pytest.raises(GenerationUnavailable):
            await orchestrator.process(BoardReference(reference="retro-1"), statuses.append)
        assert steps(statuses)[-2:] == [(ProcessingStep.GENERATING, 60), (ProcessingStep.ERROR, 0)]

    async def test_runs_without_callback(self, orchestrator):
        output = await orchestrator.process(BoardReference(reference="retro-1"))
        assert output.epics[0].id == "EPIC-001"

    async def test_failing_error_callback_keeps_original_error(self, orchestrator, mock_generation_client):
        received = []

        def on_status(status):
            received.append(status.step)
            if status.step == ProcessingStep.ERROR:
                raise RuntimeError("status sink closed")

        with pytest.raises(BoardNotFound):
            await orchestrator.process(BoardReference(reference="ghost-board"), on_status)
        assert received[-1] == ProcessingStep.ERROR
        mock_generation_client.generate.assert_not_called()

    async def test_snake_case_response_is_rejected(self, orchestrator, mock_generation_client, sample_backlog):
        sample_backlog["project_summary"] = sample_backlog.pop("projectSummary")
        mock_generation_client.generate.return_value = json.dumps(sample_backlog)

        with pytest.raises(SchemaViolation) as exc_info:
            await orchestrator.process(BoardReference(reference="retro-1"))
        assert exc_info.value.issues[0].path == "projectSummary"
