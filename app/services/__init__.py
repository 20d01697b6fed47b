"""Services for the backlog generation system."""

# Note: PipelineOrchestrator depends on app.layers, which depends on this package.
# Use: from app.services.orchestrator import PipelineOrchestrator

from .board_source import BoardSource, MiroBoardSource, MockBoardSource, create_board_source
from .debug_store import DebugArtifactStore
from .gemini_client import Attachment, GeminiClient

__all__ = [
    "Attachment",
    "BoardSource",
    "DebugArtifactStore",
    "GeminiClient",
    "MiroBoardSource",
    "MockBoardSource",
    "create_board_source",
]
