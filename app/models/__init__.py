"""Data models for backlog generation system."""

from .input import (
    SourceKind,
    FileInput,
    BoardReference,
    InputDescriptor,
    ContentDocument,
    count_words,
)
from .board import (
    Board,
    BoardMeta,
    BoardItem,
    BoardItemType,
    BoardItemsPage,
    BoardContent,
    CONTENT_ITEM_TYPES,
)
from .backlog import (
    RiskLevel,
    QuestionType,
    ProjectSummary,
    Story,
    Epic,
    Risk,
    Assumption,
    OpenQuestion,
    OpenQuestionsCategory,
    OpenQuestions,
    ProjectOutput,
)
from .processing import ProcessingStep, ProcessingStatus
from .error import ApiResponse, ErrorDetail

__all__ = [
    # Input models
    "SourceKind",
    "FileInput",
    "BoardReference",
    "InputDescriptor",
    "ContentDocument",
    "count_words",
    # Board models
    "Board",
    "BoardMeta",
    "BoardItem",
    "BoardItemType",
    "BoardItemsPage",
    "BoardContent",
    "CONTENT_ITEM_TYPES",
    # Backlog models
    "RiskLevel",
    "QuestionType",
    "ProjectSummary",
    "Story",
    "Epic",
    "Risk",
    "Assumption",
    "OpenQuestion",
    "OpenQuestionsCategory",
    "OpenQuestions",
    "ProjectOutput",
    # Processing models
    "ProcessingStep",
    "ProcessingStatus",
    # API envelope
    "ApiResponse",
    "ErrorDetail",
]
