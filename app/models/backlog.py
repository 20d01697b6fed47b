"""Structured backlog output models.

파이프라인의 유일한 성공 산출물(StructuredOutput)입니다.
JSON 필드명은 camelCase(alias), 파이썬 속성은 snake_case 입니다.
ID는 검증만 하고 생성하지 않습니다.
"""

from enum import Enum
from typing import Any
from pydantic import BaseModel, ConfigDict, Field


EPIC_ID_PATTERN = r"^EPIC-[0-9]{3}$"
STORY_ID_PATTERN = r"^STORY-[0-9]{3}-[0-9]{2}$"
RISK_ID_PATTERN = r"^RISK-[0-9]{3}$"
ASSUMPTION_ID_PATTERN = r"^ASSUMPTION-[0-9]{3}$"
QUESTION_ID_PATTERN = r"^Q-[0-9]{3}$"


class RiskLevel(str, Enum):
    """리스크 영향도/발생 가능성 수준."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class QuestionType(str, Enum):
    """미결 질문 유형."""
    CLARIFICATION = "clarification"
    MISSING_DETAIL = "missing_detail"
    DEPENDENCY = "dependency"
    FUNCTIONAL = "functional"
    NON_FUNCTIONAL = "non_functional"
    TECHNICAL = "technical"


class _CamelModel(BaseModel):
    # 와이어 필드명(camelCase)으로만 채웁니다. snake_case 키는 누락 필드로 취급.
    model_config = ConfigDict(populate_by_name=False)


class ProjectSummary(_CamelModel):
    """프로젝트 요약."""
    title: str
    description: str
    objectives: list[str]


class Story(_CamelModel):
    """사용자 스토리."""
    id: str = Field(..., pattern=STORY_ID_PATTERN, description="예: STORY-001-01")
    title: str
    short_description: str = Field(..., alias="shortDescription")
    full_description: str = Field(..., alias="fullDescription")
    acceptance_criteria: list[str] = Field(..., alias="acceptanceCriteria")
    tags: list[str]


class Epic(_CamelModel):
    """에픽. 스토리는 0개 이상."""
    id: str = Field(..., pattern=EPIC_ID_PATTERN, description="예: EPIC-001")
    title: str
    description: str
    stories: list[Story]


class Risk(_CamelModel):
    """리스크."""
    id: str = Field(..., pattern=RISK_ID_PATTERN)
    description: str
    impact: RiskLevel
    probability: RiskLevel
    mitigation: str


class Assumption(_CamelModel):
    """가정."""
    id: str = Field(..., pattern=ASSUMPTION_ID_PATTERN)
    description: str
    reason: str


class OpenQuestion(_CamelModel):
    """미결 질문."""
    id: str = Field(..., pattern=QUESTION_ID_PATTERN)
    question: str
    type: QuestionType
    origin: str


class OpenQuestionsCategory(_CamelModel):
    """카테고리별 미결 질문 묶음."""
    category: str
    questions: list[OpenQuestion]


class OpenQuestions(_CamelModel):
    """미결 질문 전체. unclassified는 생략 시 빈 배열."""
    unclassified: list[Any] = Field(default_factory=list)
    categories: list[OpenQuestionsCategory]


class ProjectOutput(_CamelModel):
    """
    백로그 문서 루트.

    스키마 전체를 하나의 원자적 단위로 만족해야 하며,
    부분적으로 유효한 구조는 성공으로 반환되지 않습니다.
    """
    project_summary: ProjectSummary = Field(..., alias="projectSummary")
    epics: list[Epic]
    risks: list[Risk]
    assumptions: list[Assumption]
    open_questions: OpenQuestions = Field(..., alias="openQuestions")

    @property
    def story_count(self) -> int:
        return sum(len(epic.stories) for epic in self.epics)

    def to_wire(self) -> dict:
        """camelCase JSON 호환 딕셔너리로 변환."""
        return self.model_dump(mode="json", by_alias=True)
