"""백로그 → Markdown 내보내기.

이슈 트래커(Jira 등)에 붙여 넣기 좋은 체크리스트 형태로 변환합니다.
ProjectOutput 만 읽는 순수 함수입니다.
"""

import re

from app.models import ProjectOutput, Story


STORY_PATTERNS = [
    re.compile(r"As an?\s+(.+?),?\s+I want to\s+(.+?),?\s+so that\s+(.+)", re.IGNORECASE),
    re.compile(r"As an?\s+(.+?),?\s+I want\s+(.+?),?\s+so that\s+(.+)", re.IGNORECASE),
    re.compile(r"As an?\s+(.+?),?\s+I want\s+(.+?)\s+for\s+(.+)", re.IGNORECASE),
]


def parse_story_description(description: str) -> tuple[str, str, str]:
    """'As a [role], I want to [action], so that [benefit]' 형식을 (role, action, benefit)으로 분해."""
    for pattern in STORY_PATTERNS:
        match = pattern.search(description)
        if match:
            return match.group(1).strip(), match.group(2).strip(), match.group(3).strip()

    action = re.sub(r"^As an?\s+\w+,?\s*", "", description, flags=re.IGNORECASE)
    action = re.sub(r"^I want\s+", "", action, flags=re.IGNORECASE)
    return "a user", action, "improved experience"


def _story_lines(story: Story, number: int) -> list[str]:
    role, action, benefit = parse_story_description(story.short_description)
    lines = [
        f"### US-{number}: {story.title} ({story.id})",
        "",
        f"**As** {role} **I want** {action} **so that** {benefit}",
        "",
    ]
    if story.full_description:
        lines.append(story.full_description)
        lines.append("")

    lines.append("**Acceptance Criteria:**")
    for criterion in story.acceptance_criteria:
        lines.append(f"- [ ] {criterion}")

    if story.tags:
        lines.append("")
        lines.append("**Tags:** " + ", ".join(f"`{tag}`" for tag in story.tags))
    lines.append("")
    return lines


def format_as_markdown(output: ProjectOutput) -> str:
    """ProjectOutput 을 Markdown 문서로 변환합니다."""
    lines = []
    summary = output.project_summary

    # 제목 및 요약
    lines.append(f"# Feature: {summary.title}")
    lines.append("")
    lines.append("## Summary")
    lines.append("")
    lines.append(summary.description)
    lines.append("")

    if summary.objectives:
        lines.append("### Objectives")
        for objective in summary.objectives:
            lines.append(f"- {objective}")
        lines.append("")

    # 에픽별 사용자 스토리 (US 번호는 문서 전체에서 연속)
    lines.append("## User Stories")
    lines.append("")
    story_number = 1
    for epic in output.epics:
        lines.append(f"## {epic.id}: {epic.title}")
        lines.append("")
        if epic.description:
            lines.append(epic.description)
            lines.append("")
        for story in epic.stories:
            lines.extend(_story_lines(story, story_number))
            story_number += 1

    # 리스크 & 가정
    lines.append("## Risks & Assumptions")
    lines.append("")
    for risk in output.risks:
        lines.append(
            f"- **Risk ({risk.id}):** {risk.description} "
            f"(impact: {risk.impact.value}, probability: {risk.probability.value}) "
            f"- Mitigation: {risk.mitigation}"
        )
    for assumption in output.assumptions:
        lines.append(f"- **Assumption ({assumption.id}):** {assumption.description}")
    lines.append("")

    # 미결 질문
    questions = output.open_questions
    has_questions = questions.unclassified or any(c.questions for c in questions.categories)
    if has_questions:
        lines.append("## Open Questions")
        lines.append("")
        for category in questions.categories:
            if not category.questions:
                continue
            lines.append(f"### {category.category}")
            for q in category.questions:
                lines.append(f"- **{q.id}** ({q.type.value}): {q.question}")
            lines.append("")

        if questions.unclassified:
            lines.append("### Unclassified")
            for item in questions.unclassified:
                text = item.get("question", item) if isinstance(item, dict) else item
                lines.append(f"- {text}")
            lines.append("")

    return "\n".join(lines)
