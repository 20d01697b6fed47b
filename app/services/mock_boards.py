"""Mock boards for development without a Miro API key."""

from app.models import Board, BoardContent, BoardItem


def _sticky(item_id: str, content: str, frame_id: str, color: str) -> BoardItem:
    return BoardItem(id=item_id, type="sticky_note", content=content, parent_id=frame_id, color=color)


def _frame(item_id: str, content: str, color: str) -> BoardItem:
    return BoardItem(id=item_id, type="frame", content=content, color=color)


MOCK_BOARDS: list[Board] = [
    Board(
        id="board-001",
        name="Q1 Product Discovery Session",
        description="Brainstorming session for Q1 features",
        last_modified="2024-12-18T15:30:00Z",
    ),
    Board(
        id="board-002",
        name="User Onboarding Improvements",
        description="Ideas for improving the onboarding flow",
        last_modified="2024-12-17T10:00:00Z",
    ),
    Board(
        id="board-003",
        name="Mobile App Feature Brainstorm",
        description="New features for mobile application",
        last_modified="2024-12-15T14:20:00Z",
    ),
]


MOCK_BOARD_CONTENT: dict[str, BoardContent] = {
    "board-001": BoardContent(
        board_id="board-001",
        board_name="Q1 Product Discovery Session",
        elements=[
            _frame("1", "User Pain Points", "#ff9800"),
            _sticky("2", "Users struggle to find key features in the navigation", "1", "#ffeb3b"),
            _sticky("3", "Onboarding takes too long - users drop off", "1", "#ffeb3b"),
            _sticky("4", "No way to save progress and continue later", "1", "#ffeb3b"),
            _sticky("5", "Mobile experience is frustrating", "1", "#ffeb3b"),
            _frame("6", "Feature Ideas", "#4caf50"),
            _sticky("7", "Add quick action shortcuts on dashboard", "6", "#c8e6c9"),
            _sticky("8", "Implement progress saving with auto-resume", "6", "#c8e6c9"),
            _sticky("9", "Create guided tour for new users", "6", "#c8e6c9"),
            _sticky("10", "Redesign mobile navigation with bottom tabs", "6", "#c8e6c9"),
            _sticky("11", "Add search functionality across all sections", "6", "#c8e6c9"),
            _frame("12", "Technical Considerations", "#2196f3"),
            _sticky("13", "Need to consider API rate limits for auto-save", "12", "#bbdefb"),
            _sticky("14", "Mobile redesign requires native components", "12", "#bbdefb"),
            _sticky("15", "Search needs Elasticsearch integration", "12", "#bbdefb"),
            _frame("16", "User Quotes", "#9c27b0"),
            _sticky("17", '"I never know where to find things"', "16", "#e1bee7"),
            _sticky("18", '"The app crashed and I lost all my work"', "16", "#e1bee7"),
            _sticky("19", '"Why cant I just search for what I need?"', "16", "#e1bee7"),
        ],
    ),
    "board-002": BoardContent(
        board_id="board-002",
        board_name="User Onboarding Improvements",
        elements=[
            _frame("1", "Current Problems", "#f44336"),
            _sticky("2", "40% drop-off rate during onboarding", "1", "#ffcdd2"),
            _sticky("3", "Users skip tutorial and get confused", "1", "#ffcdd2"),
            _sticky("4", "Too many form fields required upfront", "1", "#ffcdd2"),
            _frame("5", "Solutions", "#4caf50"),
            _sticky("6", "Progressive profiling - ask less upfront", "5", "#c8e6c9"),
            _sticky("7", "Interactive tutorial with real data", "5", "#c8e6c9"),
            _sticky("8", "Gamification with progress badges", "5", "#c8e6c9"),
            _sticky("9", "Personalized onboarding based on role", "5", "#c8e6c9"),
        ],
    ),
    "board-003": BoardContent(
        board_id="board-003",
        board_name="Mobile App Feature Brainstorm",
        elements=[
            _frame("1", "Must Have", "#4caf50"),
            _sticky("2", "Offline mode with sync", "1", "#c8e6c9"),
            _sticky("3", "Push notifications", "1", "#c8e6c9"),
            _sticky("4", "Biometric login", "1", "#c8e6c9"),
            _frame("5", "Nice to Have", "#ff9800"),
            _sticky("6", "Dark mode", "5", "#ffe0b2"),
            _sticky("7", "Widget support", "5", "#ffe0b2"),
            _sticky("8", "Voice commands", "5", "#ffe0b2"),
        ],
    ),
}
