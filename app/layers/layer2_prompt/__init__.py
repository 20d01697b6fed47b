"""Layer 2: Prompt - Assemble the generation prompt from an extracted document."""

from .prompt_builder import PromptBuilder, TemplateLoad

__all__ = [
    "PromptBuilder",
    "TemplateLoad",
]
