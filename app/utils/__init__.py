"""유틸리티 모듈."""

from .markdown_export import format_as_markdown
from .validation import (
    validate_filename,
    validate_file_size,
    validate_miro_url,
)

__all__ = [
    "format_as_markdown",
    "validate_filename",
    "validate_file_size",
    "validate_miro_url",
]
