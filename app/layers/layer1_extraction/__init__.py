"""Layer 1: Extraction - Normalize any input into one plain-text document."""

from .base_extractor import BaseExtractor
from .content_extractor import ContentExtractor

__all__ = [
    "BaseExtractor",
    "ContentExtractor",
]
