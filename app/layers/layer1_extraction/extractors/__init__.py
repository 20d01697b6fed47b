"""Individual extractors for different input kinds."""

from .text_extractor import TextExtractor
from .json_extractor import JSONExtractor
from .vision_extractor import VisionExtractor
from .board_extractor import BoardExtractor

__all__ = [
    "TextExtractor",
    "JSONExtractor",
    "VisionExtractor",
    "BoardExtractor",
]
