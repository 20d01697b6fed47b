"""Prompts for Layer 1 extraction."""

from .extraction_prompts import IMAGE_EXTRACTION_PROMPT, PDF_EXTRACTION_PROMPT

__all__ = ["IMAGE_EXTRACTION_PROMPT", "PDF_EXTRACTION_PROMPT"]
