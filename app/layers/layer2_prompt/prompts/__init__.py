"""Prompts for Layer 2 prompt assembly."""

from .orchestrator_prompts import ORCHESTRATOR_FALLBACK_TEMPLATE

__all__ = ["ORCHESTRATOR_FALLBACK_TEMPLATE"]
