"""Layer 4: Validation - Check a recovered value against the backlog schema."""

from .schema_validator import SchemaIssue, SchemaValidator, format_path

__all__ = [
    "SchemaIssue",
    "SchemaValidator",
    "format_path",
]
