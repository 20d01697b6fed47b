"""Processing layers for the backlog generation pipeline."""

# Note: Import layers individually to avoid circular imports
# Use: from app.layers.layer1_extraction import ContentExtractor
# Use: from app.layers.layer2_prompt import PromptBuilder
# Use: from app.layers.layer3_recovery import ResponseRecovery
# Use: from app.layers.layer4_validation import SchemaValidator

__all__ = [
    "layer1_extraction",
    "layer2_prompt",
    "layer3_recovery",
    "layer4_validation",
]
