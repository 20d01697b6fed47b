"""Layer 3: Recovery - Turn raw model text into a JSON value."""

from .recovery import RecoveryStrategy, ResponseRecovery, strip_code_fences

__all__ = [
    "RecoveryStrategy",
    "ResponseRecovery",
    "strip_code_fences",
]
