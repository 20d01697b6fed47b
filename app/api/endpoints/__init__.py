"""API endpoints package."""

from . import health
from . import boards
from . import process
from . import export

__all__ = ["health", "boards", "process", "export"]
