"""codeassist — context assembly for external code-editing commands."""

__version__ = "0.1.0"

from .pipeline import Pipeline
from .schemas.context import Language, Task, TaskContext

__all__ = ["Language", "Pipeline", "Task", "TaskContext"]
