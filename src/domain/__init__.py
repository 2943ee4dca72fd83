from src.domain.task import Task, MAX_TASK_ID

__all__ = [
    "Task",
    "MAX_TASK_ID",
]
