from src.app.repositories.task_repository import TaskRepository

__all__ = [
    "TaskRepository",
]
