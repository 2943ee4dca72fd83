from src.adapter.repositories.task_repository import SqlAlchemyTaskRepository

__all__ = [
    "SqlAlchemyTaskRepository",
]
