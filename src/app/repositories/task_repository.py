from abc import ABC, abstractmethod
from typing import Optional, List
from src.domain import Task


class TaskRepository(ABC):
    """Repository interface for Task entity"""

    @abstractmethod
    async def save(self, task: Task) -> Task:
        """Insert a new task or persist changes to an existing one"""
        pass

    @abstractmethod
    async def find_by_id(self, task_id: int) -> Optional[Task]:
        """Get task by ID"""
        pass

    @abstractmethod
    async def find_all(self) -> List[Task]:
        """Get every stored task"""
        pass

    @abstractmethod
    async def exists(self, task_id: int) -> bool:
        """Check whether a task with the given ID is stored"""
        pass

    @abstractmethod
    async def delete(self, task_id: int) -> None:
        """Remove a task by ID"""
        pass
