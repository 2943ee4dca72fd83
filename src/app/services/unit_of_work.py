from abc import ABC, abstractmethod
from src.app.repositories import TaskRepository


class UnitOfWork(ABC):
    """Transactional boundary around the repositories used by one request"""

    tasks: TaskRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        """Persist all changes made inside the unit of work"""
        pass

    @abstractmethod
    async def rollback(self):
        """Discard uncommitted changes"""
        pass
