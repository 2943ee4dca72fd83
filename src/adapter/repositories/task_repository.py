from typing import Optional, List
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlmodel import select
from src.app.repositories import TaskRepository
from src.domain import Task, MAX_TASK_ID


def _storable_id(task_id: int) -> bool:
    # IDs the column cannot hold are never stored, the driver would reject them
    return 1 <= task_id <= MAX_TASK_ID


class SqlAlchemyTaskRepository(TaskRepository):
    """SQLAlchemy implementation of TaskRepository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def save(self, task: Task) -> Task:
        """Insert or update a task; the database assigns the ID on first flush"""
        self.session.add(task)
        await self.session.flush()
        await self.session.refresh(task)
        return task

    async def find_by_id(self, task_id: int) -> Optional[Task]:
        """Get task by ID"""
        if not _storable_id(task_id):
            return None
        statement = select(Task).where(Task.id == task_id)
        result = await self.session.exec(statement)
        return result.first()

    async def find_all(self) -> List[Task]:
        """Get every stored task in insertion order"""
        statement = select(Task).order_by(Task.id)
        result = await self.session.exec(statement)
        return list(result.all())

    async def exists(self, task_id: int) -> bool:
        """Check whether a task with the given ID is stored"""
        if not _storable_id(task_id):
            return False
        statement = select(Task.id).where(Task.id == task_id)
        result = await self.session.exec(statement)
        return result.first() is not None

    async def delete(self, task_id: int) -> None:
        """Remove a task by ID, doing nothing if it is already gone"""
        if not _storable_id(task_id):
            return
        task = await self.session.get(Task, task_id)
        if task is None:
            return
        await self.session.delete(task)
        await self.session.flush()
