import logging
from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories import TaskRepository
from src.adapter.repositories import SqlAlchemyTaskRepository
from .errors import task_not_found

logger = logging.getLogger(__name__)


class DeleteTaskUseCase:
    """Use case for deleting a task"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, task_id: int) -> Result[None]:
        async with self.uow as session:
            task_repo: TaskRepository = SqlAlchemyTaskRepository(session.session)

            if not await task_repo.exists(task_id):
                logger.warning(f"Task {task_id} not found, nothing deleted")
                return Return.err(task_not_found(task_id))

            await task_repo.delete(task_id)
            await self.uow.commit()

            logger.info(f"Task deleted: id={task_id}")

            return Return.ok(None)
