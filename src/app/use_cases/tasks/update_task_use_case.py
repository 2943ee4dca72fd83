import logging
from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories import TaskRepository
from src.adapter.repositories import SqlAlchemyTaskRepository
from .dtos import UpdateTaskCommand, TaskDTO
from .errors import task_not_found

logger = logging.getLogger(__name__)


class UpdateTaskUseCase:
    """Use case for replacing the fields of an existing task"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: UpdateTaskCommand) -> Result[TaskDTO]:
        """
        Execute the update task use case

        This is a plain read-modify-write with no version check, so concurrent
        updates of the same task resolve as last writer wins.

        Returns:
            Result[TaskDTO]: Success with the replaced task or TASK_NOT_FOUND error
        """
        async with self.uow as session:
            task_repo: TaskRepository = SqlAlchemyTaskRepository(session.session)

            task = await task_repo.find_by_id(command.task_id)

            if task is None:
                logger.warning(f"Task {command.task_id} not found, nothing updated")
                return Return.err(task_not_found(command.task_id))

            # Full replace of the mutable fields, the ID is kept
            task.title = command.title
            task.description = command.description
            task.completed = command.completed

            updated_task = await task_repo.save(task)
            await self.uow.commit()

            logger.info(f"Task updated: id={updated_task.id}")

            return Return.ok(TaskDTO.from_entity(updated_task))
