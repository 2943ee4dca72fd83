import logging
from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories import TaskRepository
from src.adapter.repositories import SqlAlchemyTaskRepository
from .dtos import TaskDTO
from .errors import task_not_found

logger = logging.getLogger(__name__)


class GetTaskByIdUseCase:
    """Use case for getting a single task by ID"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, task_id: int) -> Result[TaskDTO]:
        """
        Execute the get task by ID use case

        Args:
            task_id: ID of the task to retrieve

        Returns:
            Result[TaskDTO]: Success with task data or TASK_NOT_FOUND error
        """
        async with self.uow as session:
            task_repo: TaskRepository = SqlAlchemyTaskRepository(session.session)

            task = await task_repo.find_by_id(task_id)

            if task is None:
                logger.warning(f"Task {task_id} not found")
                return Return.err(task_not_found(task_id))

            return Return.ok(TaskDTO.from_entity(task))
