import logging
from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories import TaskRepository
from src.adapter.repositories import SqlAlchemyTaskRepository
from src.domain import Task
from .dtos import CreateTaskCommand, TaskDTO

logger = logging.getLogger(__name__)


class CreateTaskUseCase:
    """Use case for creating a new task"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: CreateTaskCommand) -> Result[TaskDTO]:
        """
        Execute the create task use case

        The identity is always left to the database, whatever the caller sent.
        Store failures are not translated here and propagate to the caller.

        Returns:
            Result[TaskDTO]: Success with the persisted task, carrying its new ID
        """
        async with self.uow as session:
            task_repo: TaskRepository = SqlAlchemyTaskRepository(session.session)

            task = Task(
                title=command.title,
                description=command.description,
                completed=command.completed,
            )
            task.id = None

            created_task = await task_repo.save(task)
            await self.uow.commit()

            logger.info(f"Task created: id={created_task.id}")

            return Return.ok(TaskDTO.from_entity(created_task))
