from typing import List
from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories import TaskRepository
from src.adapter.repositories import SqlAlchemyTaskRepository
from .dtos import TaskDTO


class ListTasksUseCase:
    """Use case for listing every stored task"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[List[TaskDTO]]:
        """
        Execute the list tasks use case

        Returns:
            Result[List[TaskDTO]]: All tasks in store order, empty when there are none
        """
        async with self.uow as session:
            task_repo: TaskRepository = SqlAlchemyTaskRepository(session.session)

            tasks = await task_repo.find_all()

            return Return.ok([TaskDTO.from_entity(task) for task in tasks])
