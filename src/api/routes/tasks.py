from typing import List
from fastapi import APIRouter, Depends, Response, status
from src.api.error import ClientError
from src.app.services.unit_of_work import UnitOfWork
from src.depends import get_unit_of_work
from src.app.use_cases.tasks import (
    CreateTaskUseCase,
    ListTasksUseCase,
    GetTaskByIdUseCase,
    UpdateTaskUseCase,
    DeleteTaskUseCase,
    TaskRequest,
    CreateTaskCommand,
    UpdateTaskCommand,
    TaskDTO,
)

router = APIRouter()


@router.post(
    "/tasks",
    response_model=TaskDTO,
    status_code=status.HTTP_201_CREATED,
)
async def create_task(
    request: TaskRequest,
    response: Response,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Create a new task and point the Location header at it"""
    command = CreateTaskCommand(
        title=request.title,
        description=request.description,
        completed=request.completed,
    )

    use_case = CreateTaskUseCase(uow)
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError(result.error)

    response.headers["Location"] = f"/tasks/{result.value.id}"
    return result.value


@router.get(
    "/tasks",
    response_model=List[TaskDTO],
    status_code=status.HTTP_200_OK,
)
async def list_tasks(uow: UnitOfWork = Depends(get_unit_of_work)):
    """List all tasks"""
    use_case = ListTasksUseCase(uow)
    result = await use_case.execute()

    # Listing has no error path, an empty store gives an empty array
    return result.value


@router.get(
    "/tasks/{task_id}",
    response_model=TaskDTO,
    status_code=status.HTTP_200_OK,
)
async def get_task_by_id(
    task_id: int,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Get a single task by ID"""
    use_case = GetTaskByIdUseCase(uow)
    result = await use_case.execute(task_id)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.put(
    "/tasks/{task_id}",
    response_model=TaskDTO,
    status_code=status.HTTP_200_OK,
)
async def update_task(
    task_id: int,
    request: TaskRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Replace title, description and completed on an existing task"""
    command = UpdateTaskCommand(
        task_id=task_id,
        title=request.title,
        description=request.description,
        completed=request.completed,
    )

    use_case = UpdateTaskUseCase(uow)
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.delete(
    "/tasks/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_task(
    task_id: int,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Delete a task"""
    use_case = DeleteTaskUseCase(uow)
    result = await use_case.execute(task_id)

    if result.is_err():
        raise ClientError(result.error)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
