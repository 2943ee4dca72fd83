import pytest
from unittest.mock import AsyncMock, patch
from src.app.use_cases.tasks import GetTaskByIdUseCase, TASK_NOT_FOUND
from src.domain import Task


@pytest.mark.asyncio
async def test_get_task_by_id_success(mock_uow):
    """Test fetching an existing task"""
    # Arrange
    use_case = GetTaskByIdUseCase(mock_uow)
    task = Task(id=5, title="Read book", description="Chapter 3", completed=True)

    with patch(
        "src.app.use_cases.tasks.get_task_by_id_use_case.SqlAlchemyTaskRepository"
    ) as MockRepo:
        mock_repo_instance = MockRepo.return_value
        mock_repo_instance.find_by_id = AsyncMock(return_value=task)

        # Act
        result = await use_case.execute(5)

        # Assert
        assert result.is_ok()
        assert result.value.id == 5
        assert result.value.title == "Read book"
        assert result.value.description == "Chapter 3"
        assert result.value.completed is True

        mock_repo_instance.find_by_id.assert_called_once_with(5)


@pytest.mark.asyncio
async def test_get_task_by_id_not_found(mock_uow):
    """Test fetching a missing task returns TASK_NOT_FOUND"""
    # Arrange
    use_case = GetTaskByIdUseCase(mock_uow)

    with patch(
        "src.app.use_cases.tasks.get_task_by_id_use_case.SqlAlchemyTaskRepository"
    ) as MockRepo:
        MockRepo.return_value.find_by_id = AsyncMock(return_value=None)

        # Act
        result = await use_case.execute(9999)

        # Assert
        assert result.is_err()
        assert result.error.code == TASK_NOT_FOUND
        assert result.error.message == "Task with id 9999 not found"
        assert result.error.reason == "Task not found"
