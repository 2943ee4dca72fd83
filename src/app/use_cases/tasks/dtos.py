from typing import Optional
from pydantic import BaseModel, Field, field_validator
from src.domain import Task


class TaskRequest(BaseModel):
    """Request DTO for creating or replacing a task (API layer - from user input)

    Unknown keys, including a client-supplied ``id``, are ignored.
    """

    title: str = Field(max_length=255)
    description: Optional[str] = None
    completed: Optional[bool] = False

    @field_validator("title")
    @classmethod
    def title_must_not_be_blank(cls, value: str) -> str:
        if not value or len(value.strip()) == 0:
            raise ValueError("must not be blank")
        return value

    @field_validator("completed")
    @classmethod
    def completed_defaults_to_false(cls, value: Optional[bool]) -> bool:
        # null and absent are treated the same on create and update
        return bool(value)


class CreateTaskCommand(BaseModel):
    """Command DTO for creating a task (Use case layer)"""

    title: str
    description: Optional[str] = None
    completed: bool = False


class UpdateTaskCommand(BaseModel):
    """Command DTO for replacing the fields of an existing task (Use case layer)"""

    task_id: int
    title: str
    description: Optional[str] = None
    completed: bool = False


class TaskDTO(BaseModel):
    """Wire representation of a persisted task"""

    id: int
    title: str
    description: Optional[str]
    completed: bool

    @classmethod
    def from_entity(cls, task: Task) -> "TaskDTO":
        return cls(
            id=task.id,
            title=task.title,
            description=task.description,
            completed=task.completed,
        )
