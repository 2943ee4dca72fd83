from typing import Optional
from sqlmodel import Field, SQLModel

# Upper bound of the INTEGER identity column
MAX_TASK_ID = 2**31 - 1


class Task(SQLModel, table=True):
    __tablename__ = "tasks"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(max_length=255, nullable=False)
    description: Optional[str] = Field(default=None)
    completed: bool = Field(default=False, nullable=False)
