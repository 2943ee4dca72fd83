from libs.result import Error

TASK_NOT_FOUND = "TASK_NOT_FOUND"


def task_not_found(task_id: int) -> Error:
    return Error(
        code=TASK_NOT_FOUND,
        message=f"Task with id {task_id} not found",
        reason="Task not found",
    )
