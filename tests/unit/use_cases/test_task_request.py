import pytest
from pydantic import ValidationError
from src.app.use_cases.tasks import TaskRequest


def test_task_request_defaults():
    request = TaskRequest(title="Only a title")

    assert request.description is None
    assert request.completed is False


def test_task_request_null_completed_is_false():
    request = TaskRequest(title="Null flag", completed=None)

    assert request.completed is False


def test_task_request_ignores_client_id():
    request = TaskRequest.model_validate({"id": 99, "title": "Forged"})

    assert not hasattr(request, "id")


@pytest.mark.parametrize("title", ["", "   "])
def test_task_request_rejects_blank_title(title):
    with pytest.raises(ValidationError) as exc_info:
        TaskRequest(title=title)

    assert "must not be blank" in str(exc_info.value)


def test_task_request_requires_title():
    with pytest.raises(ValidationError) as exc_info:
        TaskRequest.model_validate({"description": "Missing title"})

    assert exc_info.value.errors()[0]["type"] == "missing"


def test_task_request_rejects_overlong_title():
    with pytest.raises(ValidationError) as exc_info:
        TaskRequest(title="x" * 256)

    assert exc_info.value.errors()[0]["type"] == "string_too_long"
