"""Error body returned for every 4xx/5xx response"""
from datetime import datetime, timezone
from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error response body

    Example:
        {
            "message": "Task with id 9999 not found",
            "timestamp": "2025-01-01T00:00:00Z",
            "details": "Task not found"
        }
    """
    message: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    details: str
