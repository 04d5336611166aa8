from datetime import datetime
from http import HTTPStatus

from pydantic import BaseModel, Field


class ApiErrorResponse(BaseModel):
    timestamp: datetime = Field(default_factory=datetime.now)
    status: str
    error: str
    message: str

    @classmethod
    def from_status(cls, status: HTTPStatus, message: str) -> "ApiErrorResponse":
        return cls(status=status.name, error=status.phrase, message=message)
