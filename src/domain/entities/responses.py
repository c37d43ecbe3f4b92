"""Response envelopes returned by the HTTP API."""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel


class ResponseStatus(str, Enum):
    """Value of the ``status`` field of every response body."""
    SUCCESS = "success"
    FAIL = "fail"


class SuccessResponse(BaseModel):
    """Body of a successful request."""
    
    status: ResponseStatus = ResponseStatus.SUCCESS
    message: Optional[str] = None
    data: Optional[dict[str, Any]] = None
    
    def to_body(self) -> dict:
        body: dict[str, Any] = {"status": self.status.value}
        if self.message is not None:
            body["message"] = self.message
        if self.data is not None:
            body["data"] = self.data
        return body


class FailResponse(BaseModel):
    """Body of a rejected request; ``message`` is meant for humans."""
    
    status: ResponseStatus = ResponseStatus.FAIL
    message: str
    
    def to_body(self) -> dict:
        return {"status": self.status.value, "message": self.message}
