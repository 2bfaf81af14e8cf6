from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel


class ApiStatus(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    NOT_FOUND = "not_found"
    VALIDATION_ERROR = "validation_error"
    RATE_LIMITED = "rate_limited"
    SERVER_ERROR = "server_error"


class BaseResponse(BaseModel):
    status: ApiStatus
    message: str
    data: Optional[Any] = None
