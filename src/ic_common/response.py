"""Unified API response envelope.

{
    "code": 0,              // 0=success, otherwise AppError.code
    "message": "success",
    "data": { ... },        // null on error
    "timestamp": "...",
    "request_id": "..."
}
"""

import uuid
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field

from src.ic_common.errors import AppError


def _new_request_id() -> str:
    return f"req_{uuid.uuid4().hex[:12]}"


class ApiResponse(BaseModel):
    code: int = 0
    message: str = "success"
    data: Any = None
    timestamp: str = Field(default_factory=lambda: datetime.now(timezone.utc).isoformat())
    request_id: str = Field(default_factory=_new_request_id)


def success_response(data: BaseModel | dict[str, Any] | None = None) -> ApiResponse:
    if isinstance(data, BaseModel):
        data = data.model_dump()
    return ApiResponse(data=data)


def error_response(code: int, message: str) -> ApiResponse:
    return ApiResponse(code=code, message=message, data=None)


def app_error_response(exc: AppError) -> ApiResponse:
    return error_response(exc.code, exc.message)
