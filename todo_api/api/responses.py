import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from todo_api.domains.todos.entities import Todo
from todo_api.domains.todos.schemas import (
    ErrorResponse, SingleTodoResponse, TodoData, TodoResponse
)

logger = logging.getLogger(__name__)


def fail_response(status_code: int, message: str) -> JSONResponse:
    """Build the {"status": "fail", "message": ...} envelope"""
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(message=message).model_dump()
    )


def single_todo_response(todo: Todo) -> SingleTodoResponse:
    return SingleTodoResponse(data=TodoData(todo=TodoResponse.model_validate(todo)))


def _format_error(error: dict) -> str:
    location = ".".join(str(part) for part in error.get("loc", ()))
    return f"{location}: {error.get('msg', 'invalid value')}"


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed ids, bodies and query strings are rejected as 400 before the store is touched"""
    message = "; ".join(_format_error(error) for error in exc.errors())
    logger.warning(f"Bad request {request.method} {request.url.path}: {message}")
    return fail_response(status.HTTP_400_BAD_REQUEST, f"Invalid request: {message}")
