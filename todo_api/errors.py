"""Error taxonomy and the handler that renders it as plain text."""

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from todo_api.observability import get_logger

logger = get_logger(__name__)

INVALID_TASK_DATA = "Invalid task data"
INVALID_TASK_ID = "Invalid task ID"
METHOD_NOT_ALLOWED = "Method not allowed"
TASK_NOT_FOUND = "Task not found"


class TaskAPIError(HTTPException):
    """Base class for errors surfaced directly to the caller."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(status_code=self.status_code, detail=self.message)


class MalformedRequest(TaskAPIError):
    """Unparseable request body or task id."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = INVALID_TASK_DATA


class MethodNotSupported(TaskAPIError):
    """Verb not wired for the requested path."""

    status_code = status.HTTP_405_METHOD_NOT_ALLOWED
    default_message = METHOD_NOT_ALLOWED


class TaskNotFound(TaskAPIError):
    """Operation on an id that is not in the store."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = TASK_NOT_FOUND


def _message_for(exc: StarletteHTTPException) -> str:
    if isinstance(exc, TaskAPIError):
        return exc.message
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        return METHOD_NOT_ALLOWED
    return str(exc.detail)


async def handle_http_error(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    """Render our own errors and Starlette's routing errors alike as plain text."""
    message = _message_for(exc)
    logger.debug("%s %s -> %d %s", request.method, request.url.path, exc.status_code, message)
    return PlainTextResponse(message, status_code=exc.status_code, headers=exc.headers)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, handle_http_error)
