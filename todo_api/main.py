"""FastAPI application entry point."""

import re

from fastapi import Depends, FastAPI, Request, status
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError

from todo_api.config import Settings, get_settings
from todo_api.errors import (
    INVALID_TASK_DATA,
    INVALID_TASK_ID,
    MalformedRequest,
    MethodNotSupported,
    TaskNotFound,
    register_error_handlers,
)
from todo_api.models import Task, TaskCreate
from todo_api.store import TaskStore

WELCOME_MESSAGE = "Welcome to the TODO API!\nUse /tasks endpoint to manage your TODOs.\n"

_TASK_ID_RE = re.compile(r"[+-]?[0-9]+")

# The create body is decoded by hand so that the Content-Type header is not
# consulted; the schema is declared here for the OpenAPI output instead.
_TASK_CREATE_BODY = {
    "requestBody": {
        "required": True,
        "content": {"application/json": {"schema": TaskCreate.model_json_schema()}},
    }
}


def parse_task_id(task_id: str) -> int:
    """Parse the path suffix after /tasks/ as a base-10 integer.

    Anything other than an optionally signed run of digits is rejected,
    including an empty suffix and trailing characters such as ``12abc``.
    """
    if not _TASK_ID_RE.fullmatch(task_id):
        raise MalformedRequest(INVALID_TASK_ID)
    return int(task_id)


def get_store(request: Request) -> TaskStore:
    """Return the store the running application was built with."""
    return request.app.state.store


async def read_task_create(request: Request) -> TaskCreate:
    """Decode the raw request body as a ``TaskCreate``, whatever its content type."""
    raw = await request.body()
    try:
        return TaskCreate.model_validate_json(raw)
    except ValidationError as exc:
        raise MalformedRequest(INVALID_TASK_DATA) from exc


async def tasks_method_not_allowed(request: Request) -> PlainTextResponse:
    raise MethodNotSupported()


async def task_method_not_allowed(request: Request) -> PlainTextResponse:
    # A bad id is reported before a bad verb.
    parse_task_id(request.path_params["task_id"])
    raise MethodNotSupported()


async def welcome(request: Request) -> PlainTextResponse:
    """Static greeting for every path outside /tasks."""
    return PlainTextResponse(WELCOME_MESSAGE)


def create_app(store: TaskStore | None = None, settings: Settings | None = None) -> FastAPI:
    """Build the application around a single task store."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.title,
        description="A minimal in-memory TODO task API.",
        version="1.0.0",
    )
    app.state.store = store if store is not None else TaskStore()
    register_error_handlers(app)

    # Routes are matched in registration order. The fallbacks are plain
    # Starlette routes without a method list, so they accept every verb.

    @app.get("/tasks", response_model=list[Task], tags=["Tasks"])
    async def list_tasks(store: TaskStore = Depends(get_store)) -> list[Task]:
        """List all tasks."""
        return store.list_all()

    @app.post(
        "/tasks",
        response_model=Task,
        status_code=status.HTTP_201_CREATED,
        tags=["Tasks"],
        openapi_extra=_TASK_CREATE_BODY,
    )
    async def create_task(
        data: TaskCreate = Depends(read_task_create),
        store: TaskStore = Depends(get_store),
    ) -> Task:
        """Create a new task. A client-supplied completion flag is ignored."""
        return store.create(data.content)

    @app.delete(
        "/tasks/{task_id:path}",
        status_code=status.HTTP_204_NO_CONTENT,
        tags=["Tasks"],
    )
    async def delete_task(
        task_id: int = Depends(parse_task_id),
        store: TaskStore = Depends(get_store),
    ) -> None:
        """Delete a task."""
        if not store.delete(task_id):
            raise TaskNotFound()

    @app.patch("/tasks/{task_id:path}", response_model=Task, tags=["Tasks"])
    async def complete_task(
        task_id: int = Depends(parse_task_id),
        store: TaskStore = Depends(get_store),
    ) -> Task:
        """Mark a task as completed."""
        task = store.complete(task_id)
        if task is None:
            raise TaskNotFound()
        return task

    app.add_route("/tasks", tasks_method_not_allowed, include_in_schema=False)
    app.add_route("/tasks/{task_id:path}", task_method_not_allowed, include_in_schema=False)
    app.add_route("/{path:path}", welcome, include_in_schema=False)
    return app


app = create_app()
