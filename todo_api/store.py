"""In-memory task storage.

Tasks live only as long as the process. Every operation runs under a single
lock, so the store can be shared between request handlers running on any
thread.
"""

import threading

from todo_api.models import Task
from todo_api.observability import get_logger

logger = get_logger(__name__)


class TaskStore:
    """Lock-guarded in-memory task storage."""

    def __init__(self) -> None:
        """Initialize an empty task store."""
        self._tasks: dict[int, Task] = {}
        self._last_id = 0
        self._lock = threading.Lock()

    def list_all(self) -> list[Task]:
        """Return copies of all tasks in creation order."""
        with self._lock:
            return [task.model_copy() for task in self._tasks.values()]

    def create(self, content: str) -> Task:
        """Create a new open task and return it."""
        with self._lock:
            self._last_id += 1
            task = Task(id=self._last_id, content=content, completed=False)
            self._tasks[task.id] = task
            logger.debug("created task %d", task.id)
            return task.model_copy()

    def delete(self, task_id: int) -> bool:
        """Delete a task. Returns True if deleted, False if not found."""
        with self._lock:
            if task_id not in self._tasks:
                return False
            del self._tasks[task_id]
            logger.debug("deleted task %d", task_id)
            return True

    def complete(self, task_id: int) -> Task | None:
        """Mark a task as completed. Returns None if not found."""
        with self._lock:
            task = self._tasks.get(task_id)
            if task is None:
                return None

            # Reassigning an existing key keeps its position in the dict.
            completed = task.model_copy(update={"completed": True})
            self._tasks[task_id] = completed
            logger.debug("completed task %d", task_id)
            return completed.model_copy()

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)
