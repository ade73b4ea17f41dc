"""
Per-user task CRUD.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from sqlalchemy.ext.asyncio import AsyncSession

from database.models import Task
from database.task_repository import TaskRepository
from services.errors import InvalidTaskError, TaskNotFoundError

logger = logging.getLogger(__name__)


def _clean_title(title: str | None) -> str:
    title = (title or "").strip()
    if not title:
        raise InvalidTaskError("Title is required")
    return title


class TaskService:
    def __init__(self, session: AsyncSession):
        self.tasks = TaskRepository(session)

    async def list_tasks(self, user_id: int) -> List[Task]:
        tasks = await self.tasks.list_by_user(user_id)
        logger.debug("list_tasks: user=%s returned=%d", user_id, len(tasks))
        return tasks

    async def get_task(self, task_id: int, user_id: int) -> Task:
        task = await self.tasks.get_for_user(task_id, user_id)
        if task is None:
            raise TaskNotFoundError()
        return task

    async def create_task(
        self,
        user_id: int,
        title: str,
        description: str = "",
        done: bool = False,
    ) -> Task:
        task = await self.tasks.create(user_id, _clean_title(title), description or "", done)
        logger.info("CreateTask: user=%s id=%s", user_id, task.id)
        return task

    async def update_task(self, task_id: int, user_id: int, changes: Dict[str, Any]) -> Task:
        """Apply a partial update; fields absent from ``changes`` are kept."""
        if "title" in changes:
            changes = {**changes, "title": _clean_title(changes["title"])}
        task = await self.get_task(task_id, user_id)
        if changes:
            task = await self.tasks.update(task, **changes)
        logger.info(
            "UpdateTask: user=%s id=%s fields=%s", user_id, task_id, sorted(changes)
        )
        return task

    async def delete_task(self, task_id: int, user_id: int) -> None:
        task = await self.get_task(task_id, user_id)
        await self.tasks.delete(task)
        logger.info("DeleteTask: user=%s id=%s", user_id, task_id)
