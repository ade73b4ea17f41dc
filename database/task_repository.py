"""
Task persistence.

Every read that knows the caller is scoped by ``user_id`` so a task owned
by someone else looks exactly like a missing one.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from database.models import Task

logger = logging.getLogger(__name__)

_UPDATABLE_FIELDS = ("title", "description", "done")


class TaskRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(
        self,
        user_id: int,
        title: str,
        description: str = "",
        done: bool = False,
    ) -> Task:
        task = Task(user_id=user_id, title=title, description=description, done=done)
        self.session.add(task)
        await self.session.flush()
        return task

    async def list_by_user(self, user_id: int) -> List[Task]:
        result = await self.session.execute(
            select(Task)
            .where(Task.user_id == user_id)
            .order_by(Task.created_at.desc(), Task.id.desc())
        )
        return list(result.scalars().all())

    async def get_for_user(self, task_id: int, user_id: int) -> Optional[Task]:
        result = await self.session.execute(
            select(Task).where(Task.id == task_id, Task.user_id == user_id).limit(1)
        )
        return result.scalar_one_or_none()

    async def update(self, task: Task, **fields: Any) -> Task:
        for name, value in fields.items():
            if name not in _UPDATABLE_FIELDS:
                raise ValueError(f"Field '{name}' cannot be updated")
            setattr(task, name, value)
        await self.session.flush()
        return task

    async def delete(self, task: Task) -> None:
        await self.session.delete(task)
        await self.session.flush()
