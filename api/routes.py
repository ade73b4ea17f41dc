"""
Task REST routes (all require a Bearer token) and a health probe.

Route prefix: /api
"""

from __future__ import annotations

import logging
from typing import Dict, List

from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy.ext.asyncio import AsyncSession

from auth.dependencies import db_session, get_current_user_id
from services.errors import InvalidTaskError, TaskNotFoundError
from services.task_service import TaskService
from utils.schemas import (
    MessageResponse,
    TaskCreateRequest,
    TaskOut,
    TaskUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()

# Row ids are signed 64-bit integers in every supported backend
_MAX_ROW_ID = 2**63 - 1


def _not_found(exc: TaskNotFoundError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=exc.message)


def _bad_request(exc: InvalidTaskError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.message)


@router.get("/health", tags=["health"])
async def health() -> Dict[str, str]:
    return {"status": "ok"}


@router.get("/tasks", response_model=List[TaskOut], tags=["tasks"])
async def list_tasks(
    user_id: int = Depends(get_current_user_id),
    session: AsyncSession = Depends(db_session),
) -> List[TaskOut]:
    """List the caller's tasks, newest first."""
    tasks = await TaskService(session).list_tasks(user_id)
    return [TaskOut.model_validate(t) for t in tasks]


@router.post(
    "/tasks",
    response_model=TaskOut,
    status_code=status.HTTP_201_CREATED,
    tags=["tasks"],
)
async def create_task(
    req: TaskCreateRequest,
    user_id: int = Depends(get_current_user_id),
    session: AsyncSession = Depends(db_session),
) -> TaskOut:
    try:
        task = await TaskService(session).create_task(
            user_id, req.title, req.description, req.done,
        )
    except InvalidTaskError as exc:
        raise _bad_request(exc)
    return TaskOut.model_validate(task)


@router.get("/tasks/{task_id}", response_model=TaskOut, tags=["tasks"])
async def get_task(
    task_id: int = Path(..., ge=1, le=_MAX_ROW_ID),
    user_id: int = Depends(get_current_user_id),
    session: AsyncSession = Depends(db_session),
) -> TaskOut:
    try:
        task = await TaskService(session).get_task(task_id, user_id)
    except TaskNotFoundError as exc:
        raise _not_found(exc)
    return TaskOut.model_validate(task)


@router.put("/tasks/{task_id}", response_model=TaskOut, tags=["tasks"])
async def update_task(
    req: TaskUpdateRequest,
    task_id: int = Path(..., ge=1, le=_MAX_ROW_ID),
    user_id: int = Depends(get_current_user_id),
    session: AsyncSession = Depends(db_session),
) -> TaskOut:
    """Partial update — only the fields present in the body change."""
    try:
        task = await TaskService(session).update_task(task_id, user_id, req.changes())
    except InvalidTaskError as exc:
        raise _bad_request(exc)
    except TaskNotFoundError as exc:
        raise _not_found(exc)
    return TaskOut.model_validate(task)


@router.delete("/tasks/{task_id}", response_model=MessageResponse, tags=["tasks"])
async def delete_task(
    task_id: int = Path(..., ge=1, le=_MAX_ROW_ID),
    user_id: int = Depends(get_current_user_id),
    session: AsyncSession = Depends(db_session),
) -> MessageResponse:
    try:
        await TaskService(session).delete_task(task_id, user_id)
    except TaskNotFoundError as exc:
        raise _not_found(exc)
    return MessageResponse(message="Task deleted successfully")
