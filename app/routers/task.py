"""
Task router - API endpoints for tasks and their comments.
"""

from datetime import date
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Body, Depends, Query, Response, status

from app.core.dependencies import get_task_service
from app.schemas.task import CommentPayload, TaskPayload, TaskRead
from app.services.task_service import TaskService

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


@router.post("", response_model=TaskRead)
async def create_task(
    payload: Optional[TaskPayload] = Body(None),
    service: TaskService = Depends(get_task_service),
):
    """Create a new task. A client-supplied id is ignored."""
    return await service.create_task(payload)


@router.put("/{task_id}", response_model=TaskRead)
async def update_task(
    task_id: UUID,
    payload: Optional[TaskPayload] = Body(None),
    service: TaskService = Depends(get_task_service),
):
    """Replace a task's title, description, due date, completed flag and priority."""
    return await service.update_task(task_id, payload)


@router.patch("/{task_id}", response_model=TaskRead)
async def toggle_complete(
    task_id: UUID,
    payload: Optional[TaskPayload] = Body(None),
    service: TaskService = Depends(get_task_service),
):
    """Mark a task done or not done. Only `completed` is read from the body."""
    completed = payload.completed if payload is not None else None
    return await service.toggle_completion(task_id, completed)


@router.get("", response_model=List[TaskRead])
async def list_tasks(
    search: Optional[str] = None,
    completed: Optional[bool] = None,
    due_date: Optional[date] = Query(None, alias="dueDate"),
    filter_type: Optional[str] = Query(None, alias="filterType"),
    service: TaskService = Depends(get_task_service),
):
    """
    List the five most recently created tasks.

    `search`, `completed`, `dueDate` (yyyy-MM-dd) and `filterType` are
    accepted but do not filter the result yet.
    """
    return await service.get_tasks(search, completed, due_date, filter_type)


@router.get("/{task_id}", response_model=TaskRead)
async def get_task(
    task_id: UUID,
    service: TaskService = Depends(get_task_service),
):
    """Get a task by ID."""
    return await service.get_task_by_id(task_id)


@router.delete("/{task_id}", response_class=Response)
async def delete_task(
    task_id: UUID,
    service: TaskService = Depends(get_task_service),
):
    """Delete a task and its comments."""
    await service.delete_task(task_id)
    return Response(status_code=status.HTTP_200_OK)


@router.post("/{task_id}/comments", response_model=TaskRead)
async def add_comment(
    task_id: UUID,
    payload: Optional[CommentPayload] = Body(None),
    service: TaskService = Depends(get_task_service),
):
    """Append a comment to a task and return the task."""
    return await service.add_comment(task_id, payload)


@router.delete("/{task_id}/comments/{comment_id}", response_model=TaskRead)
async def remove_comment(
    task_id: UUID,
    comment_id: UUID,
    service: TaskService = Depends(get_task_service),
):
    """Remove a comment from a task and return the task."""
    return await service.remove_comment(task_id, comment_id)
