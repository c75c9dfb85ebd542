"""
Task business logic service.

The only place task rules live: argument checks, timestamps,
not-found handling and wrapping of store failures. Each mutating
operation is one transaction on the request's session.
"""

import logging
from contextlib import asynccontextmanager
from datetime import date
from typing import List, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.errors import InternalError, InvalidArgumentError, NotFoundError
from app.models.comment import Comment
from app.models.task import Task
from app.repositories.comment_repository import CommentRepository
from app.repositories.errors import RecordNotFoundError
from app.repositories.task_repository import TaskRepository
from app.schemas.task import CommentPayload, CommentRead, TaskPayload, TaskRead
from app.utils.time import utc_now

logger = logging.getLogger(__name__)


class TaskService:
    """Service for task and comment business logic."""

    def __init__(
        self,
        db: AsyncSession,
        task_repository: Optional[TaskRepository] = None,
        comment_repository: Optional[CommentRepository] = None,
    ):
        self.db = db
        self.repository = task_repository or TaskRepository(db)
        self.comment_repository = comment_repository or CommentRepository(db)

    @asynccontextmanager
    async def _store_errors(self, failure: str):
        """Let domain errors through; roll back and wrap everything else."""
        try:
            yield
        except (InvalidArgumentError, NotFoundError):
            raise
        except Exception as exc:
            logger.exception("%s: %s", failure, exc)
            await self.db.rollback()
            raise InternalError(failure, cause=str(exc)) from exc

    async def _get_existing(self, task_id: UUID) -> Task:
        task = await self.repository.find_by_id(task_id)
        if task is None:
            logger.warning("Task not found with ID: %s", task_id)
            raise NotFoundError(f"Task not found with ID: {task_id}")
        return task

    @staticmethod
    def _to_read(task: Task, comments: List[Comment]) -> TaskRead:
        read = TaskRead.model_validate(task)
        read.comments = [CommentRead.model_validate(c) for c in comments]
        return read

    async def create_task(self, payload: Optional[TaskPayload]) -> TaskRead:
        """Create a new task. Any client-supplied id is ignored."""
        logger.info("Creating a new task")
        if payload is None:
            logger.warning("Provided task is null. Cannot create task.")
            raise InvalidArgumentError("Task must not be null")

        async with self._store_errors("Failed to create task"):
            now = utc_now()
            task = Task(
                title=payload.title,
                description=payload.description,
                due_date=payload.due_date,
                completed=payload.completed,
                priority=payload.priority,
                created_at=now,
                updated_at=now,
            )
            task = await self.repository.save(task)
            await self.db.commit()

        logger.info("Task created successfully with ID: %s", task.id)
        return self._to_read(task, [])

    async def update_task(self, task_id: Optional[UUID], payload: Optional[TaskPayload]) -> TaskRead:
        """
        Replace a task's editable fields.

        title, description, due_date, completed and priority are all
        taken from ``payload``, including nulls. id and created_at are
        never touched.
        """
        logger.info("Updating task with ID: %s", task_id)
        if task_id is None or payload is None:
            logger.warning("Task ID or updated task is null. Cannot proceed with update.")
            raise InvalidArgumentError("Task ID and updated task must not be null")

        async with self._store_errors("Failed to update task"):
            task = await self._get_existing(task_id)
            task.title = payload.title
            task.description = payload.description
            task.due_date = payload.due_date
            task.completed = payload.completed
            task.priority = payload.priority
            task.updated_at = utc_now()

            task = await self.repository.save(task)
            comments = await self.comment_repository.find_by_task_id(task.id)
            await self.db.commit()

        logger.info("Task updated successfully. ID: %s", task.id)
        return self._to_read(task, comments)

    async def toggle_completion(self, task_id: Optional[UUID], completed: Optional[bool]) -> TaskRead:
        """Set the completed flag only; updated_at is left as it was."""
        logger.info("Toggling completion for task %s to %s", task_id, completed)
        if task_id is None:
            logger.warning("Task ID is null. Cannot toggle completion.")
            raise InvalidArgumentError("Task ID must not be null")
        if completed is None:
            raise InvalidArgumentError("Completed flag must not be null")

        async with self._store_errors("Failed to toggle task completion"):
            task = await self._get_existing(task_id)
            task.completed = completed

            task = await self.repository.save(task)
            comments = await self.comment_repository.find_by_task_id(task.id)
            await self.db.commit()

        logger.info("Task completion updated. ID: %s, completed: %s", task.id, task.completed)
        return self._to_read(task, comments)

    async def delete_task(self, task_id: Optional[UUID]) -> None:
        """Delete a task and, through the cascade, its comments."""
        logger.info("Deleting task with ID: %s", task_id)
        if task_id is None:
            logger.warning("Task ID is null. Cannot delete task.")
            raise InvalidArgumentError("Task ID must not be null")

        async with self._store_errors("Failed to delete task"):
            try:
                await self.repository.delete_by_id(task_id)
            except RecordNotFoundError:
                logger.warning("Task with ID %s not found. Nothing to delete.", task_id)
                raise NotFoundError(f"Task not found with ID: {task_id}") from None
            await self.db.commit()

        logger.info("Task deleted successfully. ID: %s", task_id)

    async def get_task_by_id(self, task_id: Optional[UUID]) -> TaskRead:
        """Get a task by ID with its comments."""
        if task_id is None:
            logger.warning("Task ID is null. Cannot fetch task.")
            raise InvalidArgumentError("Task ID must not be null")

        async with self._store_errors("Failed to fetch task"):
            task = await self._get_existing(task_id)
            comments = await self.comment_repository.find_by_task_id(task.id)

        return self._to_read(task, comments)

    async def get_tasks(
        self,
        search: Optional[str] = None,
        completed: Optional[bool] = None,
        due_date: Optional[date] = None,
        filter_type: Optional[str] = None,
    ) -> List[TaskRead]:
        """
        The five most recently created tasks, newest first.

        The filter arguments are part of the public signature but are
        not applied; every call returns the same recent listing.
        """
        logger.debug(
            "Listing recent tasks (filters ignored: search=%r completed=%r due_date=%r filter_type=%r)",
            search, completed, due_date, filter_type,
        )

        async with self._store_errors("Failed to fetch tasks"):
            tasks = await self.repository.find_recent()
            comments_by_task = await self.comment_repository.find_by_task_ids(t.id for t in tasks)

        return [self._to_read(task, comments_by_task.get(task.id, [])) for task in tasks]

    async def add_comment(self, task_id: Optional[UUID], payload: Optional[CommentPayload]) -> TaskRead:
        """
        Append a comment to a task.

        The comment insert and the task save are committed together.
        Task.updated_at is not bumped.
        """
        logger.info("Adding comment to task %s", task_id)
        if task_id is None:
            logger.warning("Task ID is null. Cannot add comment.")
            raise InvalidArgumentError("Task ID must not be null")
        if payload is None:
            logger.warning("Comment is null. Cannot add comment.")
            raise InvalidArgumentError("Comment must not be null")

        async with self._store_errors("Failed to add comment"):
            task = await self._get_existing(task_id)
            comment = Comment(
                task_id=task.id,
                text=payload.text,
                time_stamp=utc_now(),
            )
            await self.comment_repository.save(comment)
            task = await self.repository.save(task)
            comments = await self.comment_repository.find_by_task_id(task.id)
            await self.db.commit()

        logger.info("Comment %s added to task %s", comment.id, task_id)
        return self._to_read(task, comments)

    async def remove_comment(self, task_id: Optional[UUID], comment_id: Optional[UUID]) -> TaskRead:
        """Remove one comment from a task's comment list."""
        logger.info("Removing comment %s from task %s", comment_id, task_id)
        if task_id is None or comment_id is None:
            raise InvalidArgumentError("Task ID and comment ID must not be null")

        async with self._store_errors("Failed to remove comment"):
            task = await self._get_existing(task_id)
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment is None or comment.task_id != task.id:
                logger.warning("Comment %s not found on task %s", comment_id, task_id)
                raise NotFoundError(f"Comment not found with ID: {comment_id}")

            await self.comment_repository.delete_by_id(comment_id)
            comments = await self.comment_repository.find_by_task_id(task.id)
            await self.db.commit()

        return self._to_read(task, comments)
