"""
Task repository - database operations for Task.
"""

from typing import List, Optional
from uuid import UUID
import uuid

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.task import Task
from app.repositories.errors import RecordNotFoundError

RECENT_LIMIT = 5


class TaskRepository:
    """Repository for Task database operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def save(self, task: Task) -> Task:
        """Insert a task without an id, otherwise flush pending changes."""
        if task.id is None:
            task.id = uuid.uuid4()
            self.db.add(task)
        await self.db.flush()
        await self.db.refresh(task)
        return task

    async def find_by_id(self, task_id: UUID) -> Optional[Task]:
        """Get a task by ID."""
        result = await self.db.execute(
            select(Task).where(Task.id == task_id)
        )
        return result.scalar_one_or_none()

    async def delete_by_id(self, task_id: UUID) -> None:
        """Delete a task; its comments go with it via ON DELETE CASCADE."""
        result = await self.db.execute(
            delete(Task).where(Task.id == task_id)
        )
        if result.rowcount == 0:
            raise RecordNotFoundError(Task.__tablename__, task_id)

    async def find_recent(self, limit: int = RECENT_LIMIT) -> List[Task]:
        """Most recently created tasks, newest first."""
        query = select(Task).order_by(Task.created_at.desc()).limit(limit)
        result = await self.db.execute(query)
        return list(result.scalars().all())
