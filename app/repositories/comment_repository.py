"""
Comment repository - database operations for Comment.
"""

from typing import Dict, Iterable, List, Optional
from uuid import UUID
import uuid

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.comment import Comment
from app.repositories.errors import RecordNotFoundError


class CommentRepository:
    """Repository for Comment database operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def save(self, comment: Comment) -> Comment:
        """Insert a comment without an id, otherwise flush pending changes."""
        if comment.id is None:
            comment.id = uuid.uuid4()
            self.db.add(comment)
        await self.db.flush()
        await self.db.refresh(comment)
        return comment

    async def find_by_id(self, comment_id: UUID) -> Optional[Comment]:
        """Get a comment by ID."""
        result = await self.db.execute(
            select(Comment).where(Comment.id == comment_id)
        )
        return result.scalar_one_or_none()

    async def delete_by_id(self, comment_id: UUID) -> None:
        """Delete a single comment."""
        result = await self.db.execute(
            delete(Comment).where(Comment.id == comment_id)
        )
        if result.rowcount == 0:
            raise RecordNotFoundError(Comment.__tablename__, comment_id)

    async def find_by_task_id(self, task_id: UUID) -> List[Comment]:
        """Comments of one task in insertion order."""
        query = (
            select(Comment)
            .where(Comment.task_id == task_id)
            .order_by(Comment.seq.asc())
        )
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def find_by_task_ids(self, task_ids: Iterable[UUID]) -> Dict[UUID, List[Comment]]:
        """Comments for several tasks in one query, grouped by task id."""
        ids = list(task_ids)
        grouped: Dict[UUID, List[Comment]] = {task_id: [] for task_id in ids}
        if not ids:
            return grouped

        query = (
            select(Comment)
            .where(Comment.task_id.in_(ids))
            .order_by(Comment.seq.asc())
        )
        result = await self.db.execute(query)
        for comment in result.scalars().all():
            grouped[comment.task_id].append(comment)
        return grouped
