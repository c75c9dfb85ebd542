"""
Task and comment Pydantic schemas.
"""

from datetime import date, datetime
from typing import List, Optional
from uuid import UUID

from pydantic import Field, field_serializer

from app.schemas.base import CamelModel, CamelRead
from app.utils.time import format_display


class TaskPayload(CamelModel):
    """
    Request body for creating, replacing or toggling a task.

    ``id`` is accepted so clients can post a task they already hold,
    but the server always assigns its own.
    """

    id: Optional[UUID] = None
    title: Optional[str] = None
    description: Optional[str] = None
    due_date: Optional[date] = None
    completed: bool = False
    priority: Optional[str] = None


class CommentPayload(CamelModel):
    """Request body for adding a comment. Only ``text`` is used."""

    id: Optional[UUID] = None
    text: Optional[str] = None


class CommentRead(CamelRead):
    """Comment as returned to clients. The owning task id is not exposed."""

    id: UUID
    text: Optional[str] = None
    time_stamp: datetime

    @field_serializer("time_stamp", when_used="json")
    def _format_time_stamp(self, value: datetime) -> str:
        return format_display(value)


class TaskRead(CamelRead):
    """Task with its comments in insertion order (API response)."""

    id: UUID
    title: Optional[str] = None
    description: Optional[str] = None
    due_date: Optional[date] = None
    completed: bool = False
    created_at: datetime
    updated_at: datetime
    priority: Optional[str] = None
    comments: List[CommentRead] = Field(default_factory=list)

    @field_serializer("created_at", "updated_at", when_used="json")
    def _format_timestamps(self, value: datetime) -> str:
        return format_display(value)
