"""
Schemas package.

Import all schemas here for easy access.
"""

from app.schemas.task import CommentPayload, CommentRead, TaskPayload, TaskRead

__all__ = [
    # Task
    "TaskPayload", "TaskRead",
    # Comment
    "CommentPayload", "CommentRead",
]
