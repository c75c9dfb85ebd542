"""
Models package.

Import all models here so they are registered with SQLAlchemy.
"""

from app.models.task import Task
from app.models.comment import Comment

# Export all models
__all__ = [
    "Task",
    "Comment",
]
