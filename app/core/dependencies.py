"""
FastAPI dependencies for the application.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_db
from app.services.task_service import TaskService


async def get_task_service(db: AsyncSession = Depends(get_db)) -> TaskService:
    """Build a TaskService bound to the request's session."""
    return TaskService(db)
