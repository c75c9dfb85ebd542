"""
Seed script to create a few sample tasks with comments.

Usage:
    python scripts/seed_tasks.py
"""

import asyncio
import sys
from datetime import date, timedelta
from pathlib import Path

# Add parent directory to path so we can import app modules
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from app.db.session import get_async_session_context
from app.schemas.task import CommentPayload, TaskPayload
from app.services.task_service import TaskService


SAMPLE_TASKS = [
    {
        "title": "Write release notes",
        "description": "Summarise the changes since the last tag",
        "due_in_days": 0,
        "priority": "high",
        "comments": ["Draft is in the shared folder"],
    },
    {
        "title": "Review open pull requests",
        "description": None,
        "due_in_days": 2,
        "priority": "medium",
        "comments": [],
    },
    {
        "title": "Plan team offsite",
        "description": "Venue, agenda, budget",
        "due_in_days": 14,
        "priority": "low",
        "comments": ["Ask for dietary requirements", "Budget approved"],
    },
]


async def seed_tasks():
    """Create the sample tasks through the service layer."""

    async with get_async_session_context() as db:
        service = TaskService(db)
        today = date.today()

        for sample in SAMPLE_TASKS:
            task = await service.create_task(
                TaskPayload(
                    title=sample["title"],
                    description=sample["description"],
                    due_date=today + timedelta(days=sample["due_in_days"]),
                    priority=sample["priority"],
                )
            )
            print(f"[OK] Created task: {task.title} (ID: {task.id})")

            for text in sample["comments"]:
                await service.add_comment(task.id, CommentPayload(text=text))
                print(f"     + comment: {text}")


if __name__ == "__main__":
    asyncio.run(seed_tasks())
