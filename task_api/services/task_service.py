"""Task Service — CRUD operations over the tasks table.

Invariants:
    - list_tasks orders by created_at DESC, then id DESC (stable for equal timestamps)
    - Unknown identifiers raise ResourceNotFoundError
    - update_task applies only supplied fields and always refreshes updated_at
    - Each mutating call commits exactly once
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from task_api.core.errors import ResourceNotFoundError
from task_api.models.task import Task, utcnow
from task_api.schemas.task import TaskCreate, TaskUpdate

logger = logging.getLogger(__name__)


async def list_tasks(db: AsyncSession) -> list[Task]:
    result = await db.execute(
        select(Task).order_by(Task.created_at.desc(), Task.id.desc()),
    )
    return list(result.scalars().all())


async def get_task_or_404(task_id: int, db: AsyncSession) -> Task:
    """Get task or raise ResourceNotFoundError."""
    task = await db.get(Task, task_id)
    if task is None:
        raise ResourceNotFoundError("Task", task_id)
    return task


async def create_task(body: TaskCreate, db: AsyncSession) -> Task:
    now = utcnow()
    task = Task(
        title=body.title,
        description=body.description,
        completed=body.completed,
        created_at=now,
        updated_at=now,
    )
    db.add(task)
    await db.commit()
    await db.refresh(task)
    logger.info(f"Task {task.id} created", extra={"task_id": task.id})
    return task


async def update_task(task_id: int, body: TaskUpdate, db: AsyncSession) -> Task:
    task = await get_task_or_404(task_id, db)
    changes = body.changes()
    for name, value in changes.items():
        setattr(task, name, value)
    task.updated_at = utcnow()
    await db.commit()
    await db.refresh(task)
    logger.info(
        f"Task {task.id} updated ({', '.join(sorted(changes)) or 'no fields'})",
        extra={"task_id": task.id},
    )
    return task


async def delete_task(task_id: int, db: AsyncSession) -> None:
    task = await get_task_or_404(task_id, db)
    await db.delete(task)
    await db.commit()
    logger.info(f"Task {task_id} deleted", extra={"task_id": task_id})
