"""Task Routes — CRUD endpoints for the task collection.

Invariants:
    - Request bodies validated by Pydantic before reaching the handler
    - Every success response uses the {success, message?, data?} envelope
    - PUT and PATCH share one handler (partial merge of supplied fields)
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.ext.asyncio import AsyncSession

from task_api.core.envelope import success
from task_api.infrastructure.database import get_db
from task_api.schemas.task import TaskCreate, TaskResponse, TaskUpdate
from task_api.services import task_service

router = APIRouter(prefix="/tasks", tags=["tasks"])

# Identifiers outside the signed 64-bit range cannot exist in the table
TaskId = Annotated[int, Path(ge=1, le=2**63 - 1)]


def _serialize(task) -> dict:
    return TaskResponse.model_validate(task).model_dump(mode="json")


@router.get("")
async def list_tasks(db: AsyncSession = Depends(get_db)):
    """List all tasks, most recent first."""
    tasks = await task_service.list_tasks(db)
    return success(data=[_serialize(t) for t in tasks])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_task(body: TaskCreate, db: AsyncSession = Depends(get_db)):
    """Create a task."""
    task = await task_service.create_task(body, db)
    return success(data=_serialize(task), message="Task created successfully")


@router.get("/{task_id}")
async def get_task(task_id: TaskId, db: AsyncSession = Depends(get_db)):
    task = await task_service.get_task_or_404(task_id, db)
    return success(data=_serialize(task))


@router.put("/{task_id}")
@router.patch("/{task_id}")
async def update_task(
    task_id: TaskId,
    body: TaskUpdate | None = None,
    db: AsyncSession = Depends(get_db),
):
    """Update a task. Fields absent from the body keep their current values."""
    task = await task_service.update_task(task_id, body or TaskUpdate(), db)
    return success(data=_serialize(task), message="Task updated successfully")


@router.delete("/{task_id}")
async def delete_task(task_id: TaskId, db: AsyncSession = Depends(get_db)):
    await task_service.delete_task(task_id, db)
    return success(message="Task deleted successfully")
