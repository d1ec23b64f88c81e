from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from finance_tracker.db.json_store import JsonDatabase
from finance_tracker.db.session import get_db
from finance_tracker.models.task import Task, TaskCreate
from finance_tracker.repositories.task_repo import TaskRepository
from finance_tracker.utils.validation import TaskTimeConflict

router = APIRouter()


def _conflict(exc: TaskTimeConflict) -> HTTPException:
    task = exc.conflicting_task
    return HTTPException(
        status_code=status.HTTP_409_CONFLICT,
        detail={
            "error": "Time slot conflict",
            "message": str(exc),
            "conflictingTask": {
                "id": task["id"],
                "title": task["title"],
                "startTime": task["startTime"],
                "endTime": task["endTime"],
            },
        },
    )


@router.get("", response_model=List[Task])
async def list_tasks(db: JsonDatabase = Depends(get_db)):
    """List all tasks"""
    return TaskRepository(db).list_all()


@router.get("/{task_id}", response_model=Task)
async def get_task(task_id: int, db: JsonDatabase = Depends(get_db)):
    """Get a specific task"""
    task = TaskRepository(db).get(task_id)
    if task is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    return task


@router.post("", response_model=Task, status_code=status.HTTP_201_CREATED)
async def create_task(payload: TaskCreate, db: JsonDatabase = Depends(get_db)):
    """Create a task; its time slot must not overlap another task that day"""
    try:
        return TaskRepository(db).create(payload)
    except TaskTimeConflict as e:
        raise _conflict(e)


@router.put("/{task_id}", response_model=Task)
async def replace_task(task_id: int, payload: TaskCreate, db: JsonDatabase = Depends(get_db)):
    """Replace a task"""
    try:
        task = TaskRepository(db).update(task_id, payload)
    except TaskTimeConflict as e:
        raise _conflict(e)
    if task is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    return task


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_task(task_id: int, db: JsonDatabase = Depends(get_db)):
    """Delete a task"""
    if not TaskRepository(db).delete(task_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
