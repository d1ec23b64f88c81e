from typing import Optional

from finance_tracker.models.task import Task, TaskCreate
from finance_tracker.repositories.base import JsonRepository
from finance_tracker.utils.validation import TaskTimeConflict, find_time_conflict


class TaskRepository(JsonRepository[Task]):
    """Tasks; time slots on the same date may not overlap."""

    collection = "tasks"
    model = Task

    def check_conflict(self, payload: TaskCreate, exclude_task_id: Optional[int] = None) -> None:
        """Raise TaskTimeConflict if the payload's slot overlaps a stored task."""
        if not payload.has_time_range:
            return
        conflict = find_time_conflict(
            self.db.read_collection(self.collection),
            payload.date,
            payload.start_time,
            payload.end_time,
            exclude_task_id=exclude_task_id,
        )
        if conflict is not None:
            raise TaskTimeConflict(conflict)

    def create(self, payload: TaskCreate) -> Task:
        self.check_conflict(payload)
        return super().create(payload)

    def update(self, record_id: int, payload: TaskCreate) -> Optional[Task]:
        if self.get(record_id) is None:
            return None
        self.check_conflict(payload, exclude_task_id=record_id)
        return super().update(record_id, payload)
