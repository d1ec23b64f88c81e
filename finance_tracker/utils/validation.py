"""Domain validation errors and scheduling checks."""
from typing import Any, Dict, Iterable, Optional


class ValidationError(Exception):
    """Base class for domain rule violations raised below the HTTP layer."""
    pass


class DuplicateBudget(ValidationError):
    """A budget already exists for the category and period."""
    pass


class InactiveRecurringItem(ValidationError):
    """Entries cannot be generated from an inactive recurring item."""
    pass


class TaskTimeConflict(ValidationError):
    """A task's time slot overlaps another task on the same date."""

    def __init__(self, conflicting_task: Dict[str, Any]):
        self.conflicting_task = conflicting_task
        super().__init__(
            f'Time slot conflicts with existing task "{conflicting_task["title"]}" '
            f'({conflicting_task["startTime"]} - {conflicting_task["endTime"]})'
        )


def time_to_minutes(value: str) -> int:
    """Convert ``HH:MM`` to minutes after midnight."""
    hours, minutes = value.split(":")
    return int(hours) * 60 + int(minutes)


def time_ranges_overlap(start1: str, end1: str, start2: str, end2: str) -> bool:
    """
    Two ranges overlap iff start1 < end2 and start2 < end1.

    Touching ranges (one ends when the other starts) do not overlap.
    """
    if not (start1 and end1 and start2 and end2):
        return False
    return (
        time_to_minutes(start1) < time_to_minutes(end2)
        and time_to_minutes(start2) < time_to_minutes(end1)
    )


def find_time_conflict(
    tasks: Iterable[Dict[str, Any]],
    date: str,
    start_time: Optional[str],
    end_time: Optional[str],
    exclude_task_id: Optional[int] = None,
) -> Optional[Dict[str, Any]]:
    """
    Return the first stored task on ``date`` whose time range overlaps.

    Tasks without both a start and an end time never conflict.
    """
    if not start_time or not end_time:
        return None

    for task in tasks:
        if task.get("date") != date:
            continue
        if exclude_task_id is not None and task.get("id") == exclude_task_id:
            continue
        if not task.get("startTime") or not task.get("endTime"):
            continue
        if time_ranges_overlap(start_time, end_time, task["startTime"], task["endTime"]):
            return task
    return None
