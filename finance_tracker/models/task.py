from enum import Enum
from typing import Any, Optional

from pydantic import Field, field_validator, model_validator

from finance_tracker.models.base import CamelModel, Record
from finance_tracker.utils.validation import time_to_minutes


class TaskStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    RUNNING = "running"
    REJECTED = "rejected"


class TaskBase(CamelModel):
    title: str = Field(..., min_length=1)
    subtitle: str = ""
    date: str = Field(..., pattern=r"^\d{4}-\d{2}-\d{2}$")
    start_time: Optional[str] = Field(default=None, pattern=r"^\d{2}:\d{2}$")
    end_time: Optional[str] = Field(default=None, pattern=r"^\d{2}:\d{2}$")
    status: TaskStatus = TaskStatus.PENDING
    exercises: Optional[Any] = None
    nutrition: Optional[Any] = None
    details: Optional[Any] = None

    @field_validator("status", mode="before")
    @classmethod
    def default_unknown_status(cls, value):
        # Unknown or missing statuses fall back to pending.
        if isinstance(value, str) and value.lower() in {status.value for status in TaskStatus}:
            return value.lower()
        if isinstance(value, TaskStatus):
            return value
        return TaskStatus.PENDING

    @field_validator("start_time", "end_time", mode="before")
    @classmethod
    def blank_time_is_none(cls, value):
        return value or None

    @model_validator(mode="after")
    def check_time_range(self):
        if self.start_time and self.end_time:
            if time_to_minutes(self.end_time) <= time_to_minutes(self.start_time):
                raise ValueError("endTime must be after startTime")
        return self

    @property
    def has_time_range(self) -> bool:
        return bool(self.start_time and self.end_time)


class TaskCreate(TaskBase):
    pass


class Task(TaskBase, Record):
    pass
