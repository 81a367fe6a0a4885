"""Type declaration task pool contracts."""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import Field, constr

from .base import IconBuildModel

NonEmptyStr = constr(min_length=1)
TaskState = Literal["pending", "running", "succeeded", "failed"]


class DtsTask(IconBuildModel):
    input_path: NonEmptyStr
    output_path: NonEmptyStr
    state: TaskState = "pending"
    error: Optional[str] = None


class PoolResult(IconBuildModel):
    tasks: List[DtsTask] = Field(default_factory=list)
    worker_count: int = Field(..., ge=1)

    @property
    def failed(self) -> List[DtsTask]:
        return [task for task in self.tasks if task.state == "failed"]

    @property
    def succeeded(self) -> List[DtsTask]:
        return [task for task in self.tasks if task.state == "succeeded"]

    @property
    def pending(self) -> List[DtsTask]:
        return [task for task in self.tasks if task.state == "pending"]

    @property
    def ok(self) -> bool:
        return not self.failed
