"""Bounded worker pool for per-entry type declaration extraction."""

from .dts import RollupDtsJob, build_dts_tasks
from .task_pool import TaskCursor, TaskPool

__all__ = ["RollupDtsJob", "build_dts_tasks", "TaskCursor", "TaskPool"]
