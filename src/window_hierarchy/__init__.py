# read-only model of a captured window-manager hierarchy (displays, tasks, activities)

from window_hierarchy.common.errors import HierarchyError, InvariantViolationError
from window_hierarchy.common.types.rect import Rect
from window_hierarchy.hierarchy.types import (
    WindowContainer,
    ContainerKind,
    Activity,
    TaskFragment,
    DisplayArea,
    Task,
    DisplayContent,
)

__all__ = [
    "HierarchyError",
    "InvariantViolationError",
    "Rect",
    "WindowContainer",
    "ContainerKind",
    "Activity",
    "TaskFragment",
    "DisplayArea",
    "Task",
    "DisplayContent",
]
