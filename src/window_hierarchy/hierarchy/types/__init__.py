# node types of a captured window-manager hierarchy

from window_hierarchy.hierarchy.types.window_container import WindowContainer, ContainerKind
from window_hierarchy.hierarchy.types.activity import Activity
from window_hierarchy.hierarchy.types.task_fragment import TaskFragment
from window_hierarchy.hierarchy.types.display_area import DisplayArea
from window_hierarchy.hierarchy.types.task import Task
from window_hierarchy.hierarchy.types.display_content import DisplayContent

__all__ = [
    "WindowContainer",
    "ContainerKind",
    "Activity",
    "TaskFragment",
    "DisplayArea",
    "Task",
    "DisplayContent",
]
