from typing import ClassVar
from window_hierarchy.hierarchy.types.window_container import WindowContainer, ContainerKind
from window_hierarchy.hierarchy.types.activity import Activity

class TaskFragment(WindowContainer):
    """
    A sub-partition of a task hosting its own activities (e.g. activity embedding).
    """
    KIND: ClassVar[ContainerKind] = ContainerKind.TASK_FRAGMENT

    activity_type: int = 0
    display_id: int = 0
    min_width: int = 0
    min_height: int = 0

    @property
    def activities(self) -> tuple[Activity, ...]:
        # dumps list children top to bottom, reverse to get stack order
        return tuple(c for c in reversed(self.children) if isinstance(c, Activity))

    def contains_activity(self, activity_name: str) -> bool:
        return any(activity_name in activity.title for activity in self.activities)
