from typing import ClassVar
from window_hierarchy.hierarchy.types.window_container import WindowContainer, ContainerKind
from window_hierarchy.hierarchy.types.activity import Activity

class DisplayArea(WindowContainer):
    """
    Sub-partition of a display.
    - Only task display areas (is_task_display_area) host tasks, so only they report activities.
    """
    KIND: ClassVar[ContainerKind] = ContainerKind.DISPLAY_AREA

    is_task_display_area: bool = False

    @property
    def activities(self) -> tuple[Activity, ...]:
        if not self.is_task_display_area:
            return ()
        return self.collect_descendants(Activity)

    def contains_activity(self, activity_name: str) -> bool:
        # exact title match, unlike Task.contains_activity
        return any(activity.title == activity_name for activity in self.activities)
