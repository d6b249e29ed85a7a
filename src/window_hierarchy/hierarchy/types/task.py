"""
Task node: one entry of the task hierarchy.

NOTE: unlike the window manager internals, dumps list children from top to
bottom, so every child view here is reversed back into stack order.
"""

from typing import Any, Callable, ClassVar, Optional
from pydantic import Field
from window_hierarchy.common.types.rect import Rect
from window_hierarchy.hierarchy.types.window_container import WindowContainer, ContainerKind
from window_hierarchy.hierarchy.types.task_fragment import TaskFragment
from window_hierarchy.hierarchy.types.activity import Activity

class Task(WindowContainer):
    """
    A task (or root task) in the window-manager hierarchy.
    - Children are Tasks, TaskFragments or Activities only.
    - A task is a root task iff task_id == root_task_id.
    """
    KIND: ClassVar[ContainerKind] = ContainerKind.TASK

    task_id: int
    root_task_id: int
    display_id: int = 0
    activity_type: int = 0

    # geometry
    bounds: Rect = Field(default_factory=Rect)
    last_non_fullscreen_bounds: Rect = Field(default_factory=Rect)
    is_fullscreen: bool = False
    surface_width: int = 0
    surface_height: int = 0
    min_width: int = 0
    min_height: int = 0

    # behavior
    created_by_organizer: bool = False # organizer tasks are unwrapped by DisplayContent.root_tasks
    animating_bounds: bool = False
    resize_mode: int = 0

    # activity linkage
    real_activity: str = ""
    orig_activity: str = ""
    resumed_activity: str = "" # empty when nothing is resumed in this task itself

    @property
    def name(self) -> str:
        return str(self.task_id)

    @property
    def stable_id(self) -> str:
        return f"{super().stable_id} {self.task_id}"

    @property
    def is_visible(self) -> bool:
        # tasks carry no visibility of their own, their windows do
        return False

    @property
    def is_root_task(self) -> bool:
        return self.task_id == self.root_task_id

    @property
    def is_empty(self) -> bool:
        # task fragments don't count, only nested tasks and activities
        return not self.tasks and not self.activities

    @property
    def tasks(self) -> tuple["Task", ...]:
        return tuple(c for c in reversed(self.children) if isinstance(c, Task))

    @property
    def task_fragments(self) -> tuple[TaskFragment, ...]:
        return tuple(c for c in reversed(self.children) if isinstance(c, TaskFragment))

    @property
    def activities(self) -> tuple[Activity, ...]:
        return tuple(c for c in reversed(self.children) if isinstance(c, Activity))

    @property
    def top_task(self) -> Optional["Task"]:
        """The top task in the stack, None without child tasks."""
        tasks = self.tasks
        return tasks[0] if tasks else None

    @property
    def resumed_activities(self) -> tuple[str, ...]:
        """
        Resumed activity of this task plus those reported by every nested task.
        - No duplicates, no empty strings. Order is not significant.
        """
        result: dict[str, None] = {}
        if self.resumed_activity:
            result[self.resumed_activity] = None
        for task in self.tasks:
            for activity_name in task.resumed_activities:
                if activity_name:
                    result[activity_name] = None
        return tuple(result)

    def get_task(self, predicate: Callable[["Task"], bool]) -> Optional["Task"]:
        """
        First child task matching predicate, falling back to this task itself.
        NOTE: grandchildren are not searched.
        """
        for task in self.tasks:
            if predicate(task):
                return task
        return self if predicate(self) else None

    def get_task_by_id(self, task_id: int) -> Optional["Task"]:
        return self.get_task(lambda t: t.task_id == task_id)

    def for_all_tasks(self, visitor: Callable[["Task"], Any]) -> None:
        for task in self.tasks:
            visitor(task)

    def get_activity(self, predicate: Callable[[Activity], bool]) -> Optional[Activity]:
        """
        First matching activity of this task, then of each child task (one level deep).
        """
        for activity in self.activities:
            if predicate(activity):
                return activity
        for task in self.tasks:
            for activity in task.activities:
                if predicate(activity):
                    return activity
        return None

    def get_activity_by_name(self, activity_name: str) -> Optional[Activity]:
        # substring match on the activity title
        return self.get_activity(lambda activity: activity_name in activity.title)

    def contains_activity(self, activity_name: str) -> bool:
        return self.get_activity_by_name(activity_name) is not None

    def __str__(self) -> str:
        return f"{type(self).__name__}: {{{self.token} {self.title}}} id={self.task_id} bounds={self.bounds}"
