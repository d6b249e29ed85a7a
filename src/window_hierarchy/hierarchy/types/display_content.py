"""
DisplayContent node: one physical or logical display of a capture.

Besides its own attributes, a display answers the two questions trace
assertions ask most: which root tasks does it show, and where is an activity placed.
"""

from typing import Any, ClassVar, Optional
from pydantic import Field, field_validator
from window_hierarchy.common.errors import InvariantViolationError
from window_hierarchy.common.logging.logger import logger
from window_hierarchy.common.types.rect import Rect
from window_hierarchy.hierarchy.types.window_container import WindowContainer, ContainerKind
from window_hierarchy.hierarchy.types.display_area import DisplayArea
from window_hierarchy.hierarchy.types.task import Task

class DisplayContent(WindowContainer):
    """
    A display in the window-manager hierarchy.
    - Optional bounds missing from the dump are exposed as an empty Rect, never None.
    """
    KIND: ClassVar[ContainerKind] = ContainerKind.DISPLAY

    id: int
    focused_root_task_id: int = 0
    resumed_activity: str = ""
    single_task_instance: bool = False

    # geometry
    display_rect: Rect = Field(default_factory=Rect)
    app_rect: Rect = Field(default_factory=Rect)
    dpi: int = 0
    flags: int = 0
    rotation: int = 0
    last_orientation: int = 0
    surface_size: int = 0
    default_pinned_stack_bounds: Rect = Field(default_factory=Rect)
    pinned_stack_movement_bounds: Rect = Field(default_factory=Rect)
    stable_bounds: Rect = Field(default_factory=Rect)

    # state strings
    focused_app: str = ""
    last_transition: str = ""
    app_transition_state: str = ""

    @field_validator(
        "default_pinned_stack_bounds", "pinned_stack_movement_bounds", "stable_bounds", mode="before"
    )
    @classmethod
    def _empty_rect_if_missing(cls, value: Any) -> Any:
        return Rect() if value is None else value

    @property
    def name(self) -> str:
        return str(self.id)

    @property
    def stable_id(self) -> str:
        return f"{self.kind.value}{self.title}"

    @property
    def root_tasks(self) -> tuple[Task, ...]:
        """
        Root tasks of the display, with organizer-created root tasks unwrapped.

        Organizer tasks are a wrapper, not a stack of their own: they are dropped
        and their immediate children are appended in their place, each
        organizer's children in reverse stored order.
        NOTE: only Task children are promoted, fragments and activities directly
        under an organizer task are not root tasks and are left out.
        """
        tasks = list(self.collect_descendants(Task, lambda t: t.is_root_task))

        # walk backwards and pull out every task created by an organizer
        organized_tasks = [task for task in reversed(tasks) if task.created_by_organizer]
        tasks = [task for task in tasks if not task.created_by_organizer]

        # then promote their children, restoring the organizers' forward order
        for organized_task in reversed(organized_tasks):
            logger.debug(
                f"Display {self.id}: unwrapping organizer task {organized_task.task_id} "
                f"({len(organized_task.children)} children)"
            )
            for child in reversed(organized_task.children):
                if isinstance(child, Task):
                    tasks.append(child)
                else:
                    logger.debug(f"Display {self.id}: skipping non-task child {child.stable_id}")

        return tuple(tasks)

    def contains_activity(self, activity_name: str) -> bool:
        return any(task.contains_activity(activity_name) for task in self.root_tasks)

    def get_task_display_area(self, activity_name: str) -> Optional[DisplayArea]:
        """
        The single task display area holding activity_name.

        Returns:
            The matching DisplayArea, or None when the activity isn't placed in any.

        Raises:
            InvariantViolationError: more than one task display area holds the activity.
        """
        task_display_areas = self.collect_descendants(
            DisplayArea, lambda area: area.is_task_display_area
        )
        matches = [area for area in task_display_areas if area.contains_activity(activity_name)]

        if len(matches) > 1:
            offending = [area.stable_id for area in matches]
            logger.error(
                f"Display {self.id}: activity {activity_name} found in {len(matches)} task display areas: {offending}"
            )
            raise InvariantViolationError(
                f"There must be exactly one activity among all TaskDisplayAreas, "
                f"found {activity_name} in {len(matches)}: {offending}",
                offending=offending,
            )

        return matches[0] if matches else None

    def __str__(self) -> str:
        return (
            f"{self.kind.value} #{self.id}: name={self.title} mDisplayRect={self.display_rect} "
            f"mAppRect={self.app_rect} mFlags={self.flags}"
        )
