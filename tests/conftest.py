"""Pytest configuration and shared hierarchy builders."""
import pytest

from window_hierarchy import Activity, DisplayArea, DisplayContent, Task, TaskFragment


def build_activity(title: str, **kwargs) -> Activity:
    return Activity(title=title, token=f"token-{title}", **kwargs)


def build_task(task_id: int, children=(), root_task_id=None, **kwargs) -> Task:
    """Build a task; it is a root task unless root_task_id says otherwise."""
    return Task(
        title=f"Task{task_id}",
        token=f"token-{task_id}",
        task_id=task_id,
        root_task_id=task_id if root_task_id is None else root_task_id,
        children=tuple(children),
        **kwargs,
    )


@pytest.fixture
def activity_factory():
    """Provide the activity builder."""
    return build_activity


@pytest.fixture
def task_factory():
    """Provide the task builder."""
    return build_task


@pytest.fixture
def nested_task():
    """Root task 1 holding child tasks 2 and 3 plus one fragment and one activity.

    Stored (dump) order is top to bottom: [task 3, fragment, activity A, task 2].
    """
    task2 = build_task(2, root_task_id=1, children=[build_activity("com.app/.Second")],
                       resumed_activity="com.app/.Second")
    task3 = build_task(3, root_task_id=1, children=[build_activity("com.app/.Third")],
                       resumed_activity="com.app/.Third")
    fragment = TaskFragment(title="fragment", children=(build_activity("com.app/.Embedded"),))
    return build_task(
        1,
        children=[task3, fragment, build_activity("com.app/.Main"), task2],
        resumed_activity="com.app/.Second",
    )


@pytest.fixture
def organizer_display():
    """Display with root task A (holds Foo) and organizer task B wrapping C and D."""
    task_a = build_task(1, children=[build_activity("com.app/.Foo")])
    task_c = build_task(3, root_task_id=2)
    task_d = build_task(4, root_task_id=2)
    task_b = build_task(2, children=[task_c, task_d], created_by_organizer=True)
    area = DisplayArea(title="DefaultTaskDisplayArea", is_task_display_area=True,
                       children=(task_a, task_b))
    return DisplayContent(id=0, title="Built-in Screen", children=(area,))
