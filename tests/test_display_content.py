"""Tests for DisplayContent root-task unwrapping and display-area lookup."""
import pytest

from window_hierarchy import (
    ContainerKind,
    DisplayArea,
    DisplayContent,
    InvariantViolationError,
    Rect,
    Task,
    TaskFragment,
)


def test_root_tasks_unwrap_organizer(organizer_display):
    assert [t.task_id for t in organizer_display.root_tasks] == [1, 4, 3]


def test_root_tasks_never_contain_organizer_tasks(organizer_display):
    assert not any(t.created_by_organizer for t in organizer_display.root_tasks)


def test_root_tasks_multiple_organizers_keep_forward_order(task_factory):
    first = task_factory(10, created_by_organizer=True, children=[
        task_factory(11, root_task_id=10), task_factory(12, root_task_id=10),
    ])
    plain = task_factory(20)
    second = task_factory(30, created_by_organizer=True, children=[
        task_factory(31, root_task_id=30), task_factory(32, root_task_id=30),
    ])
    display = DisplayContent(id=1, children=(first, plain, second))

    assert [t.task_id for t in display.root_tasks] == [20, 12, 11, 32, 31]


def test_root_tasks_skip_nested_non_root(task_factory):
    display = DisplayContent(id=0, children=(
        task_factory(1, children=[task_factory(2, root_task_id=1)]),
    ))

    assert [t.task_id for t in display.root_tasks] == [1]


def test_root_tasks_empty_display():
    assert DisplayContent(id=0).root_tasks == ()


def test_contains_activity(organizer_display):
    assert organizer_display.contains_activity("Foo")
    assert not organizer_display.contains_activity("Bar")


def test_contains_activity_in_promoted_task(task_factory, activity_factory):
    promoted = task_factory(3, root_task_id=2, children=[activity_factory("com.pip/.Player")])
    organizer = task_factory(2, created_by_organizer=True, children=[promoted])
    display = DisplayContent(id=0, children=(organizer,))

    assert display.contains_activity("Player")


def test_get_task_display_area(organizer_display):
    area = organizer_display.get_task_display_area("com.app/.Foo")

    assert area is not None
    assert area.title == "DefaultTaskDisplayArea"
    assert organizer_display.get_task_display_area("com.app/.Bar") is None


def test_get_task_display_area_ignores_non_task_areas(task_factory, activity_factory):
    other = DisplayArea(title="ImeContainer", children=(
        task_factory(5, children=[activity_factory("X")]),
    ))
    display = DisplayContent(id=0, children=(other,))

    assert display.get_task_display_area("X") is None


def test_get_task_display_area_duplicate_is_fatal(task_factory, activity_factory):
    first = DisplayArea(title="AreaOne", token="a1", is_task_display_area=True, children=(
        task_factory(1, children=[activity_factory("X")]),
    ))
    second = DisplayArea(title="AreaTwo", token="a2", is_task_display_area=True, children=(
        task_factory(2, children=[activity_factory("X")]),
    ))
    display = DisplayContent(id=0, children=(first, second))

    with pytest.raises(InvariantViolationError) as exc_info:
        display.get_task_display_area("X")

    assert exc_info.value.offending == ("DisplayArea a1 AreaOne", "DisplayArea a2 AreaTwo")
    assert "found X in 2" in str(exc_info.value)
    assert isinstance(exc_info.value, ValueError)


def test_missing_optional_bounds_are_empty():
    display = DisplayContent(
        id=2,
        default_pinned_stack_bounds=None,
        pinned_stack_movement_bounds=None,
        stable_bounds=Rect(right=1080, bottom=2340),
    )

    assert display.default_pinned_stack_bounds == Rect()
    assert display.pinned_stack_movement_bounds == Rect()
    assert display.stable_bounds == Rect(right=1080, bottom=2340)


def test_identity_and_string():
    display = DisplayContent(id=3, title="Built-in Screen", flags=1,
                             display_rect=Rect(right=10, bottom=20))

    assert display.kind == ContainerKind.DISPLAY
    assert display.name == "3"
    assert display.stable_id == "DisplayBuilt-in Screen"
    assert str(display) == (
        "Display #3: name=Built-in Screen mDisplayRect=Rect(0, 0 - 10, 20) "
        "mAppRect=Rect(0, 0 - 0, 0) mFlags=1"
    )


def test_display_area_reports_activities_only_for_task_areas(task_factory, activity_factory):
    children = (task_factory(1, children=[activity_factory("com.app/.Main")]),)
    task_area = DisplayArea(is_task_display_area=True, children=children)
    plain_area = DisplayArea(children=children)

    assert [a.title for a in task_area.activities] == ["com.app/.Main"]
    assert task_area.contains_activity("com.app/.Main")
    assert not task_area.contains_activity("Main")
    assert plain_area.activities == ()
    assert not plain_area.contains_activity("com.app/.Main")


def test_root_tasks_promote_only_task_children(task_factory, activity_factory):
    organizer = task_factory(2, created_by_organizer=True, children=[
        TaskFragment(title="fragment"),
        task_factory(3, root_task_id=2),
        activity_factory("com.app/.Loose"),
    ])
    display = DisplayContent(id=0, children=(task_factory(1), organizer))

    root_tasks = display.root_tasks

    assert [t.task_id for t in root_tasks] == [1, 3]
    assert all(isinstance(t, Task) for t in root_tasks)
