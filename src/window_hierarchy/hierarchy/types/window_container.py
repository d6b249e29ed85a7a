"""
Generic node of a captured window-manager hierarchy.

Every node type (display, display area, task, task fragment, activity) extends
WindowContainer. Nodes are frozen pydantic models built once by the dump
parser; nothing in this package mutates them, so every derived view below is
recomputed on access instead of being cached.

Children are stored exactly as captured: top-to-bottom, index 0 is the topmost.
"""

from enum import Enum
from typing import Callable, ClassVar, Type, TypeVar
from pydantic import BaseModel, ConfigDict

class ContainerKind(str, Enum):
    """
    Closed set of node categories found in a window-manager dump.
    """
    WINDOW_CONTAINER = "WindowContainer"
    DISPLAY = "Display"
    DISPLAY_AREA = "DisplayArea"
    TASK = "Task"
    TASK_FRAGMENT = "TaskFragment"
    ACTIVITY = "Activity"

NodeT = TypeVar("NodeT", bound="WindowContainer")

class WindowContainer(BaseModel):
    """
    Immutable tree node; exclusively owns its children.
    """
    model_config = ConfigDict(frozen=True)

    KIND: ClassVar[ContainerKind] = ContainerKind.WINDOW_CONTAINER

    title: str = ""
    token: str = ""
    orientation: int = 0
    layer_id: int = 0
    visible: bool = False
    children: tuple["WindowContainer", ...] = ()

    @property
    def kind(self) -> ContainerKind:
        return self.KIND

    @property
    def name(self) -> str:
        return self.title

    @property
    def stable_id(self) -> str:
        # matches equivalent nodes across captures, uniqueness is not enforced here
        return f"{self.kind.value} {self.token} {self.title}"

    @property
    def is_visible(self) -> bool:
        return self.visible

    @property
    def is_empty(self) -> bool:
        return not self.children

    def traverse_top_down(self) -> list["WindowContainer"]:
        """
        This node followed by all of its descendants, depth-first, in stored child order.
        """
        nodes: list[WindowContainer] = [self]
        for child in self.children:
            nodes.extend(child.traverse_top_down())
        return nodes

    def collect_descendants(
        self,
        node_type: Type[NodeT],
        predicate: Callable[[NodeT], bool] = lambda _: True,
    ) -> tuple[NodeT, ...]:
        """
        All descendants (the node itself excluded) that are instances of node_type
        and satisfy predicate, in traverse_top_down order.

        Args:
            node_type: runtime type a descendant must have to be considered
            predicate: filter applied to descendants of node_type only

        Returns:
            Matching nodes; an empty tuple when nothing matches.
        """
        return tuple(
            node for node in self.traverse_top_down()[1:]
            if isinstance(node, node_type) and predicate(node)
        )

    def __str__(self) -> str:
        return f"{self.kind.value}: {{{self.token} {self.title}}}"
