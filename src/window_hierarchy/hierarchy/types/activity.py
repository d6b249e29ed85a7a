from typing import ClassVar
from window_hierarchy.hierarchy.types.window_container import WindowContainer, ContainerKind

class Activity(WindowContainer):
    """
    A single activity record in the hierarchy.
    NOTE: title holds the component name, e.g. "com.android.settings/.Settings".
    """
    KIND: ClassVar[ContainerKind] = ContainerKind.ACTIVITY

    state: str = "" # lifecycle state as dumped, e.g. RESUMED, STOPPED
    front_of_task: bool = False
    proc_id: int = 0
    is_translucent: bool = False

    def __str__(self) -> str:
        return f"{self.kind.value}: {{{self.token} {self.title}}} state={self.state} visible={self.visible}"
