from pydantic import BaseModel, ConfigDict

class Rect(BaseModel):
    """
    Axis-aligned rectangle used for every bound in a captured hierarchy.
    - Rect() is the empty rectangle, used wherever a capture omits optional bounds.
    - Equality is value equality on the four edges.
    """
    model_config = ConfigDict(frozen=True)

    left: int = 0
    top: int = 0
    right: int = 0
    bottom: int = 0

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def __str__(self) -> str:
        return f"Rect({self.left}, {self.top} - {self.right}, {self.bottom})"
