from window_hierarchy.common.types.rect import Rect

__all__ = ["Rect"]
