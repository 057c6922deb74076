"""Surface backends and the container creation service.

`QtSurface` is not re-exported here so that importing this package never
requires PyQt6; import it from `slotforge.surfaces.qt_surface`.
"""

from .base import BaseSurface  # noqa: F401
from .memory_surface import MemorySurface  # noqa: F401
from .factory import ContainerFactory, colour_title  # noqa: F401

__all__ = ["BaseSurface", "MemorySurface", "ContainerFactory", "colour_title"]
