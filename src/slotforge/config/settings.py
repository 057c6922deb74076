"""Global configuration and constants for slotforge surfaces."""

from __future__ import annotations

import os
from typing import Final

SLOTS_PER_ROW: Final = 9
MAX_ROWS: Final = 6
MAX_ROW_SLOTS: Final = MAX_ROWS * SLOTS_PER_ROW
HOPPER_BORDER: Final = (0, 4)

# Live registry entries above this count usually mean surfaces are never released
REGISTRY_WARN_THRESHOLD: Final = int(os.environ.get("SLOTFORGE_REGISTRY_WARN_THRESHOLD", "1000"))

# "memory" or "qt"
DEFAULT_BACKEND: Final = os.environ.get("SLOTFORGE_BACKEND", "memory")
DIAGNOSTICS_CAPACITY: Final = int(os.environ.get("SLOTFORGE_DIAGNOSTICS_CAPACITY", "500"))
