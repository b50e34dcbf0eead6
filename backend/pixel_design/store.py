import threading
from typing import Optional

from .config import settings
from .models import Design


class DesignStore:
    """In-memory holder for the single current design.

    The store does no validation; callers hand it complete designs and it
    swaps them in wholesale. State is process-local and lost on restart.
    """

    def __init__(
        self,
        initial: Optional[Design] = None,
        grid_size: Optional[int] = None,
        color: Optional[str] = None,
    ):
        if initial is None:
            initial = Design.blank(
                grid_size if grid_size is not None else settings.DEFAULT_GRID_SIZE,
                color if color is not None else settings.EMPTY_COLOR,
            )
        self._lock = threading.Lock()
        self._design = initial

    def get(self) -> Design:
        with self._lock:
            return self._design

    def replace(self, design: Design) -> None:
        with self._lock:
            self._design = design
