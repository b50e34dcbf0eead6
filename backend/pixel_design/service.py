import logging
import re
from datetime import datetime
from typing import Any, Callable, Optional

from .config import Settings, settings as default_settings
from .errors import DesignValidationError
from .models import Design, utcnow
from .schemas import DesignCandidate
from .store import DesignStore

logger = logging.getLogger(default_settings.SERVICE_NAME + ".service")

INVALID_PAYLOAD = "Invalid payload"


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a JSON number
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _format_number(value: Any) -> str:
    """Render a number the way JSON writes it: 4 rather than 4.0, 1e+20 for large floats."""
    if isinstance(value, float):
        if value.is_integer() and abs(value) < 1e16:
            return str(int(value))
        return repr(value)
    return str(value)


class DesignService:
    """Read and validate-and-replace operations over a DesignStore."""

    def __init__(
        self,
        store: DesignStore,
        config: Optional[Settings] = None,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self.store = store
        self.config = config or default_settings
        self.clock = clock
        pattern = self.config.PIXEL_COLOR_PATTERN
        self._color_re = re.compile(pattern) if pattern else None

    def get_design(self) -> Design:
        return self.store.get()

    def validate(self, candidate: DesignCandidate) -> Design:
        """
        Turn an untrusted candidate into a Design stamped with the current time.

        Checks run in order and stop at the first failure:
          1. gridSize is a number and pixels is a list
          2. MIN_GRID_SIZE <= gridSize <= MAX_GRID_SIZE
          3. len(pixels) == gridSize * gridSize
          4. every pixel is a string (matching PIXEL_COLOR_PATTERN when set)

        Raises:
            DesignValidationError: with the client-facing message.
        """
        grid_size = candidate.gridSize
        pixels = candidate.pixels

        if not _is_number(grid_size) or not isinstance(pixels, list):
            raise DesignValidationError(INVALID_PAYLOAD)

        if not self.config.MIN_GRID_SIZE <= grid_size <= self.config.MAX_GRID_SIZE:
            raise DesignValidationError(INVALID_PAYLOAD)

        expected = grid_size * grid_size
        if len(pixels) != expected:
            raise DesignValidationError(
                f"Pixels array must be {_format_number(expected)} items "
                f"for gridSize {_format_number(grid_size)}"
            )

        for index, color in enumerate(pixels):
            if not isinstance(color, str):
                raise DesignValidationError(INVALID_PAYLOAD)
            if self._color_re is not None and not self._color_re.fullmatch(color):
                raise DesignValidationError(f"Invalid pixel color at index {index}")

        if isinstance(grid_size, float) and not grid_size.is_integer():
            raise DesignValidationError(INVALID_PAYLOAD)

        return Design(
            grid_size=int(grid_size),
            pixels=tuple(pixels),
            updated_at=self.clock(),
        )

    def save_design(self, candidate: DesignCandidate) -> Design:
        try:
            design = self.validate(candidate)
        except DesignValidationError as e:
            logger.warning(f"Rejected design update: {e.message}")
            raise
        self.store.replace(design)
        logger.info(
            f"Saved design: gridSize={design.grid_size} pixels={len(design.pixels)}"
        )
        return design
