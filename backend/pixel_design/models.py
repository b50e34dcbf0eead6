from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, Tuple


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Design:
    grid_size: int
    pixels: Tuple[str, ...]  # row-major, grid_size * grid_size cells
    updated_at: datetime

    @classmethod
    def blank(cls, grid_size: int, color: str, now: Optional[datetime] = None) -> "Design":
        return cls(
            grid_size=grid_size,
            pixels=(color,) * (grid_size * grid_size),
            updated_at=now or utcnow(),
        )
