from pydantic import BaseModel, ConfigDict, Field
from typing import Any, List, Optional
from datetime import datetime

from .models import Design


class DesignCandidate(BaseModel):
    """Untrusted POST body; shapes are checked by the service, not here."""

    model_config = ConfigDict(extra="ignore")

    gridSize: Optional[Any] = None
    pixels: Optional[Any] = None


class DesignOut(BaseModel):
    gridSize: int
    pixels: List[str]
    updatedAt: datetime

    @classmethod
    def from_design(cls, design: Design) -> "DesignOut":
        return cls(
            gridSize=design.grid_size,
            pixels=list(design.pixels),
            updatedAt=design.updated_at,
        )


class SaveDesignOut(BaseModel):
    ok: bool = True
    savedDesign: DesignOut


class HealthOut(BaseModel):
    ok: bool = True


class ErrorOut(BaseModel):
    error: str = Field(description="Human readable reason the request was rejected.")
