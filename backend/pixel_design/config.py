import logging
from typing import List, Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Configuration settings for the pixel design service.
    Settings are loaded from environment variables and/or a .env file.
    """

    # --- General Service Settings ---
    SERVICE_NAME: str = Field(default="pixel_design", description="Name of the service.")
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level for the service."
    )

    # --- API Server Settings ---
    API_HOST: str = Field(default="0.0.0.0", description="Host to bind the API server to.")
    API_PORT: int = Field(default=3001, description="Port to bind the API server to.")
    CORS_ALLOWED_ORIGINS: List[str] = Field(
        default=["*"],
        description="List of allowed origins for CORS.",
    )

    # --- Design Settings ---
    DEFAULT_GRID_SIZE: int = Field(
        default=16, description="Side length of the blank design created at startup."
    )
    EMPTY_COLOR: str = Field(
        default="#000000", description="Color used for every cell of the startup design."
    )
    MIN_GRID_SIZE: int = Field(
        default=1, description="Smallest gridSize accepted on write."
    )
    MAX_GRID_SIZE: int = Field(
        default=1024, description="Largest gridSize accepted on write."
    )
    # Unset keeps pixel colors opaque: any string is stored as-is.
    PIXEL_COLOR_PATTERN: Optional[str] = Field(
        default=None,
        description="Regular expression every pixel color must fully match, if set.",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )


# Initialize settings globally for easy access
settings = Settings()

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(settings.SERVICE_NAME)

logger.debug(f"Pixel design service settings loaded: {settings.model_dump()}")
