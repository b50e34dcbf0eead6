import logging
from typing import Optional

from fastapi import FastAPI, Depends, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import Settings, settings as default_settings
from .errors import DesignValidationError
from .schemas import DesignCandidate, DesignOut, ErrorOut, HealthOut, SaveDesignOut
from .service import INVALID_PAYLOAD, DesignService
from .store import DesignStore

logger = logging.getLogger(default_settings.SERVICE_NAME + ".main")


def get_service(request: Request) -> DesignService:
    return request.app.state.service


def create_app(config: Optional[Settings] = None, store: Optional[DesignStore] = None) -> FastAPI:
    """
    Build the pixel design API around a single in-memory design.

    Args:
        config: settings to use, the module-level settings by default
        store: design store to serve, a fresh blank one by default
    """
    config = config or default_settings
    if store is None:
        store = DesignStore(grid_size=config.DEFAULT_GRID_SIZE, color=config.EMPTY_COLOR)

    app = FastAPI(title="Pixel Design API")
    app.state.service = DesignService(store, config)

    # The client usually reaches /api through a dev proxy,
    # but enabling CORS is still useful for local dev.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ALLOWED_ORIGINS,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(DesignValidationError)
    async def design_validation_handler(request: Request, exc: DesignValidationError):
        return JSONResponse(status_code=400, content=ErrorOut(error=exc.message).model_dump())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        # Bodies that are not a JSON object never reach the service
        logger.warning(f"Rejected malformed request to {request.url.path}: {exc.errors()}")
        return JSONResponse(status_code=400, content=ErrorOut(error=INVALID_PAYLOAD).model_dump())

    @app.on_event("startup")
    def on_startup():
        logger.info(f"Starting {config.SERVICE_NAME}")

    @app.on_event("shutdown")
    def on_shutdown():
        logger.info(f"Shutting down {config.SERVICE_NAME}")

    @app.get("/api/health", response_model=HealthOut)
    def health():
        return HealthOut()

    @app.get("/api/design", response_model=DesignOut)
    def get_design(service: DesignService = Depends(get_service)):
        return DesignOut.from_design(service.get_design())

    @app.post("/api/design", response_model=SaveDesignOut, responses={400: {"model": ErrorOut}})
    def save_design(payload: DesignCandidate, service: DesignService = Depends(get_service)):
        design = service.save_design(payload)
        return SaveDesignOut(savedDesign=DesignOut.from_design(design))

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Server listening on port {default_settings.API_PORT}")
    uvicorn.run(
        "pixel_design.main:app",
        host=default_settings.API_HOST,
        port=default_settings.API_PORT,
        log_level=default_settings.LOG_LEVEL.lower(),
    )
