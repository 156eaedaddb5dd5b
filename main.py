from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.cors import CORSMiddleware

from core.config_loader import Settings, settings as default_settings
from core.logging import configure_logging, get_logger
from core.middleware import RequestIDMiddleware
from storage.base import Storage
from storage.database import DatabaseStorage
from storage.memory import MemStorage
from storage.seed import seed_default_data

from teammember.router import team_member_router
from shifttype.router import shift_type_router
from shift.router import shift_router
from schedule.router import schedule_router

logger = get_logger(__name__)

openapi_tags = [
    {
        "name": "Team Members",
        "description": "People who can be put on shifts",
    },
    {
        "name": "Shift Types",
        "description": "Reusable shift templates (name, time of day, colour)",
    },
    {
        "name": "Shifts",
        "description": "Day-dated shift assignments",
    },
    {
        "name": "Schedule",
        "description": "Week view grouped by day",
    },
    {
        "name": "Health Checks",
        "description": "Application health checks",
    }
]


def build_storage(config: Settings) -> Storage:
    if config.STORAGE_BACKEND == "database":
        storage = DatabaseStorage.from_url(config.DATABASE_URL)
    else:
        storage = MemStorage()
    logger.info("Using %s storage", config.STORAGE_BACKEND)
    if config.SEED_DEFAULT_DATA:
        seed_default_data(storage)
    return storage


def create_app(config: Settings = default_settings, storage: Optional[Storage] = None) -> FastAPI:
    configure_logging(config.LOG_LEVEL)
    storage = storage if storage is not None else build_storage(config)

    @asynccontextmanager
    async def lifespan(application: FastAPI):
        yield
        application.state.storage.close()
        logger.info("Storage closed, shutting down")

    app = FastAPI(title=config.PROJECT_NAME, openapi_tags=openapi_tags, lifespan=lifespan)
    app.state.storage = storage

    app.add_middleware(RequestIDMiddleware)
    if config.BACKEND_CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=[
                str(origin).strip("/") for origin in config.BACKEND_CORS_ORIGINS
            ],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        request_id = getattr(request.state, "request_id", None)
        logger.exception(
            "Unhandled error on %s %s", request.method, request.url.path,
            extra={"request_id": request_id},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )

    app.include_router(team_member_router, prefix=config.API_PREFIX)
    app.include_router(shift_type_router, prefix=config.API_PREFIX)
    app.include_router(shift_router, prefix=config.API_PREFIX)
    app.include_router(schedule_router, prefix=config.API_PREFIX)

    @app.get("/health", tags=['Health Checks'])
    def read_root():
        return {"health": "true"}

    return app


app = create_app()


# ── Entrypoint ──
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000, log_level=default_settings.LOG_LEVEL.lower())
