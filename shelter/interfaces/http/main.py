from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import APIRouter, Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shelter.config.settings import Settings, get_settings
from shelter.infrastructure.seed.sample_data import seed_sample_data
from shelter.infrastructure.storage.registry import JsonShelterStores
from shelter.interfaces.http.deps import get_app_settings
from shelter.interfaces.http.routers import (
    adoptions,
    animals,
    customers,
    employees,
    health_records,
    visits,
)
from shelter.interfaces.middleware.error_handler import register_error_handlers

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    if settings.seed_sample_data:
        created = await seed_sample_data(app.state.stores)
        if created:
            logger.info("Seeded %d data files in %s", len(created), settings.data_dir)
    yield


def _configure_logging(level_name: str) -> None:
    level = getattr(logging, level_name.upper(), logging.INFO)
    root = logging.getLogger()
    # Avoid adding duplicate handlers on reload
    if not any(isinstance(h, logging.StreamHandler) for h in root.handlers):
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        )
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.setLevel(level)
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logging.getLogger(name).setLevel(level)


def create_app(
    *,
    settings: Settings | None = None,
    stores: JsonShelterStores | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    _configure_logging(settings.log_level)
    app = FastAPI(
        title="Shelter Admin",
        version="0.1.0",
        description="Animal shelter administration API",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.stores = stores or JsonShelterStores.from_settings(settings)
    register_error_handlers(app)

    api = APIRouter(prefix="/api/v1")
    api.include_router(animals.router)
    api.include_router(adoptions.router)
    api.include_router(customers.router)
    api.include_router(employees.router)
    api.include_router(health_records.router)
    api.include_router(visits.router)

    @api.get("/health", tags=["health"])
    async def health(current: Settings = Depends(get_app_settings)) -> dict[str, str]:
        return {"status": "ok", "environment": current.environment}

    app.include_router(api)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    return app
