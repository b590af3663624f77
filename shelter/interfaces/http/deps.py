from __future__ import annotations

from fastapi import Request

from shelter.application.interfaces.stores import ShelterStores
from shelter.config.settings import Settings, get_settings


def get_stores(request: Request) -> ShelterStores:
    stores = getattr(request.app.state, "stores", None)
    if stores is None:
        raise RuntimeError("Stores not configured")
    return stores


def get_app_settings(request: Request) -> Settings:
    return getattr(request.app.state, "settings", None) or get_settings()


def resolve_page_size(settings: Settings, page_size: int | None) -> int:
    if page_size is None:
        return settings.default_page_size
    return min(page_size, settings.max_page_size)
