"""Application factory. No business logic; only wiring of settings, logging, storage and services."""

import logging

from dotenv import load_dotenv

from commodities.core.config import Settings, get_settings
from commodities.core.storage import build_storage
from commodities.services.inventory import InventoryService
from commodities.services.session_manager import SessionManager

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%SZ",
    )


def create_app(settings: Settings | None = None) -> InventoryService:
    """
    Build one InventoryService for a running app and restore any persisted session.

    Pass settings explicitly in tests; otherwise .env is loaded and settings come from the environment.
    """
    if settings is None:
        load_dotenv()
        settings = get_settings()
    configure_logging(settings)

    storage = build_storage(settings)
    sessions = SessionManager(storage, verify_on_restore=settings.VERIFY_SESSION_ON_RESTORE)
    service = InventoryService(storage, session_manager=sessions)
    service.restore_session()
    logger.info(
        "App ready: env=%s storage=%s products=%s",
        settings.APP_ENV,
        settings.STORAGE_BACKEND,
        len(service.catalog.list()),
    )
    return service
