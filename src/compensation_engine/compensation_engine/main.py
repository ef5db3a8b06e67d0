from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv

from config import get_settings_module

from .common.logging_utils import configure_logging
from .compensation.repository import CompensationRepository
from .container import Container, build_container
from .holidays.repository import HolidayRepository

logger = logging.getLogger(__name__)


def create_container(*, holidays: HolidayRepository, compensations: CompensationRepository) -> Container:
    """Load .env and the APP_ENV settings module, then wire the services.

    Holiday and compensation storage belong to the host application and are
    passed in.
    """
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    logger.debug("Using settings module %s", settings_module)

    return build_container(settings=settings, holidays=holidays, compensations=compensations)
