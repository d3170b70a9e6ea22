from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv

from config import get_settings_module

from .container import Container, EngineSettings, build_container

logger = logging.getLogger(__name__)


def create_container() -> Container:
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    db_config = getattr(settings, "DB_CONFIG")

    level = str(getattr(settings, "LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    engine_settings = EngineSettings.from_module(settings)
    if bool(getattr(settings, "DEBUG", False)):
        logger.debug(
            "settings=%s db=%s@%s:%s/%s tz=%s precedence=%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
            engine_settings.timezone,
            engine_settings.status_precedence,
        )

    return build_container(db_config=db_config, settings=engine_settings)
