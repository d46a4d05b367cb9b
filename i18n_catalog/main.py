from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.templating import Jinja2Templates

from i18n_catalog.api import health, translations
from i18n_catalog.core.config import Settings, get_settings
from i18n_catalog.core.logging import setup_logging
from i18n_catalog.core.translations import Translations
from i18n_catalog.middleware.locale import LocaleMiddleware
from i18n_catalog.routes import ui

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Application factory used by production runners and tests
    (`uvicorn --factory i18n_catalog.main:create_app`).

    The catalog is loaded once here; a broken catalog stops the startup
    with the CatalogError raised by the loader.
    """
    settings = settings or get_settings()
    setup_logging(settings.LOG_LEVEL)

    catalog = Translations(
        directory=settings.I18N_DIR,
        default_language=settings.DEFAULT_LOCALE,
    ).load()

    app = FastAPI(title=settings.APP_NAME, version=settings.APP_VERSION, debug=settings.DEBUG)
    app.state.settings = settings
    app.state.translations = catalog
    app.state.templates = Jinja2Templates(directory=str(settings.TEMPLATES_DIR))

    app.add_middleware(LocaleMiddleware, cookie_name=settings.LOCALE_COOKIE)

    # Routers
    app.include_router(health.router)
    app.include_router(translations.router)
    app.include_router(ui.router)

    logger.info(
        "%s %s started with languages: %s",
        settings.APP_NAME,
        settings.APP_VERSION,
        ", ".join(catalog.languages()),
    )
    return app
