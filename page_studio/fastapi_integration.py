"""
Helpers pour intégration FastAPI.
"""
import logging
from typing import Optional

from fastapi import FastAPI

from . import __version__
from .config import StudioConfig, configure_logging, get_config
from .editor import EditorSession
from .router import get_session, router

log = logging.getLogger(__name__)


def create_app(session: Optional[EditorSession] = None, config: Optional[StudioConfig] = None) -> FastAPI:
    """
    Crée l'application FastAPI du studio.

    Args:
        session: session d'édition à servir (par défaut : page de départ)
        config: configuration (par défaut : variables d'environnement)

    Example:
        >>> app = create_app()
        >>> # uvicorn page_studio.fastapi_integration:app --reload
    """
    config = config or get_config()
    configure_logging(config)
    app = FastAPI(title="Page Studio", version=__version__)
    app.include_router(router)
    if session is not None:
        app.dependency_overrides[get_session] = lambda: session

    @app.get("/health")
    def health():
        return {"status": "ok", "service": "page_studio", "version": __version__}

    log.info("Page Studio prêt (historique : %s)", config.history_limit or "illimité")
    return app


def mount_studio(app: FastAPI, session: Optional[EditorSession] = None) -> FastAPI:
    """Branche le router du studio sur une application existante."""
    app.include_router(router)
    if session is not None:
        app.dependency_overrides[get_session] = lambda: session
    return app
