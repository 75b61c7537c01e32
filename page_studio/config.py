"""
Configuration du Page Studio — variables d'environnement.

PAGE_STUDIO_HISTORY_LIMIT   profondeur max de l'historique (0 / vide = illimitée)
PAGE_STUDIO_LOG_LEVEL       niveau de log (INFO par défaut)
PAGE_STUDIO_COMPONENT_NAME  nom du composant React exporté (Page par défaut)
"""
import logging
import os
from typing import Optional

from pydantic import BaseModel, field_validator

LOG_FORMAT = "%(asctime)s %(levelname)s — %(message)s"


class StudioConfig(BaseModel):
    history_limit: Optional[int] = None
    log_level: str = "INFO"
    component_name: str = "Page"

    @field_validator("history_limit", mode="before")
    @classmethod
    def _unbounded(cls, v):
        if v in (None, "", "0", 0):
            return None
        return v

    @field_validator("log_level")
    @classmethod
    def _upper(cls, v: str) -> str:
        return v.strip().upper() or "INFO"


def get_config() -> StudioConfig:
    """Lit la configuration dans l'environnement (à chaque appel)."""
    return StudioConfig(
        history_limit=os.getenv("PAGE_STUDIO_HISTORY_LIMIT", ""),
        log_level=os.getenv("PAGE_STUDIO_LOG_LEVEL", "INFO"),
        component_name=os.getenv("PAGE_STUDIO_COMPONENT_NAME", "Page"),
    )


def configure_logging(config: StudioConfig = None) -> None:
    config = config or get_config()
    logging.basicConfig(level=getattr(logging, config.log_level, logging.INFO), format=LOG_FORMAT)
