"""
Noyau du Page Studio : schémas, règles de style, identifiants, erreurs.

document et history dépendent des blocs : les importer directement
(page_studio.core.document, page_studio.core.history).
"""
from .errors import PageStudioError, UnknownBlockKind, BlockIdMismatch
from .ids import IdFactory, default_id_factory
from .schemas import (
    BLOCK_KINDS, BlockKind, StudioModel, BlockItem,
    SeoSettings, GlobalSettings, AppPreferences, Artifact,
)

__all__ = [
    "PageStudioError", "UnknownBlockKind", "BlockIdMismatch",
    "IdFactory", "default_id_factory",
    "BLOCK_KINDS", "BlockKind", "StudioModel", "BlockItem",
    "SeoSettings", "GlobalSettings", "AppPreferences", "Artifact",
]
