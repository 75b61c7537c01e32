"""
Page Studio — construction de pages par blocs, historique undo/redo,
export HTML autonome ou composant React.

Usage:
    >>> from page_studio import Document, GlobalSettings, insert, render_html, render_component
    >>> doc, hero_id = insert(Document(), "hero")
    >>> html = render_html(doc, GlobalSettings(title="Mon site"))
    >>> tsx = render_component(doc, GlobalSettings(title="Mon site"))

Usage (session d'édition):
    >>> from page_studio import EditorSession
    >>> session = EditorSession.with_starter_page()
    >>> session.add_block("pricing")
    >>> artifact = session.export("component")
"""

__version__ = "0.3.0"

# ── Noyau ───────────────────────────────────────────────────────────────────
from .core.schemas import (
    BLOCK_KINDS, BlockKind, GlobalSettings, SeoSettings, AppPreferences, Artifact,
)
from .core.errors import PageStudioError, UnknownBlockKind, BlockIdMismatch
from .core.ids import IdFactory

# ── Blocs ───────────────────────────────────────────────────────────────────
from .blocks import BaseBlock, BlockUnion, BLOCK_CLASSES, get_template, create_block, list_kinds

# ── Document + historique ───────────────────────────────────────────────────
from .core.document import Document, insert, update, move, remove, duplicate, find, index_of
from .core.history import History

# ── Générateurs ─────────────────────────────────────────────────────────────
from .renderer import render_html, render_component, export_artifact, build_page_ir

# ── Session ─────────────────────────────────────────────────────────────────
from .config import StudioConfig, get_config
from .editor import EditorSession

__all__ = [
    "__version__",
    "BLOCK_KINDS", "BlockKind", "GlobalSettings", "SeoSettings", "AppPreferences", "Artifact",
    "PageStudioError", "UnknownBlockKind", "BlockIdMismatch", "IdFactory",
    "BaseBlock", "BlockUnion", "BLOCK_CLASSES", "get_template", "create_block", "list_kinds",
    "Document", "insert", "update", "move", "remove", "duplicate", "find", "index_of",
    "History",
    "render_html", "render_component", "export_artifact", "build_page_ir",
    "StudioConfig", "get_config", "EditorSession",
]
