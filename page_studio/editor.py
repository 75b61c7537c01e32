"""
Session d'édition — document + historique + réglages + sélection.

Toutes les mutations de blocs passent par History.commit() ; les réglages globaux
et les préférences de l'éditeur ne sont pas historisés.

Usage:
    >>> session = EditorSession.with_starter_page()
    >>> block_id = session.add_block("pricing")
    >>> session.move_block(block_id, "up")
    >>> session.undo()
    >>> artifact = session.export("html")
"""
import logging
from typing import Optional

from .blocks import BaseBlock, create_block
from .config import StudioConfig, get_config
from .core import document as doc_ops
from .core.document import Direction, Document
from .core.history import History
from .core.ids import IdFactory
from .core.schemas import AppPreferences, Artifact, GlobalSettings
from .renderer.export import ExportTarget, export_artifact

log = logging.getLogger(__name__)


class EditorSession:

    def __init__(
        self,
        document: Optional[Document] = None,
        settings: Optional[GlobalSettings] = None,
        preferences: Optional[AppPreferences] = None,
        config: Optional[StudioConfig] = None,
        id_factory: Optional[IdFactory] = None,
    ):
        self.config = config or get_config()
        self.history = History(document or Document(), max_depth=self.config.history_limit)
        self.settings = settings or GlobalSettings()
        self.preferences = preferences or AppPreferences()
        self.ids = id_factory or IdFactory()
        self.selected_id: Optional[str] = None

    @classmethod
    def with_starter_page(cls, **kwargs) -> "EditorSession":
        """Page de départ : barre de navigation + hero (hero sélectionné)."""
        blocks = (
            create_block("navigation", id_factory=lambda: "nav-init"),
            create_block("hero", id_factory=lambda: "hero-init"),
        )
        session = cls(document=Document(blocks=blocks), **kwargs)
        session.selected_id = "hero-init"
        return session

    # ── Lecture ─────────────────────────────────────────────────────────────

    @property
    def document(self) -> Document:
        return self.history.current

    @property
    def selected(self) -> Optional[BaseBlock]:
        return doc_ops.find(self.document, self.selected_id) if self.selected_id else None

    def state(self) -> dict:
        return {
            "blocks": [b.model_dump(mode="json") for b in self.document.blocks],
            "selected_id": self.selected_id,
            "can_undo": self.history.can_undo,
            "can_redo": self.history.can_redo,
        }

    # ── Mutations historisées ───────────────────────────────────────────────

    def add_block(self, kind: str) -> str:
        document, instance_id = doc_ops.insert(self.document, kind, id_factory=self.ids)
        self.history.commit(document)
        self.selected_id = instance_id
        log.info("Bloc ajouté : %s (%s)", kind, instance_id)
        return instance_id

    def update_block(self, instance_id: str, block: BaseBlock) -> bool:
        return self.history.commit(doc_ops.update(self.document, instance_id, block))

    def move_block(self, instance_id: str, direction: Direction) -> bool:
        return self.history.commit(doc_ops.move(self.document, instance_id, direction))

    def delete_block(self, instance_id: str) -> bool:
        changed = self.history.commit(doc_ops.remove(self.document, instance_id))
        if self.selected_id == instance_id:
            self.selected_id = None
        if changed:
            log.info("Bloc supprimé : %s", instance_id)
        return changed

    def duplicate_block(self, instance_id: str) -> Optional[str]:
        document, new_id = doc_ops.duplicate(self.document, instance_id, id_factory=self.ids)
        self.history.commit(document)
        return new_id

    def undo(self) -> bool:
        return self.history.undo()

    def redo(self) -> bool:
        return self.history.redo()

    # ── Réglages (hors historique) ──────────────────────────────────────────

    def update_settings(self, **changes) -> GlobalSettings:
        self.settings = GlobalSettings.model_validate({**self.settings.model_dump(), **changes})
        return self.settings

    def update_preferences(self, **changes) -> AppPreferences:
        self.preferences = AppPreferences.model_validate({**self.preferences.model_dump(), **changes})
        return self.preferences

    # ── Export ──────────────────────────────────────────────────────────────

    def export(self, target: ExportTarget = "html") -> Artifact:
        return export_artifact(self.document, self.settings, target,
                               component_name=self.config.component_name)
