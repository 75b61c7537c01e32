"""
Historique linéaire undo/redo sur des instantanés complets du document.

Trois registres : past (plus ancien en premier), current, future (plus proche en
premier). commit() est le seul chemin de modification de current hors undo/redo,
et efface toujours le futur : pas de timeline ramifiée.
"""
import logging
from typing import List, Optional, Tuple

from .document import Document

log = logging.getLogger(__name__)


class History:
    """
    Gestionnaire d'historique.

    Usage:
        >>> h = History(Document())
        >>> h.commit(d1); h.commit(d2)
        >>> h.undo(); h.current is d1
        True
    """

    def __init__(self, initial: Optional[Document] = None, max_depth: Optional[int] = None):
        self._past: List[Document] = []
        self._current: Document = initial if initial is not None else Document()
        self._future: List[Document] = []
        self.max_depth = max_depth or None

    # ── Lecture ─────────────────────────────────────────────────────────────

    @property
    def current(self) -> Document:
        return self._current

    @property
    def past(self) -> Tuple[Document, ...]:
        return tuple(self._past)

    @property
    def future(self) -> Tuple[Document, ...]:
        return tuple(self._future)

    @property
    def can_undo(self) -> bool:
        return bool(self._past)

    @property
    def can_redo(self) -> bool:
        return bool(self._future)

    # ── Transitions ─────────────────────────────────────────────────────────

    def commit(self, doc: Document) -> bool:
        """
        Enregistre un nouvel état. Seul l'objet déjà courant (renvoyé tel quel par
        une opération sans effet) est ignoré ; un document égal mais distinct est
        enregistré comme n'importe quel autre.

        Returns:
            True si l'état a changé
        """
        if doc is self._current:
            return False
        self._past.append(self._current)
        self._future.clear()
        self._current = doc
        if self.max_depth and len(self._past) > self.max_depth:
            dropped = len(self._past) - self.max_depth
            del self._past[:dropped]
            log.debug("Historique tronqué (%d états retirés)", dropped)
        return True

    def undo(self) -> bool:
        if not self._past:
            return False
        self._future.insert(0, self._current)
        self._current = self._past.pop()
        return True

    def redo(self) -> bool:
        if not self._future:
            return False
        self._past.append(self._current)
        self._current = self._future.pop(0)
        return True

    def reset(self, doc: Optional[Document] = None) -> None:
        """Vide past/future (nouveau document ou document courant)."""
        self._past.clear()
        self._future.clear()
        if doc is not None:
            self._current = doc
