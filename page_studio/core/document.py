"""
Modèle de document — liste ordonnée de blocs.

Toutes les opérations sont des fonctions pures (Document, args) -> Document :
le document n'est jamais modifié sur place, chaque mutation en produit un nouveau.
Un instance_id introuvable, ou un déplacement en bord de liste, renvoie le
document inchangé (même objet) : jamais d'erreur.
"""
import logging
from typing import Callable, Literal, Optional, Tuple

from ..blocks import BlockUnion, create_block
from ..blocks.base import BaseBlock
from .ids import default_id_factory
from .schemas import StudioModel

log = logging.getLogger(__name__)

Direction = Literal["up", "down"]
IdFactoryT = Callable[[], str]


class Document(StudioModel):
    """Page = séquence ordonnée de blocs (l'ordre est l'ordre visuel et DOM)."""
    blocks: Tuple[BlockUnion, ...] = ()

    def __len__(self) -> int:
        return len(self.blocks)

    @property
    def instance_ids(self) -> Tuple[str, ...]:
        return tuple(b.instance_id for b in self.blocks)


def _replace_blocks(doc: Document, blocks) -> Document:
    return doc.model_copy(update={"blocks": tuple(blocks)})


def _fresh_id(doc: Document, id_factory: Optional[IdFactoryT]) -> str:
    """Identifiant neuf, jamais déjà présent dans le document."""
    factory = id_factory or default_id_factory
    taken = set(doc.instance_ids)
    instance_id = factory()
    while instance_id in taken:
        instance_id = factory()
    return instance_id


# ── Lecture ─────────────────────────────────────────────────────────────────

def index_of(doc: Document, instance_id: str) -> int:
    """Position du bloc, -1 si absent."""
    for i, block in enumerate(doc.blocks):
        if block.instance_id == instance_id:
            return i
    return -1


def find(doc: Document, instance_id: str) -> Optional[BaseBlock]:
    i = index_of(doc, instance_id)
    return doc.blocks[i] if i >= 0 else None


# ── Mutations ───────────────────────────────────────────────────────────────

def insert(doc: Document, kind: str, id_factory: Optional[IdFactoryT] = None) -> Tuple[Document, str]:
    """Ajoute une instance neuve du gabarit `kind` en fin de document."""
    instance_id = _fresh_id(doc, id_factory)
    block = create_block(kind, id_factory=lambda: instance_id)
    return _replace_blocks(doc, doc.blocks + (block,)), instance_id


def update(doc: Document, instance_id: str, new_block: BaseBlock) -> Document:
    """
    Remplace le bloc `instance_id` par `new_block` (enregistrement complet fourni
    par l'appelant). L'instance_id est immuable : il est conservé sur le bloc remplaçant.
    """
    i = index_of(doc, instance_id)
    if i < 0:
        log.debug("update ignoré : %s introuvable", instance_id)
        return doc
    if new_block.instance_id != instance_id:
        new_block = new_block.model_copy(update={"instance_id": instance_id})
    if new_block == doc.blocks[i]:
        log.debug("update ignoré : %s inchangé", instance_id)
        return doc
    blocks = list(doc.blocks)
    blocks[i] = new_block
    return _replace_blocks(doc, blocks)


def move(doc: Document, instance_id: str, direction: Direction) -> Document:
    """Échange le bloc avec son voisin (up = précédent, down = suivant)."""
    i = index_of(doc, instance_id)
    if i < 0:
        log.debug("move ignoré : %s introuvable", instance_id)
        return doc
    j = {"up": i - 1, "down": i + 1}.get(direction)
    if j is None or not 0 <= j < len(doc.blocks):
        log.debug("move ignoré : %s déjà en bord (%s)", instance_id, direction)
        return doc
    blocks = list(doc.blocks)
    blocks[i], blocks[j] = blocks[j], blocks[i]
    return _replace_blocks(doc, blocks)


def remove(doc: Document, instance_id: str) -> Document:
    if index_of(doc, instance_id) < 0:
        log.debug("remove ignoré : %s introuvable", instance_id)
        return doc
    return _replace_blocks(doc, (b for b in doc.blocks if b.instance_id != instance_id))


def duplicate(
    doc: Document, instance_id: str, id_factory: Optional[IdFactoryT] = None,
) -> Tuple[Document, Optional[str]]:
    """
    Clone le bloc avec un identifiant neuf, inséré juste après l'original.

    Returns:
        (document, id du clone) ; (document inchangé, None) si le bloc est absent
    """
    i = index_of(doc, instance_id)
    if i < 0:
        log.debug("duplicate ignoré : %s introuvable", instance_id)
        return doc, None
    new_id = _fresh_id(doc, id_factory)
    clone = doc.blocks[i].model_copy(deep=True, update={"instance_id": new_id})
    blocks = list(doc.blocks)
    blocks.insert(i + 1, clone)
    return _replace_blocks(doc, blocks), new_id
