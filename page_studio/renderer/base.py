"""
Protocol Renderer — interface commune des générateurs (HTML, composant React).
"""
from typing import Protocol, runtime_checkable

from ..core.schemas import GlobalSettings
from .ir import BlockIR, Element, Text


@runtime_checkable
class Renderer(Protocol):
    filename: str
    media_type: str

    def render_page(self, document, settings: GlobalSettings) -> str: ...
    def render_block(self, block: BlockIR) -> str: ...


def is_leaf(node) -> bool:
    return isinstance(node, Element) and not node.raw_html and all(isinstance(c, Text) for c in node.children)


def is_inline(node: Element) -> bool:
    """Contenu rendu sur une seule ligne : textes et éléments feuilles uniquement."""
    return all(isinstance(c, Text) or is_leaf(c) for c in node.children)


def indent(depth: int) -> str:
    return "  " * depth
