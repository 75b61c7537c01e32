"""Bloc Text — fragment HTML libre."""
from typing import Literal

from .base import BaseBlock, BlockStructure, BlockSeed


class TextStructure(BlockStructure):
    tag: Literal["h1", "h2", "h3", "p", "div", "blockquote"] = "p"
    align: Literal["left", "center", "right", "justify"] = "left"
    font_size: Literal["xs", "sm", "base", "lg", "xl", "2xl", "3xl", "4xl", "5xl", "6xl"] = "base"
    font_weight: Literal["normal", "medium", "bold", "black"] = "normal"
    color: str = "var(--color-text)"


class TextSeed(BlockSeed):
    content: str = ""  # HTML de confiance


class TextBlock(BaseBlock):
    block_type: Literal["text"] = "text"
    structure: TextStructure = TextStructure()
    seed: TextSeed = TextSeed()
