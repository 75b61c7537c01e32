"""Bloc Split — texte + image côte à côte."""
from typing import Literal

from .base import BaseBlock, BlockStructure, BlockSeed


class SplitStructure(BlockStructure):
    image_side: Literal["left", "right"] = "right"
    split_ratio: Literal["50-50", "40-60", "60-40"] = "50-50"
    text_color: str = "var(--color-text)"


class SplitSeed(BlockSeed):
    title: str = ""
    content: str = ""  # HTML de confiance
    image_url: str = ""


class SplitBlock(BaseBlock):
    block_type: Literal["split"] = "split"
    structure: SplitStructure = SplitStructure()
    seed: SplitSeed = SplitSeed()
