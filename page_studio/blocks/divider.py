"""Bloc Divider — séparateur horizontal."""
from typing import Literal

from ..core.schemas import Spacing
from .base import BaseBlock, BlockStructure, BlockSeed


class DividerStructure(BlockStructure):
    line_color: str = "#E5E7EB"
    line_width: Literal["full", "short", "middle"] = "full"
    height: Spacing = "md"
    show_line: bool = True


class DividerBlock(BaseBlock):
    block_type: Literal["divider"] = "divider"
    structure: DividerStructure = DividerStructure()
    seed: BlockSeed = BlockSeed()
