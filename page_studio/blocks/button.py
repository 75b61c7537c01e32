"""Bloc Button — lien bouton isolé."""
from typing import Literal

from ..core.schemas import Align, ButtonStyle, Radius
from .base import BaseBlock, BlockStructure, BlockSeed


class ButtonStructure(BlockStructure):
    align: Align = "center"
    variant: ButtonStyle = "solid"
    button_bg: str = "var(--color-primary)"
    button_color: str = "#FFFFFF"
    radius: Radius = "md"
    width: Literal["auto", "full"] = "auto"


class ButtonSeed(BlockSeed):
    text: str = ""
    url: str = "#"


class ButtonBlock(BaseBlock):
    block_type: Literal["button"] = "button"
    structure: ButtonStructure = ButtonStructure()
    seed: ButtonSeed = ButtonSeed()
