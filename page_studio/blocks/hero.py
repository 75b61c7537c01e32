"""Bloc Hero — titre + sous-titre + deux boutons optionnels."""
from typing import Literal

from ..core.schemas import Align, Radius
from .base import BaseBlock, BlockStructure, BlockSeed


class HeroStructure(BlockStructure):
    alignment: Align = "center"
    heading_color: str = "var(--color-text)"
    subheading_color: str = "var(--color-text)"
    button1_bg: str = "var(--color-primary)"
    button1_color: str = "#FFFFFF"
    button2_bg: str = "transparent"
    button2_color: str = "var(--color-text)"
    button_radius: Radius = "md"


class HeroSeed(BlockSeed):
    heading: str = ""
    subheading: str = ""
    show_button1: bool = True
    button1_text: str = ""
    button1_url: str = "#"
    show_button2: bool = True
    button2_text: str = ""
    button2_url: str = "#"


class HeroBlock(BaseBlock):
    block_type: Literal["hero"] = "hero"
    structure: HeroStructure = HeroStructure()
    seed: HeroSeed = HeroSeed()
