"""Bloc CTA — call-to-action centré, fond dégradé par défaut."""
from typing import Literal

from pydantic import Field

from ..core.schemas import Radius
from .base import BaseBlock, BlockStructure, BlockSeed


class CTAStructure(BlockStructure):
    heading_color: str = "#FFFFFF"
    subtext_color: str = "#E5E7EB"
    button_bg: str = "#FFFFFF"
    button_text_color: str = "var(--color-primary)"
    button_radius: Radius = "md"
    overlay_opacity: int = Field(default=20, ge=0, le=100)


class CTASeed(BlockSeed):
    heading: str = ""
    subtext: str = ""
    show_button: bool = True
    button_text: str = ""
    destination_url: str = "#"


class CTABlock(BaseBlock):
    block_type: Literal["cta"] = "cta"
    structure: CTAStructure = CTAStructure()
    seed: CTASeed = CTASeed()
