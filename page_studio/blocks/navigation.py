"""Bloc Navigation — barre supérieure ou barre latérale fixe."""
from typing import Literal, Tuple

from ..core.schemas import Align, BlockItem, Radius
from .base import BaseBlock, BlockStructure, BlockSeed


class NavLink(BlockItem):
    label: str = ""
    href: str = "#"


class NavigationStructure(BlockStructure):
    logo_type: Literal["text", "image"] = "text"
    logo_width: int = 100
    layout: Align = "right"
    layout_style: Literal["topbar", "sidebar"] = "topbar"
    text_color: str = "var(--color-text)"
    link_color: str = "var(--color-text)"
    hover_color: str = "var(--color-primary)"
    menu_bg_color: str = "#FFFFFF"
    button_bg: str = "var(--color-primary)"
    button_text_color: str = "#FFFFFF"
    button_radius: Radius = "md"


class NavigationSeed(BlockSeed):
    logo_text: str = ""
    logo_image: str = ""
    links: Tuple[NavLink, ...] = ()
    show_button: bool = True
    button_text: str = ""
    button_url: str = "#"


class NavigationBlock(BaseBlock):
    block_type: Literal["navigation"] = "navigation"
    structure: NavigationStructure = NavigationStructure()
    seed: NavigationSeed = NavigationSeed()
