"""Bloc Pricing — grille de plans tarifaires."""
from typing import Literal, Optional, Tuple

from ..core.schemas import BlockItem, Radius
from .base import BaseBlock, BlockStructure, BlockSeed


class PricingPlan(BlockItem):
    name: str = ""
    price: str = ""
    period: str = ""
    features: Tuple[str, ...] = ()
    button_text: str = "Choose"
    button_url: str = "#"
    is_popular: bool = False
    badge_text: Optional[str] = None


class PricingStructure(BlockStructure):
    card_bg: str = "#FFFFFF"
    text_color: str = "var(--color-text)"
    accent_color: str = "var(--color-primary)"
    radius: Radius = "lg"


class PricingSeed(BlockSeed):
    plans: Tuple[PricingPlan, ...] = ()


class PricingBlock(BaseBlock):
    block_type: Literal["pricing"] = "pricing"
    structure: PricingStructure = PricingStructure()
    seed: PricingSeed = PricingSeed()
