"""Bloc Feature — grille de fonctionnalités (2, 3 ou 4 colonnes)."""
from typing import Literal, Tuple

from ..core.schemas import BlockItem, Radius, Spacing
from .base import BaseBlock, BlockStructure, BlockSeed


class FeatureItem(BlockItem):
    title: str = ""
    description: str = ""
    icon: str = "star"


class FeatureStructure(BlockStructure):
    grid_cols: Literal[2, 3, 4] = 3
    gap: Spacing = "lg"
    title_color: str = "var(--color-text)"
    description_color: str = "var(--color-text)"
    feature_title_color: str = "var(--color-text)"
    feature_desc_color: str = "var(--color-text)"
    icon_bg_color: str = "var(--color-primary)"
    icon_color: str = "#FFFFFF"
    card_bg_color: str = "#FFFFFF"
    card_radius: Radius = "lg"
    shadow: bool = True


class FeatureSeed(BlockSeed):
    title: str = ""
    description: str = ""
    features: Tuple[FeatureItem, ...] = ()


class FeatureBlock(BaseBlock):
    block_type: Literal["feature"] = "feature"
    structure: FeatureStructure = FeatureStructure()
    seed: FeatureSeed = FeatureSeed()
