"""
Blocs de base pour page_studio.
Champs communs (identifiants, fond, espacements, animation) + Structure/Seed séparés.
"""
from typing import Annotated, Literal, Optional, Union

from pydantic import Field

from ..core.schemas import AnimationType, Spacing, StudioModel

DEFAULT_GRADIENT = "linear-gradient(135deg, #667eea 0%, #764ba2 100%)"


# ── Fond : variante étiquetée, un seul mode actif ───────────────────────────

class SolidBackground(StudioModel):
    mode: Literal["solid"] = "solid"
    color: str = "transparent"


class GradientBackground(StudioModel):
    mode: Literal["gradient"] = "gradient"
    gradient: str = DEFAULT_GRADIENT


class ImageBackground(StudioModel):
    mode: Literal["image"] = "image"
    url: str = ""


Background = Annotated[
    Union[SolidBackground, GradientBackground, ImageBackground],
    Field(discriminator="mode"),
]


# ── Bloc ────────────────────────────────────────────────────────────────────

class BlockStructure(StudioModel):
    """Structure visuelle d'un bloc (layout, couleurs, rayons, options d'affichage)."""
    pass


class BlockSeed(StudioModel):
    """Contenu d'un bloc (textes, URLs, listes d'éléments)."""
    pass


class BaseBlock(StudioModel):
    """Bloc de base (classe parente de tous les blocs)."""
    block_type: str
    id: str = ""
    instance_id: Optional[str] = None
    anchor_id: Optional[str] = None
    background: Background = SolidBackground()
    padding_top: Spacing = "md"
    padding_bottom: Spacing = "md"
    animation: AnimationType = "none"
