"""
Schémas Pydantic partagés du Page Studio.

Types littéraux (échelles de style, animations, types de blocs) + réglages de page
(GlobalSettings) + préférences de l'éditeur (AppPreferences).
Tous les modèles sont immuables : une modification produit toujours un nouvel objet.
"""
from typing import Literal, Optional, get_args

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# ── Types littéraux ─────────────────────────────────────────────────────────

BlockKind = Literal[
    "navigation", "hero", "feature", "cta", "footer", "split", "map", "form",
    "image", "text", "button", "divider", "pricing", "testimonial", "team", "faq",
]
BLOCK_KINDS: tuple = get_args(BlockKind)

Spacing       = Literal["none", "xs", "sm", "md", "lg", "xl", "2xl"]
Radius        = Literal["none", "sm", "md", "lg", "xl", "full"]
FontFamily    = Literal["sans", "serif", "mono", "display"]
ButtonStyle   = Literal["solid", "outline", "ghost"]
Align         = Literal["left", "center", "right"]
AnimationType = Literal[
    "none", "fade-in", "slide-up", "slide-down",
    "slide-left", "slide-right", "zoom-in", "bounce",
]
Language      = Literal["en", "pt", "es", "fr"]


# ── Modèles de base ─────────────────────────────────────────────────────────

class StudioModel(BaseModel):
    """Modèle immuable (base de tous les schémas du studio)."""
    model_config = ConfigDict(frozen=True)


class BlockItem(StudioModel):
    """
    Élément d'une liste de bloc (lien, plan tarifaire, membre…).
    Sérialisé en camelCase pour les littéraux de données du code composant.
    """
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: str = ""


# ── Réglages de page ────────────────────────────────────────────────────────

class SeoSettings(StudioModel):
    title: str = "My Awesome Site"
    description: str = "Created with Website Builder"
    keywords: str = ""
    og_image: str = ""
    robots: str = "User-agent: *"  # contenu robots.txt, pas une balise meta
    author: str = ""


class GlobalSettings(SeoSettings):
    """Réglages globaux : SEO + typographie + palette 5 couleurs."""
    font_family: FontFamily = "sans"
    primary_color: str = "#4F46E5"
    secondary_color: str = "#E5E7EB"
    background_color: str = "#F9FAFB"
    text_color: str = "#111827"
    accent_color: str = "#FBBF24"


class AppPreferences(StudioModel):
    """Préférences de l'éditeur — jamais lues par les générateurs."""
    dark_mode: bool = False
    show_grid_lines: bool = False
    language: Language = "en"


class Artifact(StudioModel):
    """Texte exporté, prêt à être proposé en téléchargement."""
    filename: str
    media_type: str
    content: str = Field(repr=False)
    target: Optional[str] = None
