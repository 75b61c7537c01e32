"""
Règles de résolution de style du Page Studio.

Fonctions pures, partagées par le générateur HTML et le générateur composant :
les deux sorties obtiennent ainsi exactement les mêmes valeurs résolues.
Toutes les fonctions sont totales : une valeur inconnue (ou absente) retombe
sur une valeur par défaut, jamais sur une erreur.
"""
from typing import Dict, Optional, Tuple

from .schemas import GlobalSettings


# ── Tables ──────────────────────────────────────────────────────────────────

# Échelle d'espacement → unité Tailwind (pt-20, pb-48…)
PADDING_MAP: Dict[str, str] = {
    "none": "0", "xs": "8", "sm": "12", "md": "20", "lg": "32", "xl": "48", "2xl": "64",
}
PADDING_FALLBACK = "md"

_AXIS_PREFIX = {"top": "pt", "bottom": "pb", "y": "py", "x": "px"}

RADIUS_MAP: Dict[str, str] = {
    "none": "rounded-none",
    "sm":   "rounded",
    "md":   "rounded-lg",
    "lg":   "rounded-xl",
    "xl":   "rounded-2xl",
    "full": "rounded-full",
}
RADIUS_FALLBACK = "md"

# Animations d'entrée → classes animate.css
ANIMATION_MAP: Dict[str, str] = {
    "none":        "",
    "fade-in":     "animate__fadeIn",
    "slide-up":    "animate__slideInUp",
    "slide-down":  "animate__slideInDown",
    "slide-left":  "animate__slideInLeft",
    "slide-right": "animate__slideInRight",
    "zoom-in":     "animate__zoomIn",
    "bounce":      "animate__bounce",
}

GAP_MAP: Dict[str, str] = {
    "none": "gap-0", "xs": "gap-2", "sm": "gap-4", "md": "gap-8",
    "lg": "gap-12", "xl": "gap-16", "2xl": "gap-20",
}

GRID_COLUMNS_MAP: Dict[int, str] = {
    2: "md:grid-cols-2",
    3: "md:grid-cols-3",
    4: "md:grid-cols-2 lg:grid-cols-4",
}

JUSTIFY_MAP: Dict[str, str] = {"left": "start", "center": "center", "right": "end"}

# font_family → (famille CSS, famille Google Fonts)
FONT_MAP: Dict[str, Tuple[str, str]] = {
    "sans":    ("Inter", "Inter"),
    "serif":   ("Merriweather", "Merriweather"),
    "mono":    ("Roboto Mono", "Roboto+Mono"),
    "display": ("Playfair Display", "Playfair+Display"),
}

FONT_WEIGHT_MAP: Dict[str, str] = {"normal": "400", "medium": "500", "bold": "700", "black": "900"}

# Variables CSS de la palette : même nom dans les deux sorties
PALETTE_VARIABLES: Tuple[Tuple[str, str], ...] = (
    ("--color-primary",   "primary_color"),
    ("--color-secondary", "secondary_color"),
    ("--color-bg",        "background_color"),
    ("--color-text",      "text_color"),
    ("--color-accent",    "accent_color"),
)


# ── Résolution ──────────────────────────────────────────────────────────────

def resolve_background(background) -> Dict[str, str]:
    """
    Descripteur de fond → déclarations CSS (propriété → valeur).

    solid    → background-color
    gradient → background-image (chaîne de dégradé telle quelle)
    image    → background-image url(...) + cover/center
    """
    mode = getattr(background, "mode", None)
    if mode == "gradient":
        return {"background-image": background.gradient}
    if mode == "image":
        return {
            "background-image": f"url({background.url})",
            "background-size": "cover",
            "background-position": "center",
        }
    return {"background-color": getattr(background, "color", None) or "transparent"}


def resolve_padding(value: Optional[str], axis: str = "top") -> str:
    """Échelle 7 crans → token d'espacement (pt-20…). Valeur inconnue → md."""
    prefix = _AXIS_PREFIX.get(axis, "py")
    amount = PADDING_MAP.get(value or "", PADDING_MAP[PADDING_FALLBACK])
    return f"{prefix}-{amount}"


def resolve_radius(value: Optional[str]) -> str:
    return RADIUS_MAP.get(value or "", RADIUS_MAP[RADIUS_FALLBACK])


def resolve_animation_class(name: Optional[str]) -> str:
    """Nom d'animation → classes animate.css ("" pour none ou valeur inconnue)."""
    cls = ANIMATION_MAP.get(name or "", "")
    return f"animate__animated {cls}" if cls else ""


def resolve_gap(value: Optional[str]) -> str:
    return GAP_MAP.get(value or "", GAP_MAP[PADDING_FALLBACK])


def resolve_grid_columns(count) -> str:
    return GRID_COLUMNS_MAP.get(count, GRID_COLUMNS_MAP[3])


def resolve_justify(align: Optional[str]) -> str:
    return JUSTIFY_MAP.get(align or "", "start")


def resolve_font(font_family: Optional[str]) -> Tuple[str, str]:
    return FONT_MAP.get(font_family or "", FONT_MAP["sans"])


def resolve_font_weight(weight: Optional[str]) -> str:
    return FONT_WEIGHT_MAP.get(weight or "", "400")


def font_stack(font_family: Optional[str]) -> str:
    """Pile CSS complète : 'Inter', sans-serif."""
    family, _ = resolve_font(font_family)
    generic = {"serif": "serif", "mono": "monospace"}.get(font_family or "", "sans-serif")
    return f"'{family}', {generic}"


def google_font_url(font_family: Optional[str]) -> str:
    _, query = resolve_font(font_family)
    return f"https://fonts.googleapis.com/css2?family={query}:wght@400;700&display=swap"


# ── Variables CSS ───────────────────────────────────────────────────────────

def palette_variables(settings: GlobalSettings) -> Dict[str, str]:
    """Palette → {"--color-primary": "#4F46E5", …} (ordre stable)."""
    variables = {name: getattr(settings, attr) for name, attr in PALETTE_VARIABLES}
    variables["--font-family-body"] = font_stack(settings.font_family)
    return variables


def generate_css_variables(settings: GlobalSettings) -> str:
    """
    Génère le bloc :root {} à partir des réglages globaux.

    Returns:
        CSS :root {} avec la palette et la police du site
    """
    lines = "\n".join(f"  {name}: {value};" for name, value in palette_variables(settings).items())
    return f":root {{\n{lines}\n}}"
