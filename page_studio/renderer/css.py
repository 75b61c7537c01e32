"""
Feuille de style des pages exportées — variables :root + SCSS compilé (libsass).

Pipeline :
  generate_css_variables(settings)  →  :root { --color-primary: ...; ... }
  get_compiled_scss()               →  base.scss (compilé une fois, en cache)
  generate_page_css(settings)       →  variables + SCSS
"""
import logging
from pathlib import Path

from ..core.schemas import GlobalSettings
from ..core.styles import generate_css_variables

log = logging.getLogger(__name__)

_SCSS_DIR = Path(__file__).parent.parent / "scss"
_SCSS_CACHE: dict = {}


def get_compiled_scss(name: str = "base") -> str:
    """Compile scss/<name>.scss une seule fois, met en cache (libsass requis)."""
    if name not in _SCSS_CACHE:
        import sass
        source = _SCSS_DIR / f"{name}.scss"
        _SCSS_CACHE[name] = sass.compile(filename=str(source), output_style="compressed").strip()
        log.debug("SCSS compilé : %s", source.name)
    return _SCSS_CACHE[name]


def generate_page_css(settings: GlobalSettings) -> str:
    """
    CSS complet d'une page :
    1. :root { variables } — palette + police des réglages globaux
    2. SCSS compilé (base des pages exportées)
    """
    return generate_css_variables(settings) + "\n" + get_compiled_scss()


def invalidate_scss_cache():
    """Force la recompilation SCSS (dev only)."""
    _SCSS_CACHE.clear()
