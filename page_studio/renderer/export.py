"""
Export — document + réglages → Artifact téléchargeable (index.html ou <Nom>.tsx).
"""
import logging
from typing import Dict, Literal

from ..core.schemas import Artifact, GlobalSettings
from .base import Renderer
from .component import ComponentRenderer
from .html import HtmlRenderer

log = logging.getLogger(__name__)

ExportTarget = Literal["html", "component"]

RENDERERS: Dict[str, type] = {
    "html":      HtmlRenderer,
    "component": ComponentRenderer,
}


def get_renderer(target: str, **options) -> Renderer:
    """
    Raises:
        ValueError: cible d'export inconnue
    """
    try:
        cls = RENDERERS[target]
    except KeyError:
        raise ValueError(f"Cible d'export inconnue : {target!r} (attendu : {', '.join(RENDERERS)})") from None
    return cls(**options)


def export_artifact(document, settings: GlobalSettings = None, target: ExportTarget = "html",
                    component_name: str = "Page") -> Artifact:
    options = {"component_name": component_name} if target == "component" else {}
    renderer = get_renderer(target, **options)
    content = renderer.render_page(document, settings or GlobalSettings())
    log.info("Export %s : %s (%d blocs, %d caractères)",
             target, renderer.filename, len(document.blocks), len(content))
    return Artifact(filename=renderer.filename, media_type=renderer.media_type,
                    content=content, target=target)
