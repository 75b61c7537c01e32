"""
Générateurs — IR commune + renderer HTML + renderer composant React.
"""
from .ir import BlockIR, Element, Text, Each, When, Ref, Eq, Pick, Stars, el
from .templates import build_block_ir, build_page_ir, TEMPLATES
from .css import generate_page_css, invalidate_scss_cache
from .html import HtmlRenderer, render_html, render_block_html
from .component import ComponentRenderer, render_component, render_block_component
from .base import Renderer
from .export import export_artifact, get_renderer, RENDERERS

__all__ = [
    "BlockIR", "Element", "Text", "Each", "When", "Ref", "Eq", "Pick", "Stars", "el",
    "build_block_ir", "build_page_ir", "TEMPLATES",
    "generate_page_css", "invalidate_scss_cache",
    "HtmlRenderer", "render_html", "render_block_html",
    "ComponentRenderer", "render_component", "render_block_component",
    "Renderer", "export_artifact", "get_renderer", "RENDERERS",
]
