"""
Renderer HTML — génère le fichier index.html autonome d'un document.

<head> : métadonnées SEO, Tailwind CDN, Material Symbols, animate.css, police Google,
<style> avec les variables :root et la feuille SCSS compilée.
<body> : une <section> par bloc, dans l'ordre du document.
"""
import logging
from html import escape
from typing import Any, Dict, List

from ..core.schemas import GlobalSettings
from ..core.styles import google_font_url
from .base import indent, is_inline
from .css import generate_page_css
from .ir import BlockIR, Each, Element, Text, When, evaluate
from .templates import build_block_ir, build_page_ir

log = logging.getLogger(__name__)

VOID_TAGS = {"img", "input", "br", "hr", "meta", "link"}

TAILWIND_CDN   = "https://cdn.tailwindcss.com"
MATERIAL_ICONS = ("https://fonts.googleapis.com/css2?family=Material+Symbols+Outlined"
                  ":opsz,wght,FILL,GRAD@20..48,100..700,0..1,0")
ANIMATE_CSS    = "https://cdnjs.cloudflare.com/ajax/libs/animate.css/4.1.1/animate.min.css"


def _attr(value: Any) -> str:
    return escape(str(value), quote=True)


def _style(style: Dict[str, Any], scope: Dict[str, Any]) -> str:
    return "; ".join(f"{prop}: {evaluate(value, scope)}" for prop, value in style.items())


class HtmlRenderer:
    """IR → HTML indenté (texte utilisateur échappé, HTML de confiance inséré tel quel)."""

    filename = "index.html"
    media_type = "text/html"

    # ── Nœuds ───────────────────────────────────────────────────────────────

    def open_tag(self, node: Element, scope: Dict[str, Any]) -> str:
        parts = [node.tag]
        if node.classes:
            parts.append(f'class="{_attr(node.classes)}"')
        for name, value in node.attrs.items():
            value = evaluate(value, scope)
            if value is True:
                parts.append(name)
            elif value is not False and value is not None:
                parts.append(f'{name}="{_attr(value)}"')
        if node.style:
            parts.append(f'style="{_attr(_style(node.style, scope))}"')
        return "<" + " ".join(parts) + ">"

    def inline(self, node, scope: Dict[str, Any]) -> str:
        if isinstance(node, Text):
            value = evaluate(node.value, scope)
            return escape("" if value is None else str(value), quote=False)
        if node.tag in VOID_TAGS:
            return self.open_tag(node, scope)
        inner = "".join(self.inline(child, scope) for child in node.children)
        return f"{self.open_tag(node, scope)}{inner}</{node.tag}>"

    def render_node(self, node, scope: Dict[str, Any], depth: int) -> List[str]:
        pad = indent(depth)
        if isinstance(node, Each):
            lines = []
            for i, item in enumerate(evaluate(node.source, scope) or []):
                lines += self.render_node(node.body, {**scope, node.var: item, node.index: i}, depth)
            return lines
        if isinstance(node, When):
            branch = node.body if node.test.evaluate(scope) else node.otherwise
            return self.render_node(branch, scope, depth) if branch is not None else []
        if isinstance(node, Text):
            return [pad + self.inline(node, scope)]
        if node.tag in VOID_TAGS:
            return [pad + self.open_tag(node, scope)]
        if node.raw_html is not None:
            raw = evaluate(node.raw_html, scope)
            return [f"{pad}{self.open_tag(node, scope)}{raw}</{node.tag}>"]
        if is_inline(node):
            return [pad + self.inline(node, scope)]
        lines = [pad + self.open_tag(node, scope)]
        for child in node.children:
            lines += self.render_node(child, scope, depth + 1)
        lines.append(f"{pad}</{node.tag}>")
        return lines

    # ── Sections ────────────────────────────────────────────────────────────

    def section_lines(self, block: BlockIR, depth: int = 0) -> List[str]:
        pad = indent(depth)
        anchor = f' id="{_attr(block.anchor_id)}"' if block.anchor_id else ""
        style = "; ".join(f"{prop}: {value}" for prop, value in block.background.items())
        lines = [f'{pad}<section{anchor} class="{block.section_classes}" style="{_attr(style)}">']
        lines += self.render_node(block.content, {}, depth + 1)
        lines.append(f"{pad}</section>")
        return lines

    def render_block(self, block: BlockIR) -> str:
        return "\n".join(self.section_lines(block))

    # ── Page ────────────────────────────────────────────────────────────────

    def head(self, settings: GlobalSettings) -> str:
        metas = [
            '<meta charset="UTF-8">',
            '<meta name="viewport" content="width=device-width, initial-scale=1.0">',
            f"<title>{escape(settings.title, quote=False)}</title>",
            f'<meta name="description" content="{_attr(settings.description)}">',
        ]
        for name in ("keywords", "author"):
            value = getattr(settings, name)
            if value:
                metas.append(f'<meta name="{name}" content="{_attr(value)}">')
        if settings.og_image:
            metas.append(f'<meta property="og:title" content="{_attr(settings.title)}">')
            metas.append(f'<meta property="og:image" content="{_attr(settings.og_image)}">')
        metas += [
            f'<script src="{TAILWIND_CDN}"></script>',
            f'<link href="{MATERIAL_ICONS}" rel="stylesheet">',
            f'<link rel="stylesheet" href="{ANIMATE_CSS}">',
            '<link rel="preconnect" href="https://fonts.googleapis.com">',
            f'<link href="{_attr(google_font_url(settings.font_family))}" rel="stylesheet">',
            f"<style>\n{generate_page_css(settings)}\n  </style>",
        ]
        return "<head>\n" + "\n".join("  " + m for m in metas) + "\n</head>"

    def render_page(self, document, settings: GlobalSettings) -> str:
        sections = []
        for block in build_page_ir(document):
            sections += self.section_lines(block, depth=1)
        body = "<body>\n" + ("\n".join(sections) + "\n" if sections else "") + "</body>"
        log.debug("HTML généré (%d sections)", len(document.blocks))
        return f'<!DOCTYPE html>\n<html lang="en">\n{self.head(settings)}\n{body}\n</html>\n'


# ── Point d'entrée public ───────────────────────────────────────────────────

def render_html(document, settings: GlobalSettings = None) -> str:
    """Génère le HTML complet d'un document."""
    return HtmlRenderer().render_page(document, settings or GlobalSettings())


def render_block_html(block) -> str:
    """Rend un seul bloc (section) — utile pour les aperçus."""
    return HtmlRenderer().render_block(build_block_ir(block))
