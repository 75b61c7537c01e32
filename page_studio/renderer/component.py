"""
Renderer composant — génère le fichier <Nom>.tsx (composant React, Page.tsx par défaut).

Même IR que le renderer HTML ; seule la syntaxe change :
  class → className, style="…" → style={{ camelCase: … }},
  listes → littéral JSON + .map((item, i) => …) avec key,
  HTML de confiance → dangerouslySetInnerHTML.
"""
import json
import logging
import re
from typing import Any, Dict, List

from ..core.schemas import GlobalSettings
from ..core.styles import palette_variables
from .base import indent, is_inline
from .ir import BlockIR, Each, Element, Expr, Text, When, js_literal, to_js
from .templates import build_block_ir, build_page_ir

log = logging.getLogger(__name__)

VOID_TAGS = {"img", "input", "br", "hr", "meta", "link", "textarea"}

JSX_ATTRS = {"class": "className", "for": "htmlFor", "frameborder": "frameBorder", "tabindex": "tabIndex"}

_SAFE_TEXT = re.compile(r"^[^{}<>&]*$")
_SAFE_ATTR = re.compile(r'^[^{}<>&"\\]*$')


def style_key(prop: str) -> str:
    """background-color → backgroundColor ; les variables CSS restent citées."""
    if prop.startswith("--"):
        return json.dumps(prop)
    return re.sub(r"-([a-z])", lambda m: m.group(1).upper(), prop)


def style_object(style: Dict[str, Any]) -> str:
    return "{ " + ", ".join(f"{style_key(k)}: {to_js(v)}" for k, v in style.items()) + " }"


class ComponentRenderer:
    """IR → source TSX d'un composant React par défaut."""

    media_type = "text/plain"

    def __init__(self, component_name: str = "Page"):
        self.component_name = component_name
        self.filename = f"{component_name}.tsx"

    # ── Nœuds ───────────────────────────────────────────────────────────────

    def attr(self, name: str, value: Any) -> str:
        name = JSX_ATTRS.get(name, name)
        if isinstance(value, Expr):
            return f"{name}={{{value.to_js()}}}"
        if value is True:
            return name
        if value is False or value is None:
            return ""
        value = str(value)
        return f'{name}="{value}"' if _SAFE_ATTR.match(value) else f"{name}={{{json.dumps(value, ensure_ascii=False)}}}"

    def open_tag(self, node: Element, key: str = None, close: bool = False) -> str:
        parts = [node.tag]
        if key:
            parts.append(f"key={{{key}}}")
        if node.classes:
            parts.append(self.attr("class", node.classes))
        parts += [a for a in (self.attr(n, v) for n, v in node.attrs.items()) if a]
        if node.style:
            parts.append(f"style={{{style_object(node.style)}}}")
        if node.raw_html is not None:
            parts.append(f"dangerouslySetInnerHTML={{{{ __html: {to_js(node.raw_html)} }}}}")
        return "<" + " ".join(parts) + (" />" if close else ">")

    def text(self, node: Text) -> str:
        value = node.value
        if isinstance(value, Expr):
            return f"{{{value.to_js()}}}"
        value = "" if value is None else str(value)
        if _SAFE_TEXT.match(value) and value == value.strip():
            return value
        return f"{{{json.dumps(value, ensure_ascii=False)}}}"

    def inline(self, node, key: str = None) -> str:
        if isinstance(node, Text):
            return self.text(node)
        if node.tag in VOID_TAGS or node.raw_html is not None:
            return self.open_tag(node, key, close=True)
        inner = "".join(self.inline(child) for child in node.children)
        return f"{self.open_tag(node, key)}{inner}</{node.tag}>"

    def render_node(self, node, depth: int, key: str = None) -> List[str]:
        pad = indent(depth)
        if isinstance(node, Each):
            source = node.source.to_js() if isinstance(node.source, Expr) else js_literal(node.source)
            lines = [f"{pad}{{{source}.map(({node.var}: any, {node.index}: number) => ("]
            lines += self.render_node(node.body, depth + 1, key=node.index)
            lines.append(f"{pad}))}}")
            return lines
        if isinstance(node, When):
            body = self.render_node(node.body, depth + 1, key)
            if node.otherwise is None:
                return [f"{pad}{{{node.test.to_js()} && ("] + body + [f"{pad})}}"]
            otherwise = self.render_node(node.otherwise, depth + 1, key)
            return [f"{pad}{{{node.test.to_js()} ? ("] + body + [f"{pad}) : ("] + otherwise + [f"{pad})}}"]
        if isinstance(node, Text):
            return [pad + self.text(node)]
        if node.tag in VOID_TAGS or node.raw_html is not None or is_inline(node):
            return [pad + self.inline(node, key)]
        lines = [pad + self.open_tag(node, key)]
        for child in node.children:
            lines += self.render_node(child, depth + 1)
        lines.append(f"{pad}</{node.tag}>")
        return lines

    # ── Sections ────────────────────────────────────────────────────────────

    def section_lines(self, block: BlockIR, depth: int = 0) -> List[str]:
        pad = indent(depth)
        anchor = self.attr("id", block.anchor_id) + " " if block.anchor_id else ""
        lines = [
            f"{pad}{{/* {block.block_type} */}}",
            f'{pad}<section {anchor}className="{block.section_classes}" style={{{style_object(block.background)}}}>',
        ]
        lines += self.render_node(block.content, depth + 1)
        lines.append(f"{pad}</section>")
        return lines

    def render_block(self, block: BlockIR) -> str:
        return "\n".join(self.section_lines(block))

    # ── Page ────────────────────────────────────────────────────────────────

    def root_style(self, settings: GlobalSettings) -> str:
        variables = palette_variables(settings)
        style = {name: value for name, value in variables.items() if name != "--font-family-body"}
        style.update({
            "background-color": "var(--color-bg)",
            "color": "var(--color-text)",
            "font-family": variables["--font-family-body"],
        })
        return f"{style_object(style)} as React.CSSProperties"

    def render_page(self, document, settings: GlobalSettings) -> str:
        sections = []
        for block in build_page_ir(document):
            sections += self.section_lines(block, depth=3)
        meta = js_literal({"title": settings.title, "description": settings.description})
        name = self.component_name
        lines = [
            "import React from 'react';",
            "",
            "// Requires Tailwind CSS, animate.css and Material Symbols Outlined",
            f"// Font: {settings.font_family}",
            "",
            f"export const meta = {meta};",
            "",
            f"const {name} = () => {{",
            "  return (",
            f'    <div className="min-h-screen" style={{{self.root_style(settings)}}}>',
            *sections,
            "    </div>",
            "  );",
            "};",
            "",
            f"export default {name};",
            "",
        ]
        log.debug("Composant généré (%d sections)", len(document.blocks))
        return "\n".join(lines)


# ── Point d'entrée public ───────────────────────────────────────────────────

def render_component(document, settings: GlobalSettings = None, component_name: str = "Page") -> str:
    """Génère le source TSX du composant de page."""
    return ComponentRenderer(component_name).render_page(document, settings or GlobalSettings())


def render_block_component(block) -> str:
    return ComponentRenderer().render_block(build_block_ir(block))
