"""Tests renderer composant React — syntaxe JSX + isomorphisme avec le HTML."""
from page_studio.blocks import HeroSeed, get_template
from page_studio.core.document import Document, insert, update
from page_studio.core.schemas import GlobalSettings
from page_studio.renderer import (
    ComponentRenderer, HtmlRenderer, Renderer, build_page_ir, export_artifact,
    render_component, render_html,
)
from page_studio.renderer.component import render_block_component, style_key


# ── Page ─────────────────────────────────────────────────────────────────────

def test_empty_document_component():
    tsx = render_component(Document(), GlobalSettings())
    assert tsx.startswith("import React from 'react';")
    assert "const Page = () => {" in tsx
    assert tsx.rstrip().endswith("export default Page;")
    assert "<section" not in tsx


def test_root_carries_palette():
    tsx = render_component(Document(), GlobalSettings(accent_color="#00FF00"))
    assert '"--color-primary": "#4F46E5"' in tsx
    assert '"--color-accent": "#00FF00"' in tsx
    assert "as React.CSSProperties" in tsx
    assert 'export const meta = {"title": "My Awesome Site"' in tsx


def test_component_name():
    tsx = render_component(Document(), component_name="Landing")
    assert "const Landing = () => {" in tsx
    assert "export default Landing;" in tsx


def test_sections_use_jsx_syntax(starter):
    tsx = render_component(starter)
    assert "{/* navigation */}" in tsx
    assert '<section id="hero" className="pt-48 pb-48" style={{ backgroundColor: "transparent" }}>' in tsx
    assert ' class="' not in tsx


def test_deterministic(every_kind):
    assert render_component(every_kind) == render_component(every_kind)


def test_style_keys():
    assert style_key("background-color") == "backgroundColor"
    assert style_key("--hover-color") == '"--hover-color"'


# ── Listes / conditions ──────────────────────────────────────────────────────

def test_feature_list_is_mapped():
    tsx = render_block_component(get_template("feature"))
    assert '{[{"id": "f1", "title": "Push to deploy"' in tsx
    assert ".map((f: any, i: number) => (" in tsx
    assert 'key={i}' in tsx
    assert "{f.title}" in tsx


def test_pricing_expressions():
    tsx = render_block_component(get_template("pricing"))
    assert '"isPopular": true' in tsx
    assert "{p.isPopular && (" in tsx
    assert '(p.badgeText || "Most Popular")' in tsx
    assert "{p.features.map((feature: any, j: number) => (" in tsx
    assert "<li key={j} " in tsx
    assert 'borderColor: (p.isPopular ? "var(--color-primary)" : "#e5e7eb")' in tsx


def test_form_conditional_and_attributes():
    tsx = render_block_component(get_template("form"))
    assert '{f.type === "textarea" ? (' in tsx
    assert "required={f.required}" in tsx
    assert "placeholder={f.placeholder}" in tsx


def test_testimonial_stars():
    tsx = render_block_component(get_template("testimonial"))
    assert "'★'.repeat(" in tsx
    assert "{item.avatar ? (" in tsx


def test_map_attributes():
    tsx = render_block_component(get_template("map"))
    assert 'frameBorder="0"' in tsx
    assert 'src={"https://maps.google.com/maps?q=New%20York%2C%20NY&z=12&output=embed"}' in tsx


# ── Échappement ──────────────────────────────────────────────────────────────

def test_trusted_markup_uses_dangerously_set_inner_html():
    tsx = render_block_component(get_template("text"))
    assert 'dangerouslySetInnerHTML={{ __html: "Start editing this text" }}' in tsx
    assert "dangerouslySetInnerHTML" in render_block_component(get_template("split"))


def test_text_with_markup_chars_is_quoted(ids):
    doc, hero_id = insert(Document(), "hero", id_factory=ids)
    hero = get_template("hero").model_copy(update={"seed": HeroSeed(heading="<b>{x}</b>")})
    tsx = render_component(update(doc, hero_id, hero))
    assert '{"<b>{x}</b>"}' in tsx


# ── Isomorphisme HTML / composant ────────────────────────────────────────────

def test_same_sections_and_styles_as_html(every_kind):
    html = render_html(every_kind, GlobalSettings())
    tsx = render_component(every_kind, GlobalSettings())
    html_sections = html.split("<section ")[1:]
    tsx_sections = tsx.split("<section ")[1:]
    blocks = build_page_ir(every_kind)
    assert len(html_sections) == len(tsx_sections) == len(blocks) == 16

    for ir, h, c in zip(blocks, html_sections, tsx_sections):
        for token in (ir.padding_top, ir.padding_bottom):
            assert token in h and token in c, ir.block_type
        if ir.radius:
            assert ir.radius in h and ir.radius in c, ir.block_type
        for value in ir.background.values():
            assert value in h and value in c, ir.block_type


# ── Export ───────────────────────────────────────────────────────────────────

def test_export_artifacts(starter):
    html = export_artifact(starter, GlobalSettings(), "html")
    assert (html.filename, html.media_type, html.target) == ("index.html", "text/html", "html")
    assert html.content.startswith("<!DOCTYPE html>")
    tsx = export_artifact(starter, GlobalSettings(), "component", component_name="Home")
    assert tsx.filename == "Home.tsx"
    assert "export default Home;" in tsx.content
    assert export_artifact(starter, target="component").filename == "Page.tsx"


def test_renderers_follow_protocol():
    assert isinstance(HtmlRenderer(), Renderer)
    assert isinstance(ComponentRenderer(), Renderer)
