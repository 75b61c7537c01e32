"""
Gabarits IR par type de bloc.

Un gabarit reçoit le bloc et le token de rayon déjà résolu, et renvoie l'arbre de
contenu de la section. Les conditions portant sur le bloc (bouton affiché, légende…)
sont tranchées ici ; seules celles portant sur un élément de liste passent par When/Pick.
"""
import logging
from typing import Callable, Dict, List
from urllib.parse import quote

from ..blocks import (
    BaseBlock, SolidBackground,
    NavigationBlock, HeroBlock, FeatureBlock, CTABlock, FooterBlock, SplitBlock,
    MapBlock, FormBlock, ImageBlock, TextBlock, ButtonBlock, DividerBlock,
    PricingBlock, TestimonialBlock, TeamBlock, FAQBlock,
)
from ..core.styles import (
    resolve_animation_class, resolve_background, resolve_font_weight, resolve_gap,
    resolve_grid_columns, resolve_justify, resolve_padding, resolve_radius,
)
from .ir import BlockIR, Each, Element, Eq, Pick, Ref, Stars, When, el

log = logging.getLogger(__name__)

Template = Callable[[BaseBlock, str], Element]

# Champ de structure portant le rayon, par type de bloc
_RADIUS_FIELD: Dict[str, str] = {
    "navigation":  "button_radius",
    "hero":        "button_radius",
    "cta":         "button_radius",
    "form":        "button_radius",
    "feature":     "card_radius",
    "image":       "border_radius",
    "button":      "radius",
    "pricing":     "radius",
    "testimonial": "radius",
    "team":        "radius",
}

_CONTAINER = "container mx-auto px-4"


def _color(value: str) -> dict:
    return {"color": value}


# ── Navigation ──────────────────────────────────────────────────────────────

def _nav_logo(b: NavigationBlock) -> Element:
    s, d = b.structure, b.seed
    if s.logo_type == "image" and d.logo_image:
        return el("img", "h-auto", style={"width": f"{s.logo_width}px"},
                  attrs={"src": d.logo_image, "alt": d.logo_text})
    return el("div", "text-2xl font-bold", d.logo_text, style=_color(s.text_color))


def _nav_button(b: NavigationBlock, radius: str, extra: str = ""):
    s, d = b.structure, b.seed
    if not d.show_button:
        return None
    return el("a", f"px-5 py-2 {radius} font-bold{extra}", d.button_text,
              style={"background-color": s.button_bg, "color": s.button_text_color},
              attrs={"href": d.button_url})


def navigation(b: NavigationBlock, radius: str) -> Element:
    s, d = b.structure, b.seed
    if s.layout_style == "sidebar":
        links = Each(source=d.links, var="link", body=el(
            "a", "ps-nav-link block py-2 font-medium", Ref(var="link", field="label"),
            style=_color(s.link_color), attrs={"href": Ref(var="link", field="href")},
        ))
        return el(
            "div", "flex flex-col h-full w-64 p-6 fixed left-0 top-0 bottom-0 shadow-lg z-40",
            el("div", "mb-10", _nav_logo(b)),
            el("div", "flex flex-col gap-4 flex-1", links),
            _nav_button(b, radius, " text-center"),
            style={"background-color": s.menu_bg_color, "--hover-color": s.hover_color},
        )
    links = Each(source=d.links, var="link", body=el(
        "a", "ps-nav-link font-medium", Ref(var="link", field="label"),
        style=_color(s.link_color), attrs={"href": Ref(var="link", field="href")},
    ))
    return el(
        "div", f"{_CONTAINER} flex justify-between items-center h-16",
        _nav_logo(b),
        el("div", f"hidden md:flex flex-1 mx-8 gap-8 justify-{resolve_justify(s.layout)}", links),
        _nav_button(b, radius),
        style={"--hover-color": s.hover_color},
    )


# ── Hero / CTA ──────────────────────────────────────────────────────────────

def hero(b: HeroBlock, radius: str) -> Element:
    s, d = b.structure, b.seed
    return el(
        "div", f"{_CONTAINER} text-{s.alignment} py-20 relative z-10",
        el("h1", "text-4xl md:text-6xl font-bold mb-6", d.heading, style=_color(s.heading_color)),
        el("p", "text-xl md:text-2xl mb-8", d.subheading, style=_color(s.subheading_color)),
        el(
            "div", f"flex gap-4 justify-{resolve_justify(s.alignment)}",
            d.show_button1 and el(
                "a", f"px-8 py-3 {radius} font-bold shadow-lg", d.button1_text,
                style={"background-color": s.button1_bg, "color": s.button1_color},
                attrs={"href": d.button1_url},
            ),
            d.show_button2 and el(
                "a", f"px-8 py-3 {radius} font-bold border", d.button2_text,
                style={"background-color": s.button2_bg, "color": s.button2_color,
                       "border-color": s.button2_color},
                attrs={"href": d.button2_url},
            ),
        ),
    )


def cta(b: CTABlock, radius: str) -> Element:
    s, d = b.structure, b.seed
    overlay = None
    if s.overlay_opacity:
        overlay = el("div", "absolute inset-0 bg-black pointer-events-none",
                     style={"opacity": f"{s.overlay_opacity / 100:g}"})
    return el(
        "div", "relative",
        overlay,
        el(
            "div", f"{_CONTAINER} text-center relative z-10",
            el("h2", "text-4xl font-bold mb-6", d.heading, style=_color(s.heading_color)),
            el("p", "text-xl mb-8 max-w-2xl mx-auto", d.subtext, style=_color(s.subtext_color)),
            d.show_button and el(
                "a", f"inline-block px-8 py-4 font-bold {radius} shadow-lg transition-transform hover:-translate-y-1",
                d.button_text,
                style={"background-color": s.button_bg, "color": s.button_text_color},
                attrs={"href": d.destination_url},
            ),
        ),
    )


# ── Listes ──────────────────────────────────────────────────────────────────

def feature(b: FeatureBlock, radius: str) -> Element:
    s, d = b.structure, b.seed
    shadow = " shadow-sm" if s.shadow else ""
    card = el(
        "div", f"p-6 {radius}{shadow}",
        el(
            "div", "w-12 h-12 rounded-lg flex items-center justify-center mb-4",
            el("span", "material-symbols-outlined", Ref(var="f", field="icon")),
            style={"background-color": s.icon_bg_color, "color": s.icon_color},
        ),
        el("h3", "text-xl font-bold mb-2", Ref(var="f", field="title"), style=_color(s.feature_title_color)),
        el("p", "", Ref(var="f", field="description"), style=_color(s.feature_desc_color)),
        style={"background-color": s.card_bg_color},
    )
    return el(
        "div", _CONTAINER,
        el(
            "div", "text-center mb-16 max-w-4xl mx-auto",
            el("h2", "text-3xl font-bold mb-4", d.title, style=_color(s.title_color)),
            el("p", "text-lg", d.description, style=_color(s.description_color)),
        ),
        el("div", f"grid {resolve_gap(s.gap)} {resolve_grid_columns(s.grid_cols)}",
           Each(source=d.features, var="f", body=card)),
    )


_PRICING_COLUMNS = {1: "max-w-md mx-auto", 2: "md:grid-cols-2 max-w-4xl mx-auto"}


def pricing(b: PricingBlock, radius: str) -> Element:
    s, d = b.structure, b.seed
    popular = Ref(var="p", field="is_popular")
    feature_row = el(
        "li", "flex items-center gap-2",
        el("span", "", "✔", style=_color(s.accent_color)),
        el("span", "", Ref(var="feature"), style=_color(s.text_color)),
    )
    card = el(
        "div", f"relative p-8 border {radius} flex flex-col",
        When(test=popular, body=el(
            "div",
            "absolute top-0 left-1/2 -translate-x-1/2 -translate-y-1/2 px-3 py-1 text-xs "
            "font-bold text-white rounded-full uppercase tracking-wide",
            Ref(var="p", field="badge_text", fallback="Most Popular"),
            style={"background-color": s.accent_color},
        )),
        el("h3", "text-xl font-bold mb-4", Ref(var="p", field="name"), style=_color(s.text_color)),
        el(
            "div", "text-4xl font-bold mb-6",
            Ref(var="p", field="price"),
            el("span", "text-lg opacity-70", Ref(var="p", field="period")),
            style=_color(s.text_color),
        ),
        el("ul", "mb-8 space-y-3 flex-1",
           Each(source=Ref(var="p", field="features"), var="feature", index="j", body=feature_row)),
        el(
            "a", f"block text-center py-3 {radius} font-bold transition-opacity hover:opacity-90",
            Ref(var="p", field="button_text"),
            style={
                "background-color": Pick(test=popular, then=s.accent_color, otherwise="#f3f4f6"),
                "color": Pick(test=popular, then="#ffffff", otherwise="#1f2937"),
            },
            attrs={"href": Ref(var="p", field="button_url")},
        ),
        style={
            "background-color": s.card_bg,
            "border-color": Pick(test=popular, then=s.accent_color, otherwise="#e5e7eb"),
        },
    )
    columns = _PRICING_COLUMNS.get(len(d.plans), "md:grid-cols-3")
    return el(
        "div", f"{_CONTAINER} py-12",
        el("div", f"grid {columns} gap-8", Each(source=d.plans, var="p", body=card)),
    )


def testimonial(b: TestimonialBlock, radius: str) -> Element:
    s, d = b.structure, b.seed
    slider = s.layout == "slider"
    name_role = el(
        "div", "",
        el("p", "font-bold", Ref(var="item", field="name"), style=_color(s.text_color)),
        el("p", "text-sm opacity-60", Ref(var="item", field="role"), style=_color(s.text_color)),
    )
    avatar = When(
        test=Ref(var="item", field="avatar"),
        body=el("img", "w-12 h-12 rounded-full object-cover",
                attrs={"src": Ref(var="item", field="avatar"), "alt": Ref(var="item", field="name")}),
        otherwise=el("div", "w-12 h-12 rounded-full bg-gray-200 flex items-center justify-center",
                     el("span", "material-symbols-outlined text-gray-400", "person")),
    )
    card = el(
        "div", f"p-8 {radius} shadow-sm border border-gray-100" + (" min-w-[300px] snap-center" if slider else ""),
        el("div", "flex gap-1 mb-4 text-lg", Stars(ref=Ref(var="item", field="rating")),
           style=_color(s.star_color)),
        el("p", "text-lg italic mb-6 opacity-80", '"', Ref(var="item", field="quote"), '"',
           style=_color(s.text_color)),
        el("div", "flex items-center gap-4", avatar, name_role),
        style={"background-color": s.card_bg},
    )
    grid = "flex overflow-x-auto snap-x gap-8" if slider else "grid md:grid-cols-3 gap-8"
    return el("div", _CONTAINER, el("div", grid, Each(source=d.items, var="item", body=card)))


def team(b: TeamBlock, radius: str) -> Element:
    s, d = b.structure, b.seed
    member = el(
        "div", f"text-center p-6 {radius}",
        el("div", "w-40 h-40 mx-auto mb-6 overflow-hidden rounded-full bg-gray-200 shadow-md",
           el("img", "w-full h-full object-cover",
              attrs={"src": Ref(var="m", field="image"), "alt": Ref(var="m", field="name")})),
        el("h3", "text-xl font-bold mb-1", Ref(var="m", field="name"), style=_color(s.text_color)),
        el("p", "text-sm uppercase tracking-wide opacity-70 mb-4", Ref(var="m", field="role"),
           style=_color(s.text_color)),
        el("p", "opacity-80 max-w-xs mx-auto", Ref(var="m", field="bio"), style=_color(s.text_color)),
        style={"background-color": s.card_bg},
    )
    return el(
        "div", _CONTAINER,
        el("h2", "text-4xl font-bold text-center mb-16", d.heading, style=_color(s.text_color)),
        el("div", "grid sm:grid-cols-2 lg:grid-cols-3 gap-12", Each(source=d.members, var="m", body=member)),
    )


def faq(b: FAQBlock, radius: str) -> Element:
    s, d = b.structure, b.seed
    item = el(
        "details", "group p-6 rounded-xl cursor-pointer",
        el(
            "summary", "flex justify-between items-center font-bold list-none",
            el("span", "", Ref(var="item", field="question"), style=_color(s.question_color)),
            el("span", "material-symbols-outlined", "expand_more"),
        ),
        el("div", "mt-4 opacity-90 leading-relaxed", Ref(var="item", field="answer"),
           style=_color(s.answer_color)),
        style={"background-color": s.card_bg},
    )
    return el(
        "div", f"{_CONTAINER} max-w-3xl",
        el("h2", "text-3xl font-bold text-center mb-12", d.heading, style=_color(s.question_color)),
        el("div", "space-y-4", Each(source=d.items, var="item", body=item)),
    )


def footer(b: FooterBlock, radius: str) -> Element:
    s, d = b.structure, b.seed
    social = el("a", "capitalize", Ref(var="link", field="platform"),
                style=_color(s.icon_color), attrs={"href": Ref(var="link", field="url")})
    return el(
        "div", f"{_CONTAINER} py-8 flex flex-col md:flex-row justify-between items-center gap-4",
        el("div", "", d.copyright_text, style=_color(s.text_color)),
        el("div", "flex gap-4", Each(source=d.social_links, var="link", body=social)),
    )


# ── Contenu ─────────────────────────────────────────────────────────────────

_SPLIT_WIDTHS = {
    "50-50": ("md:w-1/2", "md:w-1/2"),
    "40-60": ("md:w-2/5", "md:w-3/5"),
    "60-40": ("md:w-3/5", "md:w-2/5"),
}


def split(b: SplitBlock, radius: str) -> Element:
    s, d = b.structure, b.seed
    text_w, image_w = _SPLIT_WIDTHS.get(s.split_ratio, _SPLIT_WIDTHS["50-50"])
    order = "md:flex-row" if s.image_side == "right" else "md:flex-row-reverse"
    return el(
        "div", f"{_CONTAINER} py-12",
        el(
            "div", f"flex flex-col {order} items-center gap-12",
            el(
                "div", f"w-full {text_w}",
                el("h2", "text-3xl font-bold mb-4", d.title, style=_color(s.text_color)),
                el("div", "", style=_color(s.text_color), raw_html=d.content),
            ),
            el("div", f"w-full {image_w}",
               el("img", "rounded-lg shadow-xl w-full", attrs={"src": d.image_url, "alt": d.title or "Split"})),
        ),
    )


def map_(b: MapBlock, radius: str) -> Element:
    s, d = b.structure, b.seed
    src = f"https://maps.google.com/maps?q={quote(d.address)}&z={s.zoom}&output=embed"
    return el(
        "div", _CONTAINER,
        el(
            "div", "w-full rounded-xl overflow-hidden shadow-md",
            el("iframe", "", attrs={
                "src": src, "title": d.address or "Map",
                "width": "100%", "height": "100%", "frameborder": "0", "loading": "lazy",
            }),
            style={"height": f"{s.height}px"},
        ),
    )


def form(b: FormBlock, radius: str) -> Element:
    s, d = b.structure, b.seed
    bg = b.background
    card_bg = bg.color if isinstance(bg, SolidBackground) and bg.color != "transparent" else "#ffffff"
    input_style = {"background-color": s.input_bg, "border-color": s.input_border_color}
    field = el(
        "div", "flex flex-col gap-1",
        el("label", "font-semibold text-sm", Ref(var="f", field="label"), style=_color(s.text_color)),
        When(
            test=Eq(ref=Ref(var="f", field="type"), value="textarea"),
            body=el("textarea", "w-full p-3 rounded border", style=input_style, attrs={
                "placeholder": Ref(var="f", field="placeholder"),
                "required": Ref(var="f", field="required"),
            }),
            otherwise=el("input", "w-full p-3 rounded border", style=input_style, attrs={
                "type": Ref(var="f", field="type"),
                "placeholder": Ref(var="f", field="placeholder"),
                "required": Ref(var="f", field="required"),
            }),
        ),
    )
    return el(
        "div", _CONTAINER,
        el(
            "div", "max-w-2xl mx-auto p-8 rounded-xl" + (" shadow-2xl" if s.box_shadow else ""),
            el(
                "div", "text-center mb-10",
                el("h2", "text-3xl font-bold mb-2", d.title, style=_color(s.text_color)),
                el("p", "", d.subtitle, style=_color(s.text_color)),
            ),
            el(
                "form", "space-y-6",
                Each(source=d.fields, var="f", body=field),
                el("button", f"w-full py-4 font-bold {radius} shadow-lg hover:shadow-xl", d.submit_text,
                   style={"background-color": s.button_bg, "color": s.button_text_color},
                   attrs={"type": "submit"}),
            ),
            style={"background-color": card_bg},
        ),
    )


_IMAGE_WIDTH = {"full": "w-full", "auto": "max-w-5xl", "50%": "w-1/2", "75%": "w-3/4"}


def image(b: ImageBlock, radius: str) -> Element:
    s, d = b.structure, b.seed
    aspect = "h-auto" if s.aspect_ratio == "auto" else f"aspect-[{s.aspect_ratio}] object-cover"
    shadow = " shadow-lg" if s.shadow else ""
    return el(
        "div", f"{_CONTAINER} text-{s.align}",
        el(
            "figure", f"inline-block {_IMAGE_WIDTH.get(s.width, 'w-full')}",
            el("img", f"w-full {aspect} {radius}{shadow}", attrs={"src": d.url, "alt": d.alt}),
            d.caption and el("figcaption", "mt-2 text-center text-sm text-gray-500", d.caption),
        ),
    )


def text(b: TextBlock, radius: str) -> Element:
    s, d = b.structure, b.seed
    return el(
        "div", _CONTAINER,
        el(s.tag, f"text-{s.font_size}", raw_html=d.content, style={
            "text-align": s.align,
            "font-weight": resolve_font_weight(s.font_weight),
            "color": s.color,
        }),
    )


def button(b: ButtonBlock, radius: str) -> Element:
    s, d = b.structure, b.seed
    if s.variant == "solid":
        style = {"background-color": s.button_bg, "color": s.button_color, "border": "none"}
    elif s.variant == "outline":
        style = {"background-color": "transparent", "color": s.button_bg, "border": f"2px solid {s.button_bg}"}
    else:
        style = {"background-color": "transparent", "color": s.button_bg, "border": "none"}
    full = " w-full text-center" if s.width == "full" else ""
    return el(
        "div", f"{_CONTAINER} flex justify-{resolve_justify(s.align)}",
        el("a", f"inline-block px-6 py-3 font-bold transition-opacity hover:opacity-80 {radius}{full}",
           d.text, style=style, attrs={"href": d.url}),
    )


_LINE_WIDTH = {"full": "100%", "short": "20%", "middle": "50%"}


def divider(b: DividerBlock, radius: str) -> Element:
    s = b.structure
    line = None
    if s.show_line:
        line = el("div", "", style={
            "height": "1px",
            "background-color": s.line_color,
            "width": _LINE_WIDTH.get(s.line_width, "100%"),
            "margin": "0 auto",
        })
    return el("div", f"{_CONTAINER} {resolve_padding(s.height, 'y')}", line)


def placeholder(b: BaseBlock, radius: str) -> Element:
    """Type sans gabarit : section générique, jamais d'erreur."""
    return el("div", f"{_CONTAINER} py-12",
              el("h2", "text-2xl font-bold", f"Block Type: {b.block_type}"))


TEMPLATES: Dict[str, Template] = {
    "navigation":  navigation,
    "hero":        hero,
    "feature":     feature,
    "cta":         cta,
    "footer":      footer,
    "split":       split,
    "map":         map_,
    "form":        form,
    "image":       image,
    "text":        text,
    "button":      button,
    "divider":     divider,
    "pricing":     pricing,
    "testimonial": testimonial,
    "team":        team,
    "faq":         faq,
}


# ── Construction IR ─────────────────────────────────────────────────────────

def resolve_block_radius(block: BaseBlock):
    """Token de rayon du bloc, None si le type n'en porte pas."""
    field = _RADIUS_FIELD.get(block.block_type)
    if field is None:
        return None
    return resolve_radius(getattr(getattr(block, "structure", None), field, None))


def build_block_ir(block: BaseBlock) -> BlockIR:
    template = TEMPLATES.get(block.block_type)
    if template is None:
        log.debug("Pas de gabarit pour %r : section générique", block.block_type)
        template = placeholder
    radius = resolve_block_radius(block)
    return BlockIR(
        block_type=block.block_type,
        instance_id=block.instance_id,
        anchor_id=block.anchor_id or None,
        background=resolve_background(block.background),
        padding_top=resolve_padding(block.padding_top, "top"),
        padding_bottom=resolve_padding(block.padding_bottom, "bottom"),
        animation=resolve_animation_class(block.animation),
        radius=radius,
        content=template(block, radius or resolve_radius(None)),
    )


def build_page_ir(document) -> List[BlockIR]:
    """Document → une BlockIR par bloc, dans l'ordre du document."""
    return [build_block_ir(block) for block in document.blocks]
