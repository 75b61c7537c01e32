"""Tests IR — expressions évaluées en Python et traduites en JS."""
import pytest

from page_studio.blocks import BaseBlock, PricingPlan, TestimonialItem, get_template
from page_studio.renderer.ir import Eq, Expr, Pick, Ref, Stars, Text, el, js_literal
from page_studio.renderer.templates import build_block_ir


def test_ref_with_fallback():
    ref = Ref(var="p", field="badge_text", fallback="Most Popular")
    assert ref.evaluate({"p": PricingPlan()}) == "Most Popular"
    assert ref.evaluate({"p": PricingPlan(badge_text="Hot")}) == "Hot"
    assert ref.to_js() == '(p.badgeText || "Most Popular")'


def test_eq_and_pick():
    test = Eq(ref=Ref(var="f", field="type"), value="textarea")
    assert test.to_js() == 'f.type === "textarea"'
    pick = Pick(test=Ref(var="p", field="is_popular"), then="#f00", otherwise="#eee")
    assert pick.evaluate({"p": PricingPlan(is_popular=True)}) == "#f00"
    assert pick.to_js() == '(p.isPopular ? "#f00" : "#eee")'


def test_stars():
    stars = Stars(ref=Ref(var="item", field="rating"))
    assert stars.evaluate({"item": TestimonialItem(rating=3)}) == "★★★☆☆"
    assert stars.evaluate({"item": TestimonialItem(rating=0)}) == "★★★★★"
    assert "'★'.repeat(" in stars.to_js()


def test_el_skips_empty_children():
    node = el("div", "x", None, False, "", "texte")
    assert node.children == [Text(value="texte")]


def test_js_literal_uses_camel_case():
    assert js_literal([PricingPlan(name="Pro", is_popular=True)]).startswith('[{"id": "", "name": "Pro"')
    assert '"isPopular": true' in js_literal([PricingPlan(is_popular=True)])


def test_block_ir_resolves_styles():
    ir = build_block_ir(get_template("hero").model_copy(update={"animation": "zoom-in"}))
    assert ir.padding_top == "pt-48"
    assert ir.radius == "rounded-lg"
    assert ir.section_classes == "pt-48 pb-48 animate__animated animate__zoomIn"
    assert ir.background == {"background-color": "transparent"}


def test_block_without_radius_field():
    assert build_block_ir(get_template("faq")).radius is None


def test_unknown_kind_uses_placeholder():
    ir = build_block_ir(BaseBlock(block_type="carousel"))
    assert ir.content.children[0].children == [Text(value="Block Type: carousel")]


def test_expr_is_abstract():
    with pytest.raises(TypeError):
        Expr()
