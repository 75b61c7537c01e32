"""Tests catalogue de blocs — gabarits, copies fraîches, union discriminée."""
import pytest
from pydantic import TypeAdapter, ValidationError

from page_studio.blocks import (
    BLOCK_CLASSES, BlockUnion, CTABlock, FeatureBlock, HeroBlock, PricingPlan,
    GradientBackground, SolidBackground, create_block, get_template, list_kinds,
)
from page_studio.core.errors import UnknownBlockKind
from page_studio.core.ids import IdFactory, to_base36
from page_studio.core.schemas import BLOCK_KINDS


# ── Catalogue ────────────────────────────────────────────────────────────────

def test_catalog_lists_16_kinds():
    assert list_kinds() == BLOCK_KINDS
    assert len(list_kinds()) == 16
    assert set(BLOCK_CLASSES) == set(BLOCK_KINDS)


@pytest.mark.parametrize("kind", BLOCK_KINDS)
def test_template_matches_kind(kind):
    block = get_template(kind)
    assert isinstance(block, BLOCK_CLASSES[kind])
    assert block.block_type == kind
    assert block.instance_id is None


def test_template_is_fresh_copy():
    a, b = get_template("feature"), get_template("feature")
    assert a is not b
    assert a.seed.features is not b.seed.features
    assert a == b


def test_template_defaults():
    hero = get_template("hero")
    assert hero.anchor_id == "hero"
    assert (hero.padding_top, hero.padding_bottom) == ("xl", "xl")
    assert isinstance(get_template("cta").background, GradientBackground)
    assert get_template("footer").background == SolidBackground(color="#111827")
    assert get_template("divider").padding_top == "none"
    plans = get_template("pricing").seed.plans
    assert [p.is_popular for p in plans] == [False, True, False]


def test_unknown_kind_raises_key_error():
    with pytest.raises(UnknownBlockKind) as exc:
        get_template("carousel")
    assert isinstance(exc.value, KeyError)
    assert exc.value.kind == "carousel"
    assert "carousel" in str(exc.value)


def test_create_block_assigns_instance_id():
    block = create_block("hero", id_factory=IdFactory(prefix="blk"))
    assert block.instance_id == "blk-0001"
    assert get_template("hero").instance_id is None


# ── Modèles ──────────────────────────────────────────────────────────────────

def test_block_union_dispatch_on_block_type():
    adapter = TypeAdapter(BlockUnion)
    assert isinstance(adapter.validate_python({"block_type": "hero"}), HeroBlock)
    assert isinstance(adapter.validate_python({"block_type": "cta"}), CTABlock)
    with pytest.raises(ValidationError):
        adapter.validate_python({"block_type": "carousel"})


def test_background_is_tagged_variant():
    block = FeatureBlock(background={"mode": "image", "url": "/bg.jpg"})
    assert block.background.mode == "image"
    with pytest.raises(ValidationError):
        FeatureBlock(background={"mode": "video"})


def test_blocks_are_frozen():
    block = get_template("hero")
    with pytest.raises(ValidationError):
        block.padding_top = "xs"


def test_items_dump_camel_case():
    data = PricingPlan(name="Pro", is_popular=True, badge_text="Hot").model_dump(by_alias=True)
    assert data["isPopular"] is True
    assert data["badgeText"] == "Hot"
    assert PricingPlan(isPopular=True).is_popular is True


# ── Identifiants ─────────────────────────────────────────────────────────────

def test_base36():
    assert to_base36(0) == "0"
    assert to_base36(35) == "z"
    assert to_base36(36) == "10"


def test_id_factory_is_monotonic_and_unique():
    ids = IdFactory(prefix="abc")
    assert ids() == "abc-0001"
    assert ids() == "abc-0002"
    factory = IdFactory()
    generated = {factory() for _ in range(50)}
    assert len(generated) == 50
    assert all(len(i) >= 8 for i in generated)
