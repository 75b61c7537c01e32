"""Bloc Testimonial — avis clients avec note."""
from typing import Literal, Tuple

from pydantic import Field

from ..core.schemas import BlockItem, Radius
from .base import BaseBlock, BlockStructure, BlockSeed


class TestimonialItem(BlockItem):
    __test__ = False  # pas une classe de test pytest

    name: str = ""
    role: str = ""
    avatar: str = ""
    quote: str = ""
    rating: int = Field(default=5, ge=0, le=5)


class TestimonialStructure(BlockStructure):
    __test__ = False

    layout: Literal["grid", "slider"] = "grid"
    card_bg: str = "#FFFFFF"
    text_color: str = "var(--color-text)"
    star_color: str = "#FBBF24"
    radius: Radius = "lg"


class TestimonialSeed(BlockSeed):
    __test__ = False

    items: Tuple[TestimonialItem, ...] = ()


class TestimonialBlock(BaseBlock):
    __test__ = False

    block_type: Literal["testimonial"] = "testimonial"
    structure: TestimonialStructure = TestimonialStructure()
    seed: TestimonialSeed = TestimonialSeed()
