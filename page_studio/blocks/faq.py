"""Bloc FAQ — questions/réponses dépliables (<details>)."""
from typing import Literal, Tuple

from ..core.schemas import BlockItem
from .base import BaseBlock, BlockStructure, BlockSeed


class FAQItem(BlockItem):
    question: str = ""
    answer: str = ""


class FAQStructure(BlockStructure):
    question_color: str = "var(--color-text)"
    answer_color: str = "#4B5563"
    card_bg: str = "#F9FAFB"


class FAQSeed(BlockSeed):
    heading: str = ""
    items: Tuple[FAQItem, ...] = ()


class FAQBlock(BaseBlock):
    block_type: Literal["faq"] = "faq"
    structure: FAQStructure = FAQStructure()
    seed: FAQSeed = FAQSeed()
