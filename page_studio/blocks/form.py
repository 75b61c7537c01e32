"""Bloc Form — formulaire de contact."""
from typing import Literal, Tuple

from ..core.schemas import BlockItem, Radius
from .base import BaseBlock, BlockStructure, BlockSeed


class FormField(BlockItem):
    type: Literal["text", "email", "textarea", "number", "select"] = "text"
    label: str = ""
    placeholder: str = ""
    required: bool = False


class FormStructure(BlockStructure):
    text_color: str = "var(--color-text)"
    input_bg: str = "#FFFFFF"
    input_border_color: str = "#E5E7EB"
    button_bg: str = "var(--color-primary)"
    button_text_color: str = "#FFFFFF"
    button_radius: Radius = "md"
    box_shadow: bool = True


class FormSeed(BlockSeed):
    title: str = ""
    subtitle: str = ""
    fields: Tuple[FormField, ...] = ()
    submit_text: str = "Send"


class FormBlock(BaseBlock):
    block_type: Literal["form"] = "form"
    structure: FormStructure = FormStructure()
    seed: FormSeed = FormSeed()
