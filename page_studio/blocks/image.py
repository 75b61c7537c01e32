"""Bloc Image — figure simple avec légende."""
from typing import Literal

from ..core.schemas import Align, Radius
from .base import BaseBlock, BlockStructure, BlockSeed


class ImageStructure(BlockStructure):
    width: Literal["auto", "full", "50%", "75%"] = "full"
    align: Align = "center"
    border_radius: Radius = "lg"
    shadow: bool = True
    aspect_ratio: Literal["auto", "1/1", "16/9", "4/3", "3/4"] = "auto"


class ImageSeed(BlockSeed):
    url: str = ""
    alt: str = ""
    caption: str = ""


class ImageBlock(BaseBlock):
    block_type: Literal["image"] = "image"
    structure: ImageStructure = ImageStructure()
    seed: ImageSeed = ImageSeed()
