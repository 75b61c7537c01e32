"""Bloc Map — carte Google Maps intégrée."""
from typing import Literal

from pydantic import Field

from .base import BaseBlock, BlockStructure, BlockSeed


class MapStructure(BlockStructure):
    height: int = Field(default=400, gt=0)
    zoom: int = Field(default=12, ge=1, le=21)


class MapSeed(BlockSeed):
    address: str = ""


class MapBlock(BaseBlock):
    block_type: Literal["map"] = "map"
    structure: MapStructure = MapStructure()
    seed: MapSeed = MapSeed()
