"""Bloc Team — grille de membres."""
from typing import Literal, Tuple

from ..core.schemas import BlockItem, Radius
from .base import BaseBlock, BlockStructure, BlockSeed


class TeamMember(BlockItem):
    name: str = ""
    role: str = ""
    image: str = ""
    bio: str = ""


class TeamStructure(BlockStructure):
    card_bg: str = "#FFFFFF"
    text_color: str = "var(--color-text)"
    radius: Radius = "lg"


class TeamSeed(BlockSeed):
    heading: str = ""
    members: Tuple[TeamMember, ...] = ()


class TeamBlock(BaseBlock):
    block_type: Literal["team"] = "team"
    structure: TeamStructure = TeamStructure()
    seed: TeamSeed = TeamSeed()
