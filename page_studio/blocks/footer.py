"""Bloc Footer — copyright + liens sociaux."""
from typing import Literal, Tuple

from ..core.schemas import BlockItem
from .base import BaseBlock, BlockStructure, BlockSeed

SocialPlatform = Literal[
    "facebook", "twitter", "instagram", "linkedin", "github",
    "youtube", "tiktok", "website", "email", "phone",
]


class SocialLink(BlockItem):
    platform: SocialPlatform = "website"
    url: str = "#"


class FooterStructure(BlockStructure):
    text_color: str = "#D1D5DB"
    icon_color: str = "#9CA3AF"


class FooterSeed(BlockSeed):
    copyright_text: str = ""
    social_links: Tuple[SocialLink, ...] = ()


class FooterBlock(BaseBlock):
    block_type: Literal["footer"] = "footer"
    structure: FooterStructure = FooterStructure()
    seed: FooterSeed = FooterSeed()
