"""
Blocs — exports publics + BlockUnion discriminé (16 types).
"""
from typing import Annotated, Dict, Type, Union

from pydantic import Field

from .base import (
    BaseBlock, BlockStructure, BlockSeed, Background,
    SolidBackground, GradientBackground, ImageBackground, DEFAULT_GRADIENT,
)
from .navigation  import NavigationBlock, NavigationStructure, NavigationSeed, NavLink
from .hero        import HeroBlock, HeroStructure, HeroSeed
from .feature     import FeatureBlock, FeatureStructure, FeatureSeed, FeatureItem
from .cta         import CTABlock, CTAStructure, CTASeed
from .footer      import FooterBlock, FooterStructure, FooterSeed, SocialLink
from .split       import SplitBlock, SplitStructure, SplitSeed
from .map         import MapBlock, MapStructure, MapSeed
from .form        import FormBlock, FormStructure, FormSeed, FormField
from .image       import ImageBlock, ImageStructure, ImageSeed
from .text        import TextBlock, TextStructure, TextSeed
from .button      import ButtonBlock, ButtonStructure, ButtonSeed
from .divider     import DividerBlock, DividerStructure
from .pricing     import PricingBlock, PricingStructure, PricingSeed, PricingPlan
from .testimonial import TestimonialBlock, TestimonialStructure, TestimonialSeed, TestimonialItem
from .team        import TeamBlock, TeamStructure, TeamSeed, TeamMember
from .faq         import FAQBlock, FAQStructure, FAQSeed, FAQItem

# Union discriminée par block_type — type somme fermé des blocs
BlockUnion = Annotated[
    Union[
        NavigationBlock,
        HeroBlock,
        FeatureBlock,
        CTABlock,
        FooterBlock,
        SplitBlock,
        MapBlock,
        FormBlock,
        ImageBlock,
        TextBlock,
        ButtonBlock,
        DividerBlock,
        PricingBlock,
        TestimonialBlock,
        TeamBlock,
        FAQBlock,
    ],
    Field(discriminator="block_type"),
]

BLOCK_CLASSES: Dict[str, Type[BaseBlock]] = {
    cls.model_fields["block_type"].default: cls
    for cls in (
        NavigationBlock, HeroBlock, FeatureBlock, CTABlock, FooterBlock, SplitBlock,
        MapBlock, FormBlock, ImageBlock, TextBlock, ButtonBlock, DividerBlock,
        PricingBlock, TestimonialBlock, TeamBlock, FAQBlock,
    )
}

from .catalog import get_template, create_block, list_kinds  # noqa: E402

__all__ = [
    # Base
    "BaseBlock", "BlockStructure", "BlockSeed", "Background",
    "SolidBackground", "GradientBackground", "ImageBackground", "DEFAULT_GRADIENT",
    # Blocs
    "NavigationBlock", "NavigationStructure", "NavigationSeed", "NavLink",
    "HeroBlock", "HeroStructure", "HeroSeed",
    "FeatureBlock", "FeatureStructure", "FeatureSeed", "FeatureItem",
    "CTABlock", "CTAStructure", "CTASeed",
    "FooterBlock", "FooterStructure", "FooterSeed", "SocialLink",
    "SplitBlock", "SplitStructure", "SplitSeed",
    "MapBlock", "MapStructure", "MapSeed",
    "FormBlock", "FormStructure", "FormSeed", "FormField",
    "ImageBlock", "ImageStructure", "ImageSeed",
    "TextBlock", "TextStructure", "TextSeed",
    "ButtonBlock", "ButtonStructure", "ButtonSeed",
    "DividerBlock", "DividerStructure",
    "PricingBlock", "PricingStructure", "PricingSeed", "PricingPlan",
    "TestimonialBlock", "TestimonialStructure", "TestimonialSeed", "TestimonialItem",
    "TeamBlock", "TeamStructure", "TeamSeed", "TeamMember",
    "FAQBlock", "FAQStructure", "FAQSeed", "FAQItem",
    # Union + catalogue
    "BlockUnion", "BLOCK_CLASSES",
    "get_template", "create_block", "list_kinds",
]
