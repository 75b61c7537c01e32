"""
Catalogue des blocs — une instance canonique par type.

get_template(kind) renvoie une copie profonde et fraîche du gabarit,
sans instance_id. create_block(kind) y ajoute un identifiant neuf.
"""
import logging
from typing import Callable, Dict, Optional, Tuple

from ..core.errors import UnknownBlockKind
from ..core.ids import default_id_factory
from ..core.schemas import BLOCK_KINDS
from .base import BaseBlock, GradientBackground, SolidBackground
from .navigation  import NavigationBlock, NavigationSeed, NavLink
from .hero        import HeroBlock, HeroSeed
from .feature     import FeatureBlock, FeatureSeed, FeatureItem
from .cta         import CTABlock, CTASeed
from .footer      import FooterBlock, FooterSeed, SocialLink
from .split       import SplitBlock, SplitSeed
from .map         import MapBlock, MapSeed
from .form        import FormBlock, FormSeed, FormField
from .image       import ImageBlock, ImageStructure, ImageSeed
from .text        import TextBlock, TextSeed
from .button      import ButtonBlock, ButtonSeed
from .divider     import DividerBlock
from .pricing     import PricingBlock, PricingSeed, PricingPlan
from .testimonial import TestimonialBlock, TestimonialSeed, TestimonialItem
from .team        import TeamBlock, TeamSeed, TeamMember
from .faq         import FAQBlock, FAQSeed, FAQItem

log = logging.getLogger(__name__)


# ── Gabarits ────────────────────────────────────────────────────────────────

_TEMPLATES: Dict[str, BaseBlock] = {
    "navigation": NavigationBlock(
        id="nav", anchor_id="nav",
        background=SolidBackground(color="#FFFFFF"),
        padding_top="sm", padding_bottom="sm",
        seed=NavigationSeed(
            logo_text="Brand",
            logo_image="https://placehold.co/120x40",
            links=[
                NavLink(id="n1", label="Home", href="#"),
                NavLink(id="n2", label="About", href="#about"),
                NavLink(id="n3", label="Services", href="#services"),
            ],
            button_text="Get Started",
        ),
    ),
    "hero": HeroBlock(
        id="hero", anchor_id="hero",
        padding_top="xl", padding_bottom="xl",
        seed=HeroSeed(
            heading="Build Your Next Idea Faster",
            subheading="The perfect starting point for your next project.",
            button1_text="Get Started",
            button2_text="Learn More",
        ),
    ),
    "feature": FeatureBlock(
        id="feature", anchor_id="features",
        seed=FeatureSeed(
            title="Everything you need",
            description="Possimus magnam voluptatum cupiditate veritatis in.",
            features=[
                FeatureItem(id="f1", title="Push to deploy",
                            description="Maiores impedit perferendis suscipit eaque.", icon="cloud_upload"),
                FeatureItem(id="f2", title="SSL certificates",
                            description="Anim aute id magna aliqua ad ad non deserunt sunt.", icon="lock"),
            ],
        ),
    ),
    "cta": CTABlock(
        id="cta", anchor_id="cta",
        background=GradientBackground(),
        padding_top="xl", padding_bottom="xl",
        seed=CTASeed(
            heading="Ready to dive in?",
            subtext="Start your free trial today.",
            button_text="Get Started Now",
        ),
    ),
    "footer": FooterBlock(
        id="footer", anchor_id="footer",
        background=SolidBackground(color="#111827"),
        padding_top="lg", padding_bottom="lg",
        seed=FooterSeed(
            copyright_text="© 2024 Company. All rights reserved.",
            social_links=[
                SocialLink(id="s1", platform="twitter", url="#"),
                SocialLink(id="s2", platform="instagram", url="#"),
            ],
        ),
    ),
    "split": SplitBlock(
        id="split", anchor_id="split",
        seed=SplitSeed(
            title="Share your story",
            content="Lorem ipsum dolor sit amet, consectetur adipiscing elit.",
            image_url="https://images.unsplash.com/photo-1522202176988-66273c2fd55f?auto=format&fit=crop&w=800&q=80",
        ),
    ),
    "map": MapBlock(
        id="map", anchor_id="location",
        seed=MapSeed(address="New York, NY"),
    ),
    "form": FormBlock(
        id="form", anchor_id="contact",
        background=SolidBackground(color="var(--color-bg)"),
        seed=FormSeed(
            title="Contact Us",
            subtitle="We would love to hear from you.",
            fields=[
                FormField(id="f1", type="text", label="Name", placeholder="Your Name", required=True),
                FormField(id="f2", type="email", label="Email", placeholder="your@email.com", required=True),
                FormField(id="f3", type="textarea", label="Message", placeholder="How can we help?", required=True),
            ],
            submit_text="Send Message",
        ),
    ),
    "image": ImageBlock(
        id="img", anchor_id="",
        structure=ImageStructure(aspect_ratio="16/9"),
        seed=ImageSeed(
            url="https://images.unsplash.com/photo-1497215728101-856f4ea42174?auto=format&fit=crop&w=1000&q=80",
            alt="Office",
            caption="Our space",
        ),
    ),
    "text": TextBlock(
        id="txt", anchor_id="",
        seed=TextSeed(content="Start editing this text"),
    ),
    "button": ButtonBlock(
        id="btn", anchor_id="",
        seed=ButtonSeed(text="Click Me"),
    ),
    "divider": DividerBlock(
        id="div", anchor_id="",
        padding_top="none", padding_bottom="none",
    ),
    "pricing": PricingBlock(
        id="pricing", anchor_id="pricing",
        seed=PricingSeed(plans=[
            PricingPlan(id="p1", name="Basic", price="$9", period="/mo",
                        features=["5 Projects", "Basic Analytics"],
                        button_text="Choose", badge_text="Most Popular"),
            PricingPlan(id="p2", name="Pro", price="$29", period="/mo",
                        features=["Unlimited Projects", "Adv Analytics", "Priority Support"],
                        button_text="Choose", is_popular=True, badge_text="Best Value"),
            PricingPlan(id="p3", name="Enterprise", price="$99", period="/mo",
                        features=["Custom Solutions", "24/7 Support"],
                        button_text="Contact", badge_text="Most Popular"),
        ]),
    ),
    "testimonial": TestimonialBlock(
        id="testimonial", anchor_id="reviews",
        seed=TestimonialSeed(items=[
            TestimonialItem(id="t1", name="Jane Doe", role="CEO, TechCo",
                            quote="This builder saved me hours of work. Highly recommended!", rating=5),
            TestimonialItem(id="t2", name="John Smith", role="Developer",
                            quote="Clean code and easy to use. A game changer.", rating=4),
        ]),
    ),
    "team": TeamBlock(
        id="team", anchor_id="team",
        seed=TeamSeed(
            heading="Meet Our Team",
            members=[
                TeamMember(id="m1", name="Alex Johnson", role="Founder",
                           image="https://i.pravatar.cc/150?u=a", bio="Visionary leader."),
                TeamMember(id="m2", name="Sarah Williams", role="CTO",
                           image="https://i.pravatar.cc/150?u=b", bio="Tech wizard."),
                TeamMember(id="m3", name="Mike Brown", role="Designer",
                           image="https://i.pravatar.cc/150?u=c", bio="Creative mind."),
            ],
        ),
    ),
    "faq": FAQBlock(
        id="faq", anchor_id="faq",
        seed=FAQSeed(
            heading="Frequently Asked Questions",
            items=[
                FAQItem(id="q1", question="Is it free?", answer="Yes, there is a free tier available."),
                FAQItem(id="q2", question="Can I export code?",
                        answer="Absolutely! You can export HTML and React code."),
            ],
        ),
    ),
}


# ── API ─────────────────────────────────────────────────────────────────────

def list_kinds() -> Tuple[str, ...]:
    """Types de blocs disponibles, dans l'ordre du catalogue."""
    return BLOCK_KINDS


def get_template(kind: str) -> BaseBlock:
    """
    Copie profonde du gabarit canonique d'un type de bloc.

    Raises:
        UnknownBlockKind: type hors du catalogue
    """
    try:
        template = _TEMPLATES[kind]
    except KeyError:
        raise UnknownBlockKind(kind) from None
    return template.model_copy(deep=True)


def create_block(kind: str, id_factory: Optional[Callable[[], str]] = None) -> BaseBlock:
    """Gabarit + instance_id neuf."""
    instance_id = (id_factory or default_id_factory)()
    log.debug("Création bloc %s (%s)", kind, instance_id)
    return get_template(kind).model_copy(update={"instance_id": instance_id})
