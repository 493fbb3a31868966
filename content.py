"""
Static copy for the landing page.
Read-only; rebuilt on every script run.
"""

from dataclasses import dataclass
from typing import Tuple

from components.ui import IconName


@dataclass(frozen=True)
class Service:
    title: str
    description: str
    icon: IconName


@dataclass(frozen=True)
class Testimonial:
    quote: str


@dataclass(frozen=True)
class Feature:
    """Icon + title + description row in the hero card"""
    title: str
    description: str
    icon: IconName


@dataclass(frozen=True)
class IconItem:
    """Icon + text row used by bulleted lists"""
    text: str
    icon: IconName


SERVICES: Tuple[Service, ...] = (
    Service("1:1 Therapy", "Individual therapy sessions", IconName.HEART),
    Service("Couples & Family Therapy", "Couples and family therapy sessions", IconName.CHAT),
    Service("Intuitive Readings", "Intuitive reading sessions", IconName.SPARKLE),
)

# Placeholder quotes until client testimonials are approved for publishing
TESTIMONIALS: Tuple[Testimonial, ...] = (
    Testimonial("TESTIMONIAL"),
    Testimonial("TESTMONIAL"),
    Testimonial("TESTMONIAL"),
)

HERO_KICKER = "Conflict doesn’t have to be your default"
HERO_TITLE = "Are You Stuck in the Same Arguments No Matter What You Say?"
HERO_LEAD = (
    "Here's How You can Finally Feel Heard And Break Out Of That "
    "Cycle Of Constant Fights"
)

HERO_HIGHLIGHTS: Tuple[IconItem, ...] = (
    IconItem("Clear tools for calmer conversations and healthier boundaries", IconName.CHECK),
    IconItem("A supportive, judgment-free space to feel understood and safe", IconName.SHIELD),
    IconItem("Insightful sessions that help you move forward with confidence", IconName.SPARKLE),
)

FOCUS_EYEBROW = "A gentle, structured approach"
FOCUS_TITLE = "What we’ll focus on together"
FOCUS_AREAS: Tuple[Feature, ...] = (
    Feature(
        "Communication",
        "Break repeating patterns and learn how to truly hear each other.",
        IconName.CHAT,
    ),
    Feature(
        "Connection",
        "Rebuild trust, closeness, and a shared sense of “we’re on the same team.”",
        IconName.HEART,
    ),
    Feature(
        "Stability",
        "Create steadier emotional footing so conflict doesn’t run your life.",
        IconName.SHIELD,
    ),
)

NEXT_STEPS: Tuple[IconItem, ...] = (
    IconItem("Send your message using the form.", IconName.CHECK),
    IconItem("We’ll follow up via your chosen contact method.", IconName.CHAT),
    IconItem("We’ll plan the best next step for your situation.", IconName.HEART),
)

FOOTER_TEXT = (
    "Support for individuals, couples, and families ready to break the "
    "cycle and feel heard again."
)
