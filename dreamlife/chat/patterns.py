"""
Deterministic responders for common questions.

Patterns are tried in declaration order and the first match wins. Pricing
is kept separate because the engine checks it as its own, later step.
"""

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class DirectPattern:
    name: str
    regex: re.Pattern
    answer: str


PRICING_KEYWORDS = re.compile(
    r"\b(?:price|prices|pricing|plans?|subscriptions?|subscribe|cost|costs|how much|"
    r"upgrade|downgrade|trial|legend|visionary|explorer|discount|billing)\b"
)

DIRECT_PATTERNS: list[DirectPattern] = [
    DirectPattern(
        name="identity",
        regex=re.compile(
            r"\b(?:are|r) (?:you|u) (?:an? )?(?:ai|bot|robot|human|real|person|chatgpt)\b"
            r"|\bwho (?:are|r) (?:you|u)\b|\bwhat are you\b"
        ),
        answer=(
            "I'm EVE, the AI guide of LAvision. I'm not a human, but I'm here to help you "
            "design your dream life: your Life Blueprint, identity, visualization and your "
            "3D dream world. What would you like to explore?"
        ),
    ),
    DirectPattern(
        name="getting_started",
        regex=re.compile(
            r"\b(?:how (?:do|can|should) i (?:get )?start(?:ed)?|getting started|"
            r"where (?:do|should) i (?:begin|start)|first steps?)\b"
        ),
        answer=(
            "Begin free on Explorer: answer part of the Life Blueprint questionnaire, preview "
            "your base 3D scene, then upgrade whenever you want full interactive "
            "visualization and coaching. Start with the questionnaire; it shapes everything else."
        ),
    ),
    DirectPattern(
        name="feeling_stuck",
        regex=re.compile(
            r"\b(?:i(?:'m| am) (?:so )?(?:stuck|lost|unmotivated|overwhelmed)|"
            r"feel(?:ing)? (?:so )?(?:stuck|lost|unmotivated|overwhelmed)|no motivation|"
            r"don'?t know what i want)\b"
        ),
        answer=(
            "Feeling stuck is often a sign your vision has outgrown your current routine. "
            "Take one minute: picture a single moment of your dream life in detail, then pick "
            "one small action today that the future you would take. Want help revisiting your "
            "Life Blueprint?"
        ),
    ),
    DirectPattern(
        name="career_guidance",
        regex=re.compile(
            r"\b(?:(?:what|which) career|career (?:path|change|advice|guidance)|dream job|"
            r"find my purpose|what should i do with my life)\b"
        ),
        answer=(
            "Start from the life you want, then design the work that fits it. In your Life "
            "Blueprint, describe your dream workday: the people, the environment, the impact. "
            "The careers that match those answers are the ones worth testing with small "
            "experiments."
        ),
    ),
]

PRICING_PATTERN = DirectPattern(
    name="pricing",
    regex=re.compile(
        r"\b(?:price|prices|pricing|plans?|subscriptions?|how much|upgrade|downgrade|"
        r"trial|legend|visionary|explorer|student discount)\b"
    ),
    answer=(
        "Pricing & Plans: Explorer (Free) starts you with a static 3D home scene + partial "
        "Life Blueprint. Visionary ($14.99/mo, 14-day trial) unlocks the full interactive 3D "
        "world, customization, mirror mode (dream body), one vehicle and a future partner "
        "avatar. Legend ($34.99/mo, 14-day trial) adds advanced mirror (body+face+emotions), "
        "a daily AI Dream Coach, dream life video generation and the private Visionaries "
        "Community. Upgrades are instant; downgrades apply next cycle. 50% verified student "
        "discount. Ask if you want a recommendation."
    ),
)


class PatternMatcher:
    """First-match-wins lookup over an ordered pattern list."""

    def __init__(
        self,
        patterns: list[DirectPattern] | None = None,
        pricing: DirectPattern | None = None,
    ):
        self.patterns = DIRECT_PATTERNS if patterns is None else patterns
        self.pricing = PRICING_PATTERN if pricing is None else pricing

    def match(self, lowered: str) -> DirectPattern | None:
        """Return the first intent pattern found in ``lowered``."""
        for pattern in self.patterns:
            if pattern.regex.search(lowered):
                return pattern
        return None

    def match_pricing(self, lowered: str) -> DirectPattern | None:
        if self.pricing.regex.search(lowered):
            return self.pricing
        return None
