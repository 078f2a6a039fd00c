"""
Lexical scope policy for incoming questions.
"""

import re

from dreamlife.chat.patterns import DIRECT_PATTERNS, PRICING_KEYWORDS

GREETING = re.compile(r"^(?:hi|hey|hello|help)\b")

# Checked before anything topical; a hit always rejects. Words that are
# also everyday English ("react", "code", "vote") only count in a
# technical or electoral phrase.
HARD_BLOCK_PATTERNS: list[re.Pattern] = [
    # programming
    re.compile(
        r"\b(?:javascript|typescript|python|php|html|css|sql|programming|coding|"
        r"source code|debug(?:ging)?|compiler|algorithms?|api endpoints?|"
        r"java (?:programming|code|class|developer)|react (?:components?|hooks?|native)|"
        r"reactjs|node\.?js)\b|\bc(?:\+\+|#)"
    ),
    # politics
    re.compile(
        r"\b(?:politics?|political|elections?|presidential|president of|democrats?|"
        r"republicans?|parliament|senate|congress|vote for|voting for)\b"
    ),
    # medical diagnosis
    re.compile(
        r"\b(?:diagnos[ei]s|diagnose|symptoms of|covid|vaccines?|prescriptions?|"
        r"medications?|dosage|cancer|diabetes|infection)\b"
    ),
    # gambling / crypto
    re.compile(
        r"\b(?:casino|gambling|gamble|betting|poker|lottery|sportsbook|bitcoin|crypto|"
        r"cryptocurrency|ethereum|nft|forex)\b"
    ),
]

DOMAIN_VOCABULARY = re.compile(
    r"\b(?:dream|lucid|blueprint|visuali[sz]|vision|identit|values?\b|imagin|world|"
    r"3d\b|manifest|missions?\b|mirror|avatar|environment|energy|align|questionnaire|"
    r"coach|eve\b|lavision|life design|habits?\b|mindset|affirmation|purpose|career|"
    r"ai\b|bot\b|stuck|motivat|overwhelm|get started|getting started)"
)


class ScopeFilter:
    """
    Decides whether a question belongs to the platform's domain.

    Order: hard block, trivial input, greeting, direct intent, pricing,
    domain vocabulary. Every direct intent is accepted so the engine's
    deterministic answers stay reachable.
    """

    def __init__(
        self,
        hard_block_patterns: list[re.Pattern] | None = None,
        domain_vocabulary: re.Pattern | None = None,
        pricing_keywords: re.Pattern | None = None,
        intent_patterns: list[re.Pattern] | None = None,
    ):
        self.hard_block_patterns = (
            HARD_BLOCK_PATTERNS if hard_block_patterns is None else hard_block_patterns
        )
        self.domain_vocabulary = domain_vocabulary or DOMAIN_VOCABULARY
        self.pricing_keywords = pricing_keywords or PRICING_KEYWORDS
        self.intent_patterns = (
            [p.regex for p in DIRECT_PATTERNS] if intent_patterns is None else intent_patterns
        )

    def is_hard_blocked(self, question: str) -> bool:
        lowered = question.strip().lower()
        return any(p.search(lowered) for p in self.hard_block_patterns)

    def is_in_scope(self, question: str) -> bool:
        lowered = question.strip().lower()

        if any(p.search(lowered) for p in self.hard_block_patterns):
            return False
        if len(lowered) <= 2:
            return True
        if GREETING.search(lowered):
            return True
        if any(p.search(lowered) for p in self.intent_patterns):
            return True
        if self.pricing_keywords.search(lowered):
            return True
        return self.domain_vocabulary.search(lowered) is not None
