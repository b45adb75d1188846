"""
Regex patterns and vocabulary tables for query understanding.

Everything here is plain data evaluated in list order, so "first match
wins" is simply the order entries appear in.
"""

import re
from typing import NamedTuple, Optional


# === Guard Patterns ===

# Attempts to pull hidden instructions or credentials out of the bot.
# Matched anywhere in the lower-cased message, not as whole phrases.
ADVERSARIAL_PATTERNS = [
    r'api ?key',
    r'reveal',
    r'system prompt',
    r'ignore instructions',
]

REFUSAL_MESSAGE = (
    "Sorry, I can't process that request. "
    "Let's find a great phone for you instead!"
)


# === FAQ Patterns ===

class FaqEntry(NamedTuple):
    """A canned answer for an educational question."""
    topic: str
    pattern: str
    answer: str


# Priority order: first matching entry answers the question.
FAQ_ENTRIES = [
    FaqEntry(
        topic="stabilization",
        pattern=r'ois.*eis|eis.*ois|optical.*electronic|electronic.*optical',
        answer=(
            "OIS (Optical Image Stabilization) is hardware-based and helps keep "
            "photos sharp by physically moving the lens. EIS (Electronic Image "
            "Stabilization) uses software to reduce video shake. OIS is great for "
            "low-light photos. Want phones with OIS? Just ask!"
        ),
    ),
    FaqEntry(
        topic="display_panel",
        pattern=r'amoled\s+(?:vs\.?|versus|or)\s+lcd|lcd\s+(?:vs\.?|versus|or)\s+amoled',
        answer=(
            "AMOLED panels light each pixel individually, so you get true blacks, "
            "punchy colours and better battery life with dark themes. LCD panels use "
            "a backlight, which usually means lower cost and more accurate whites. "
            "Want phones with an AMOLED display? Just ask!"
        ),
    ),
    FaqEntry(
        topic="refresh_rate",
        pattern=r'what(?:\'s|\s+is)\s+(?:a\s+|the\s+)?refresh\s+rate',
        answer=(
            "Refresh rate is how many times per second the screen redraws, measured "
            "in Hz. A 120Hz display feels smoother when scrolling and gaming than a "
            "60Hz one, at a small cost in battery. Want phones with a high refresh "
            "rate display? Just ask!"
        ),
    ),
]


# === Brand / Feature Vocabulary ===

# List order decides which brand wins when several are mentioned
BRANDS = [
    "samsung",
    "apple",
    "redmi",
    "realme",
    "vivo",
    "iqoo",
    "nothing",
    "google",
    "oneplus",
]

# Every keyword found becomes a required predicate
FEATURE_KEYWORDS = [
    "gaming",
    "students",
    "camera",
    "battery",
    "ram",
    "storage",
    "waterproof",
    "5g",
    "budget",
    "photography",
    "amoled",
    "display",
    "charger",
    "performance",
    "compact",
    "lightweight",
]


# === Budget / Memory Patterns ===

# One alternative per phrasing; the first group that matched holds the ceiling
BUDGET_PATTERN = re.compile(
    r'under\s*₹?\s*([0-9]{3,6})'
    r'|below\s*₹?\s*([0-9]{3,6})'
    r'|less than\s*₹?\s*([0-9]{3,6})'
)

RAM_PATTERN = re.compile(r'(\d+)\s*gb ram')
STORAGE_PATTERN = re.compile(r'(\d+)\s*gb storage')


# === Detail Request Phrases ===

DETAIL_PHRASES = [
    "i like this phone",
    "more details",
    "tell me more",
]


# === Helper Functions ===

def has_pattern(text: str, patterns: list[str]) -> bool:
    """
    Check if text matches any pattern in list.

    Args:
        text: Text to check (case-insensitive)
        patterns: List of regex patterns

    Returns:
        True if any pattern matches
    """
    text_lower = text.lower()
    return any(re.search(pattern, text_lower) for pattern in patterns)


def match_faq(text: str) -> Optional[FaqEntry]:
    """Return the first FAQ entry whose pattern matches, or None."""
    text_lower = text.lower()
    for entry in FAQ_ENTRIES:
        if re.search(entry.pattern, text_lower):
            return entry
    return None


def find_faq_entry(topic: str) -> Optional[FaqEntry]:
    """Look up a FAQ entry by topic name."""
    for entry in FAQ_ENTRIES:
        if entry.topic == topic:
            return entry
    return None
