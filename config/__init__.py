"""Configuration for Phone Finder."""

from config.patterns import (
    ADVERSARIAL_PATTERNS,
    REFUSAL_MESSAGE,
    FAQ_ENTRIES,
    FaqEntry,
    BRANDS,
    FEATURE_KEYWORDS,
    BUDGET_PATTERN,
    RAM_PATTERN,
    STORAGE_PATTERN,
    DETAIL_PHRASES,
    has_pattern,
    match_faq,
    find_faq_entry,
)
from config.settings import Settings, get_settings, load_settings

__all__ = [
    "ADVERSARIAL_PATTERNS",
    "REFUSAL_MESSAGE",
    "FAQ_ENTRIES",
    "FaqEntry",
    "BRANDS",
    "FEATURE_KEYWORDS",
    "BUDGET_PATTERN",
    "RAM_PATTERN",
    "STORAGE_PATTERN",
    "DETAIL_PHRASES",
    "has_pattern",
    "match_faq",
    "find_faq_entry",
    "Settings",
    "get_settings",
    "load_settings",
]
