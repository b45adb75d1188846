"""
Intent extraction for Phone Finder.

Turns a free-text message into a QueryIntent using fixed keyword tables
and regexes. No learned model is involved, so the same text always
produces the same intent.
"""

from typing import Optional

from core.context import QueryIntent
from core.structured_logging import get_logger
from config.patterns import (
    ADVERSARIAL_PATTERNS,
    BRANDS,
    BUDGET_PATTERN,
    DETAIL_PHRASES,
    FEATURE_KEYWORDS,
    RAM_PATTERN,
    STORAGE_PATTERN,
    has_pattern,
    match_faq,
)

# Module-level logger
_logger = get_logger("core.intent")


class IntentExtractor:
    """
    Extracts a QueryIntent from a user message.

    Checks run in priority order:
    1. Guard - adversarial messages stop here
    2. FAQ - canned questions stop here
    3. Brand, budget, feature keywords, RAM/storage, detail flag

    Example:
        extractor = IntentExtractor()
        intent = extractor.extract("samsung phone under 20000")
        # Returns: QueryIntent(brand="samsung", budget_ceiling=20000, ...)
    """

    def extract(self, text: str) -> QueryIntent:
        """
        Build the intent for one message.

        Args:
            text: Raw user message

        Returns:
            QueryIntent with every detected signal set
        """
        text_lower = text.lower()

        if self.is_adversarial(text_lower):
            _logger.info(
                "Adversarial message blocked",
                extra={"event": "guard_triggered", "user_query": text}
            )
            return QueryIntent(is_adversarial=True)

        faq = match_faq(text_lower)
        if faq:
            return QueryIntent(faq_topic=faq.topic)

        intent = QueryIntent(
            brand=self.extract_brand(text_lower),
            budget_ceiling=self.extract_budget(text_lower),
            wanted_features=self.extract_features(text_lower),
            ram_gb=self._extract_amount(RAM_PATTERN, text_lower),
            storage_gb=self._extract_amount(STORAGE_PATTERN, text_lower),
            wants_detail=self.wants_detail(text_lower),
        )

        _logger.debug(
            "Intent extracted",
            extra={
                "event": "intent_extracted",
                "query_kind": intent.kind.value,
                "filters": intent.to_log_dict(),
            }
        )
        return intent

    # === Detection Methods ===

    def is_adversarial(self, text: str) -> bool:
        """Check if text tries to extract hidden instructions or keys."""
        return has_pattern(text, ADVERSARIAL_PATTERNS)

    def extract_brand(self, text: str) -> Optional[str]:
        """Return the first supported brand (in list order) found in text."""
        text = text.lower()
        for brand in BRANDS:
            if brand in text:
                return brand
        return None

    def extract_budget(self, text: str) -> Optional[int]:
        """
        Extract a budget ceiling from "under/below/less than N".

        Only 3-6 digit amounts are recognized; an optional ₹ may precede
        the number.
        """
        match = BUDGET_PATTERN.search(text.lower())
        if not match:
            return None
        amount = next(g for g in match.groups() if g is not None)
        return int(amount)

    def extract_features(self, text: str) -> tuple[str, ...]:
        """Return every feature keyword found in text, in vocabulary order."""
        text = text.lower()
        return tuple(word for word in FEATURE_KEYWORDS if word in text)

    def wants_detail(self, text: str) -> bool:
        """Check if the user asked for more details."""
        text = text.lower()
        return any(phrase in text for phrase in DETAIL_PHRASES)

    def _extract_amount(self, pattern, text: str) -> Optional[str]:
        # Digits stay as typed; "08" must not collapse to "8"
        match = pattern.search(text)
        return match.group(1) if match else None
