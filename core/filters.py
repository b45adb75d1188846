"""
Catalog filtering for Phone Finder.

Applies a QueryIntent to the catalog. All set dimensions must hold
(logical AND); unset dimensions impose no constraint.

Matching is loose: feature keywords and RAM/storage amounts
are plain substring checks against the record's text, so "8" also matches
"128GB".
"""

from typing import Iterable

from core.context import PhoneRecord, QueryIntent
from core.structured_logging import get_logger

# Module-level logger
_logger = get_logger("core.filters")


class PhoneFilter:
    """
    Selects the phones consistent with an intent.

    Example:
        phone_filter = PhoneFilter()
        matches = phone_filter.apply(catalog, intent)
        # Returns: tuple of PhoneRecord in catalog order
    """

    def apply(self, catalog: Iterable[PhoneRecord], intent: QueryIntent) -> tuple[PhoneRecord, ...]:
        """
        Filter the catalog.

        Args:
            catalog: Phones in catalog order
            intent: Extracted query intent

        Returns:
            Matching phones, catalog order preserved
        """
        results = tuple(phone for phone in catalog if self.matches(phone, intent))
        _logger.debug(
            f"Filtered catalog to {len(results)} phones",
            extra={
                "event": "catalog_filtered",
                "filters": intent.to_log_dict(),
                "products_found": len(results),
            }
        )
        return results

    def matches(self, phone: PhoneRecord, intent: QueryIntent) -> bool:
        """Check one phone against every set dimension of the intent."""
        if intent.brand and phone.brand.lower() != intent.brand.lower():
            return False

        if intent.budget_ceiling is not None and phone.price > intent.budget_ceiling:
            return False

        if intent.wanted_features and not self._has_all_keywords(phone, intent.wanted_features):
            return False

        if intent.ram_gb is not None and not self._spec_contains(phone, "ram", intent.ram_gb):
            return False

        if intent.storage_gb is not None and not self._spec_contains(phone, "storage", intent.storage_gb):
            return False

        return True

    def _has_all_keywords(self, phone: PhoneRecord, keywords: Iterable[str]) -> bool:
        """Every keyword must appear in the features text or the specs text."""
        features_text = phone.features_text()
        specs_text = phone.specs_text()
        for word in keywords:
            word = word.lower()
            in_features = features_text is not None and word in features_text
            in_specs = specs_text is not None and word in specs_text
            if not (in_features or in_specs):
                return False
        return True

    def _spec_contains(self, phone: PhoneRecord, key: str, amount: str) -> bool:
        """Missing spec fails the check."""
        value = phone.spec(key)
        if not value:
            return False
        return amount in value
