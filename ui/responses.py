"""
Response formatting for Phone Finder.

Builds every reply text the engine can send: refusals, FAQ answers,
detail dumps, not-found guidance, the single top pick and the
multi-phone summary.
"""

from typing import Sequence

from core.context import PhoneRecord
from config.patterns import REFUSAL_MESSAGE, find_faq_entry

CURRENCY = "₹"
NOT_AVAILABLE = "N/A"

# Spec rows shown in a detail dump, in display order
DETAIL_SPEC_FIELDS = [
    ("display", "Display"),
    ("processor", "Processor"),
    ("camera", "Camera"),
    ("battery", "Battery"),
    ("ram", "RAM"),
    ("storage", "Storage"),
]


class ResponseFormatter:
    """
    Formats chatbot responses for display.

    Example:
        formatter = ResponseFormatter()
        text = formatter.format_summary(phones)
        # "Here are some matches: Samsung Galaxy M34 5G (₹16999), ..."
    """

    def __init__(self, summary_limit: int = 5):
        """
        Initialize response formatter.

        Args:
            summary_limit: Maximum phones named in a summary
        """
        self.summary_limit = summary_limit

    def format_refusal(self) -> str:
        """Fixed reply for adversarial messages."""
        return REFUSAL_MESSAGE

    def format_faq(self, topic: str) -> str:
        """
        Canned answer for a FAQ topic.

        Raises:
            KeyError: If the topic isn't in the FAQ table
        """
        entry = find_faq_entry(topic)
        if entry is None:
            raise KeyError(f"Unknown FAQ topic: {topic}")
        return entry.answer

    def format_details(self, phones: Sequence[PhoneRecord]) -> str:
        """
        Full spec dump for every phone, separated by blank lines.

        Missing specs show as N/A.
        """
        return "\n\n".join(self._format_phone_details(phone) for phone in phones)

    def format_details_not_found(self) -> str:
        return "Sorry, no matching phone found for details."

    def format_no_results(self) -> str:
        return (
            "Sorry, no phones found matching your criteria. "
            "Try increasing your budget or changing requirements."
        )

    def format_top_pick(self, phone: PhoneRecord) -> str:
        """Highlight for a single matching phone."""
        features = ", ".join(phone.features or ())
        return f"Here's a top pick: {self._label(phone)}, features: {features}."

    def format_summary(self, phones: Sequence[PhoneRecord]) -> str:
        """List the first few matches by name and price."""
        names = ", ".join(self._label(p) for p in phones[:self.summary_limit])
        return f"Here are some matches: {names}"

    def _label(self, phone: PhoneRecord) -> str:
        return f"{phone.brand} {phone.model} ({CURRENCY}{phone.price})"

    def _format_phone_details(self, phone: PhoneRecord) -> str:
        lines = [self._label(phone)]
        for key, label in DETAIL_SPEC_FIELDS:
            lines.append(f"{label}: {phone.spec(key, NOT_AVAILABLE)}")
        lines.append(f"Features: {', '.join(phone.features or ())}")
        lines.append(f"Pros: {', '.join(phone.pros)}")
        lines.append(f"Cons: {', '.join(phone.cons)}")
        return "\n".join(lines) + "\n"

