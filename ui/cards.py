"""
Phone card formatting for the chat UI.

Turns a PhoneRecord into the display fields a card needs. Kept free of
Streamlit so it can be tested without a running app.
"""

from dataclasses import dataclass, field
from typing import List, Tuple

from core.context import PhoneRecord
from ui.responses import CURRENCY, NOT_AVAILABLE

# Specs grid cells, in display order
CARD_SPEC_FIELDS = [
    ("display", "Display"),
    ("processor", "Processor"),
    ("camera", "Camera"),
    ("battery", "Battery"),
]

MAX_LISTED_PROS_CONS = 2


def format_inr(amount: int) -> str:
    """
    Format an amount with Indian digit grouping.

    Example:
        >>> format_inr(1234567)
        '12,34,567'
    """
    sign = "-" if amount < 0 else ""
    digits = str(abs(int(amount)))
    if len(digits) <= 3:
        return sign + digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return sign + ",".join(groups + [tail])


def format_price(amount: int) -> str:
    """Price with currency glyph, e.g. ₹16,999."""
    return f"{CURRENCY}{format_inr(amount)}"


@dataclass
class PhoneCard:
    """
    Display fields for one phone card.

    Attributes:
        title: Brand and model
        price: Formatted price with currency glyph
        specs: (label, value) pairs for the specs grid, N/A when missing
        features: Feature tags
        pros: At most two pros
        cons: At most two cons
        reviews: (user, comment) pairs, empty when the phone has none
    """
    title: str
    price: str
    specs: List[Tuple[str, str]]
    features: List[str] = field(default_factory=list)
    pros: List[str] = field(default_factory=list)
    cons: List[str] = field(default_factory=list)
    reviews: List[Tuple[str, str]] = field(default_factory=list)

    def to_markdown(self) -> str:
        """Render the card body as markdown."""
        lines = [f"**{self.title}**  ", f"### {self.price}", ""]
        for label, value in self.specs:
            lines.append(f"- **{label}:** {value}")
        if self.features:
            lines.append("")
            lines.append(" ".join(f"`{f}`" for f in self.features))
        if self.pros:
            lines.append("")
            lines.append("**✓ Pros:**")
            lines.extend(f"- {p}" for p in self.pros)
        if self.cons:
            lines.append("")
            lines.append("**✗ Cons:**")
            lines.extend(f"- {c}" for c in self.cons)
        if self.reviews:
            lines.append("")
            lines.append("**User Reviews:**")
            lines.extend(f"- **{user}**: {comment}" for user, comment in self.reviews)
        return "\n".join(lines)


def build_card(phone: PhoneRecord) -> PhoneCard:
    """Build the card for one phone."""
    return PhoneCard(
        title=phone.name,
        price=format_price(phone.price),
        specs=[(label, phone.spec(key) or NOT_AVAILABLE) for key, label in CARD_SPEC_FIELDS],
        features=list(phone.features or ()),
        pros=list(phone.pros[:MAX_LISTED_PROS_CONS]),
        cons=list(phone.cons[:MAX_LISTED_PROS_CONS]),
        reviews=[(r.user, r.comment) for r in phone.reviews],
    )


def build_cards(phones, limit: int = None) -> List[PhoneCard]:
    """Build cards for phones, capped at limit when given."""
    phones = list(phones)
    if limit is not None:
        phones = phones[:limit]
    return [build_card(p) for p in phones]
