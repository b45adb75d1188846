"""
Core data models for Phone Finder.

Defines all data structures used throughout the application.
These are pure Python dataclasses with no external dependencies.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional


class QueryKind(Enum):
    """
    How a message is handled, in priority order.

    1. GUARDED - Adversarial input, refused outright
    2. FAQ - Canned educational answer
    3. DETAIL - User wants the full specs of the matches
    4. SEARCH - Ordinary catalog search
    """
    GUARDED = "guarded"
    FAQ = "faq"
    DETAIL = "detail"
    SEARCH = "search"


class ResponseShape(Enum):
    """The terminal outcome a response takes."""
    REFUSAL = "refusal"
    FAQ = "faq"
    DETAILS = "details"
    DETAILS_NOT_FOUND = "details_not_found"
    NOT_FOUND = "not_found"
    TOP_PICK = "top_pick"
    SUMMARY = "summary"


@dataclass(frozen=True)
class Review:
    """A short user review attached to a phone."""
    user: str
    comment: str

    def to_dict(self) -> dict[str, str]:
        return {"user": self.user, "comment": self.comment}


@dataclass(frozen=True)
class PhoneRecord:
    """
    A phone in the catalog.

    Attributes:
        brand: Manufacturer name (e.g. "Samsung")
        model: Model name (e.g. "Galaxy M34 5G")
        price: Price in rupees
        specs: Named attributes (display, processor, camera, battery,
            ram, storage); any subset may be missing, or None entirely
        features: Free-form feature tags, or None when the record has none
        pros: Selling points
        cons: Drawbacks
        reviews: User reviews (may be empty)
        id: Optional stable identifier for UI keys
    """
    brand: str
    model: str
    price: int
    specs: Optional[Mapping[str, str]] = None
    features: Optional[tuple[str, ...]] = None
    pros: tuple[str, ...] = ()
    cons: tuple[str, ...] = ()
    reviews: tuple[Review, ...] = ()
    id: Optional[str] = None

    def __post_init__(self):
        if not self.brand or not self.brand.strip():
            raise ValueError("Phone brand must be non-empty")
        if not self.model or not self.model.strip():
            raise ValueError("Phone model must be non-empty")
        if self.price < 0:
            raise ValueError(f"Phone price must be >= 0, got {self.price}")
        # Freeze mutable inputs so records can't be edited after load
        if self.specs is not None and not isinstance(self.specs, MappingProxyType):
            object.__setattr__(self, "specs", MappingProxyType(dict(self.specs)))
        if self.features is not None and not isinstance(self.features, tuple):
            object.__setattr__(self, "features", tuple(self.features))
        for name in ("pros", "cons", "reviews"):
            value = getattr(self, name)
            if not isinstance(value, tuple):
                object.__setattr__(self, name, tuple(value))

    @property
    def name(self) -> str:
        """Brand and model, e.g. "Samsung Galaxy M34 5G"."""
        return f"{self.brand} {self.model}"

    def spec(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Get a spec value safely."""
        if not self.specs:
            return default
        return self.specs.get(key, default)

    def features_text(self) -> Optional[str]:
        """Lower-cased features joined by spaces, or None if absent."""
        if self.features is None:
            return None
        return " ".join(self.features).lower()

    def specs_text(self) -> Optional[str]:
        """Lower-cased spec values joined by spaces, or None if absent."""
        if self.specs is None:
            return None
        return " ".join(str(v) for v in self.specs.values()).lower()

    def to_dict(self) -> dict[str, Any]:
        """Convert to the JSON shape the UI and API expect."""
        data: dict[str, Any] = {
            "brand": self.brand,
            "model": self.model,
            "price": self.price,
        }
        if self.id is not None:
            data["id"] = self.id
        if self.specs is not None:
            data["specs"] = dict(self.specs)
        data["features"] = list(self.features or ())
        data["pros"] = list(self.pros)
        data["cons"] = list(self.cons)
        if self.reviews:
            data["reviews"] = [r.to_dict() for r in self.reviews]
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PhoneRecord":
        """Build a record from a catalog JSON object."""
        specs = data.get("specs")
        if specs is not None and not isinstance(specs, Mapping):
            raise ValueError("specs must be an object")
        features = data.get("features")
        for key in ("features", "pros", "cons", "reviews"):
            if data.get(key) is not None and not isinstance(data[key], list):
                raise ValueError(f"{key} must be a list")
        raw_reviews = data.get("reviews") or []
        if not all(isinstance(r, Mapping) for r in raw_reviews):
            raise ValueError("each review must be an object")
        reviews = tuple(
            Review(user=str(r.get("user", "")), comment=str(r.get("comment", "")))
            for r in raw_reviews
        )
        return cls(
            brand=str(data.get("brand", "")),
            model=str(data.get("model", "")),
            price=int(data.get("price", -1)),
            specs={str(k): str(v) for k, v in specs.items()} if specs is not None else None,
            features=tuple(str(f) for f in features) if features is not None else None,
            pros=tuple(str(p) for p in (data.get("pros") or [])),
            cons=tuple(str(c) for c in (data.get("cons") or [])),
            reviews=reviews,
            id=str(data["id"]) if data.get("id") is not None else None,
        )


@dataclass(frozen=True)
class QueryIntent:
    """
    Structured interpretation of one message.

    Built fresh for every request and discarded afterwards. A field left
    as None (or empty) means "do not filter on this dimension".

    Attributes:
        is_adversarial: Message tried to extract hidden instructions
        faq_topic: Topic of the matched FAQ entry, if any
        brand: Lower-cased brand name from the supported list
        budget_ceiling: Maximum price in rupees
        wanted_features: Feature keywords that must all match
        ram_gb: Requested RAM amount, digits as typed
        storage_gb: Requested storage amount, digits as typed
        wants_detail: User asked for full details of the matches
    """
    is_adversarial: bool = False
    faq_topic: Optional[str] = None
    brand: Optional[str] = None
    budget_ceiling: Optional[int] = None
    wanted_features: tuple[str, ...] = ()
    ram_gb: Optional[str] = None
    storage_gb: Optional[str] = None
    wants_detail: bool = False

    @property
    def is_faq_match(self) -> bool:
        return self.faq_topic is not None

    @property
    def kind(self) -> QueryKind:
        if self.is_adversarial:
            return QueryKind.GUARDED
        if self.is_faq_match:
            return QueryKind.FAQ
        if self.wants_detail:
            return QueryKind.DETAIL
        return QueryKind.SEARCH

    def to_log_dict(self) -> dict[str, Any]:
        """Filter dimensions that are set, for logging."""
        filters: dict[str, Any] = {}
        if self.brand:
            filters["brand"] = self.brand
        if self.budget_ceiling is not None:
            filters["budget"] = self.budget_ceiling
        if self.wanted_features:
            filters["features"] = list(self.wanted_features)
        if self.ram_gb is not None:
            filters["ram_gb"] = self.ram_gb
        if self.storage_gb is not None:
            filters["storage_gb"] = self.storage_gb
        return filters

    def __str__(self) -> str:
        return f"QueryIntent({self.kind.value}, filters={self.to_log_dict()})"


@dataclass(frozen=True)
class ResponsePayload:
    """
    What the engine returns for one message.

    Attributes:
        text: Reply shown in the chat bubble
        matched_records: Phones attached for card rendering
        shape: Which terminal outcome produced the reply
    """
    text: str
    matched_records: tuple[PhoneRecord, ...] = field(default_factory=tuple)
    shape: ResponseShape = ResponseShape.SUMMARY

    def to_wire(self) -> dict[str, Any]:
        """Serialize as {"response": ..., "phones": [...]}; phones omitted when empty."""
        data: dict[str, Any] = {"response": self.text}
        if self.matched_records:
            data["phones"] = [p.to_dict() for p in self.matched_records]
        return data
