"""Core business logic for Phone Finder."""

from core.context import (
    QueryKind,
    ResponseShape,
    Review,
    PhoneRecord,
    QueryIntent,
    ResponsePayload,
)
from core.errors import PhoneFinderError, MalformedRequestError, CatalogLoadError
from core.intent import IntentExtractor
from core.filters import PhoneFilter

__all__ = [
    "QueryKind",
    "ResponseShape",
    "Review",
    "PhoneRecord",
    "QueryIntent",
    "ResponsePayload",
    "PhoneFinderError",
    "MalformedRequestError",
    "CatalogLoadError",
    "IntentExtractor",
    "PhoneFilter",
]
