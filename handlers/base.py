"""
Base handler and context classes for Phone Finder query handlers.

Provides the common interface and shared context for all handlers.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, List, Sequence

from core.context import PhoneRecord, QueryIntent, ResponseShape


@dataclass
class HandlerContext:
    """
    Context passed to all query handlers.

    Contains everything a handler needs to answer a message:
    - The message itself
    - Extracted intent
    - The catalog to search
    - Component references

    This avoids passing a long parameter list to each handler.
    """
    query: str
    intent: QueryIntent
    catalog: Sequence[PhoneRecord]
    debug_mode: bool = False

    # Component references (set by orchestrator)
    phone_filter: Any = None
    formatter: Any = None

    # Debug output collector
    debug_lines: List[str] = field(default_factory=list)

    def add_debug(self, message: str) -> None:
        """Add a debug message."""
        if self.debug_mode:
            self.debug_lines.append(message)


@dataclass
class HandlerResult:
    """
    Result returned by query handlers.

    Attributes:
        response: Reply text
        shape: Terminal outcome the reply represents
        phones: Phones attached for card rendering
        products_found: Phones that passed the filters (for logging)
    """
    response: str
    shape: ResponseShape
    phones: tuple[PhoneRecord, ...] = ()
    products_found: int = 0


class BaseHandler(ABC):
    """
    Base class for all query handlers.

    Each handler processes one QueryKind and returns a HandlerResult.
    Handlers are stateless - all state is in HandlerContext.
    """

    @abstractmethod
    def handle(self, ctx: HandlerContext) -> HandlerResult:
        """
        Process the message and return a result.

        Args:
            ctx: Handler context with query, intent, and components

        Returns:
            HandlerResult with reply text and attached phones
        """

    def _search(self, ctx: HandlerContext) -> tuple[PhoneRecord, ...]:
        """Run the catalog filter for this message."""
        results = ctx.phone_filter.apply(ctx.catalog, ctx.intent)
        ctx.add_debug(f"FILTERS: {ctx.intent.to_log_dict()}")
        ctx.add_debug(f"SEARCH: Found {len(results)} phones")
        return results
