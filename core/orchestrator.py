"""
Query orchestrator for Phone Finder.

Coordinates the flow: intent extraction → handler routing → response payload.
Every call is independent; the catalog is only read, never modified.
"""

from dataclasses import dataclass
from typing import Any, Optional, Sequence

from config.settings import Settings, get_settings
from core.context import PhoneRecord, QueryKind, ResponsePayload
from core.filters import PhoneFilter
from core.intent import IntentExtractor
from core.structured_logging import Timer, get_logger, log_error, log_query_turn
from ui.responses import ResponseFormatter

from handlers.base import HandlerContext, HandlerResult
from handlers.guard import GuardHandler, FaqHandler
from handlers.search import DetailHandler, SearchHandler

_logger = get_logger("core.orchestrator")


@dataclass
class OrchestratorComponents:
    """
    All components needed by the orchestrator.

    Typically created once by the entry point (API or Streamlit app)
    and shared across requests; none of them hold per-request state.
    """
    intent_extractor: Any   # IntentExtractor
    phone_filter: Any       # PhoneFilter
    formatter: Any          # ResponseFormatter


def create_components(settings: Optional[Settings] = None) -> OrchestratorComponents:
    """
    Create the default component set.

    Args:
        settings: Settings to read limits from (defaults to get_settings())
    """
    settings = settings or get_settings()
    return OrchestratorComponents(
        intent_extractor=IntentExtractor(),
        phone_filter=PhoneFilter(),
        formatter=ResponseFormatter(summary_limit=settings.summary_limit),
    )


# Handler registry - maps query kinds to handlers
HANDLERS = {
    QueryKind.GUARDED: GuardHandler(),
    QueryKind.FAQ: FaqHandler(),
    QueryKind.DETAIL: DetailHandler(),
    QueryKind.SEARCH: SearchHandler(),
}


def process_query(
    query: str,
    catalog: Sequence[PhoneRecord],
    components: OrchestratorComponents,
    debug_mode: bool = False,
    request_id: Optional[str] = None,
) -> ResponsePayload:
    """
    Answer one message.

    Args:
        query: User's message text
        catalog: Phones to search (read-only)
        components: Orchestrator components
        debug_mode: Collect handler debug lines and log them
        request_id: Request identifier for log correlation

    Returns:
        ResponsePayload with reply text and attached phones

    Raises:
        Exception: Anything a handler raises is logged and re-raised so the
            transport layer can report the failure.
    """
    with Timer() as timer:
        # Step 1: Extract intent
        intent = components.intent_extractor.extract(query)

        # Step 2: Get handler for the query kind
        handler = HANDLERS[intent.kind]

        # Step 3: Build handler context
        handler_ctx = HandlerContext(
            query=query,
            intent=intent,
            catalog=catalog,
            debug_mode=debug_mode,
            phone_filter=components.phone_filter,
            formatter=components.formatter,
        )
        handler_ctx.add_debug(f"INTENT: {intent}")

        # Step 4: Execute handler
        try:
            result: HandlerResult = handler.handle(handler_ctx)
        except Exception as e:
            log_error(e, context=f"{type(handler).__name__}.handle", request_id=request_id)
            raise

    if debug_mode and handler_ctx.debug_lines:
        _logger.debug(
            "Handler debug output:\n" + "\n".join(handler_ctx.debug_lines),
            extra={"event": "handler_debug", "request_id": request_id},
        )

    # Step 5: Log the turn
    log_query_turn(
        user_query=query,
        query_kind=intent.kind.value,
        response_shape=result.shape.value,
        products_found=result.products_found,
        products_shown=len(result.phones),
        filters=intent.to_log_dict(),
        faq_topic=intent.faq_topic,
        response_time_ms=timer.elapsed_ms,
        request_id=request_id,
    )

    return ResponsePayload(
        text=result.response,
        matched_records=tuple(result.phones),
        shape=result.shape,
    )


class QueryEngine:
    """
    Class-based entry point holding the catalog and components.

    Example:
        engine = QueryEngine(load_catalog())
        payload = engine.process("samsung phone under 20000")
        payload.to_wire()
        # {"response": "Here's a top pick: ...", "phones": [...]}
    """

    def __init__(
        self,
        catalog: Sequence[PhoneRecord],
        components: Optional[OrchestratorComponents] = None,
        debug_mode: bool = False
    ):
        self.catalog = tuple(catalog)
        self.components = components or create_components()
        self.debug_mode = debug_mode

    def process(self, query: str, request_id: Optional[str] = None) -> ResponsePayload:
        """Answer one message against this engine's catalog."""
        return process_query(
            query=query,
            catalog=self.catalog,
            components=self.components,
            debug_mode=self.debug_mode,
            request_id=request_id,
        )
