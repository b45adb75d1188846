"""
Guard and FAQ handlers.

Neither touches the catalog: both return fixed text with no phones.
"""

from core.context import ResponseShape
from handlers.base import BaseHandler, HandlerContext, HandlerResult


class GuardHandler(BaseHandler):
    """Refuse adversarial messages."""

    def handle(self, ctx: HandlerContext) -> HandlerResult:
        ctx.add_debug("GUARD: adversarial message refused")
        return HandlerResult(
            response=ctx.formatter.format_refusal(),
            shape=ResponseShape.REFUSAL,
        )


class FaqHandler(BaseHandler):
    """Answer canned educational questions."""

    def handle(self, ctx: HandlerContext) -> HandlerResult:
        ctx.add_debug(f"FAQ: {ctx.intent.faq_topic}")
        return HandlerResult(
            response=ctx.formatter.format_faq(ctx.intent.faq_topic),
            shape=ResponseShape.FAQ,
        )
