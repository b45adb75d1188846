"""
Search handlers.

DetailHandler dumps full specs for every match. SearchHandler picks the
not-found, top pick or summary reply depending on how many phones match.
"""

from core.context import ResponseShape
from handlers.base import BaseHandler, HandlerContext, HandlerResult


class DetailHandler(BaseHandler):
    """Handle "tell me more" style requests."""

    def handle(self, ctx: HandlerContext) -> HandlerResult:
        results = self._search(ctx)

        if not results:
            return HandlerResult(
                response=ctx.formatter.format_details_not_found(),
                shape=ResponseShape.DETAILS_NOT_FOUND,
            )

        return HandlerResult(
            response=ctx.formatter.format_details(results),
            shape=ResponseShape.DETAILS,
            phones=results,
            products_found=len(results),
        )


class SearchHandler(BaseHandler):
    """Handle ordinary catalog searches."""

    def handle(self, ctx: HandlerContext) -> HandlerResult:
        results = self._search(ctx)

        if not results:
            return HandlerResult(
                response=ctx.formatter.format_no_results(),
                shape=ResponseShape.NOT_FOUND,
            )

        if len(results) == 1:
            return HandlerResult(
                response=ctx.formatter.format_top_pick(results[0]),
                shape=ResponseShape.TOP_PICK,
                phones=results,
                products_found=1,
            )

        # Summary names only the first few; every match goes to the cards
        return HandlerResult(
            response=ctx.formatter.format_summary(results),
            shape=ResponseShape.SUMMARY,
            phones=results,
            products_found=len(results),
        )
