"""
Query handlers for Phone Finder.

Each handler answers one kind of message.
"""

from handlers.base import BaseHandler, HandlerContext, HandlerResult
from handlers.guard import GuardHandler, FaqHandler
from handlers.search import DetailHandler, SearchHandler

__all__ = [
    # Base classes
    'BaseHandler',
    'HandlerContext',
    'HandlerResult',
    # Handlers
    'GuardHandler',
    'FaqHandler',
    'DetailHandler',
    'SearchHandler',
]
