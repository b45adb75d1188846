"""
UI layer for Phone Finder.

Provides response formatting, phone cards and chat session state.
"""

from ui.responses import ResponseFormatter
from ui.cards import (
    PhoneCard,
    build_card,
    build_cards,
    format_inr,
    format_price,
)
from ui.state import (
    SessionState,
    Message,
    get_session_state,
    GREETING_MESSAGE,
    ERROR_MESSAGE,
    SUGGESTED_QUERIES,
)

__all__ = [
    'ResponseFormatter',
    'PhoneCard',
    'build_card',
    'build_cards',
    'format_inr',
    'format_price',
    'SessionState',
    'Message',
    'get_session_state',
    'GREETING_MESSAGE',
    'ERROR_MESSAGE',
    'SUGGESTED_QUERIES',
]
