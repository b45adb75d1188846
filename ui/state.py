"""
Session state management for the Phone Finder chat UI.

Holds the visible message history in memory only. Nothing here feeds back
into the engine: every message is answered on its own.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, List, Optional

from core.context import PhoneRecord

GREETING_MESSAGE = (
    "Hi! 👋 I'm your mobile phone shopping assistant. I can help you find the "
    "perfect phone based on your budget and needs. What are you looking for?"
)

ERROR_MESSAGE = "Sorry, something went wrong. Please try again."

SUGGESTED_QUERIES = [
    "Best camera phone under ₹30000?",
    "Gaming phone with 5g under 25000",
    "Compact phone with good battery",
]


@dataclass
class Message:
    """
    A single message in the conversation.

    Attributes:
        role: 'user' or 'assistant'
        content: Message text
        phones: Phones attached to an assistant reply
        timestamp: When message was created
    """
    role: str
    content: str
    phones: tuple[PhoneRecord, ...] = ()
    timestamp: datetime = field(default_factory=datetime.now)


class SessionState:
    """
    Manages the chat history for one browser session.

    Example:
        state = SessionState()
        state.add_message("user", "samsung phone under 20000")
        state.add_message("assistant", "Here's a top pick: ...", phones=matches)
    """

    def __init__(self, session_id: Optional[str] = None, greet: bool = True):
        """
        Initialize session state.

        Args:
            session_id: Optional session identifier
            greet: Start the history with the assistant greeting
        """
        self.session_id = session_id or self._generate_session_id()
        self.created_at = datetime.now()
        self.busy = False
        self.pending_prompt: Optional[str] = None
        self._messages: List[Message] = []
        if greet:
            self.add_message("assistant", GREETING_MESSAGE)

    def _generate_session_id(self) -> str:
        return f"session_{datetime.now().strftime('%Y%m%d_%H%M%S_%f')}"

    def add_message(self, role: str, content: str, phones=()) -> Message:
        """Append a message to the history."""
        if role not in ("user", "assistant"):
            raise ValueError(f"Unknown message role: {role}")
        message = Message(role=role, content=content, phones=tuple(phones))
        self._messages.append(message)
        return message

    def get_conversation_history(self) -> List[Message]:
        """Messages in the order they were added."""
        return list(self._messages)

    def submit(self, prompt: str) -> None:
        """
        Record a user message and hold it for the next script run.

        Input widgets are drawn with disabled=busy, so the reply is
        produced on the rerun that follows.
        """
        self.add_message("user", prompt)
        self.pending_prompt = prompt
        self.busy = True

    def finish(self, content: str, phones=()) -> Message:
        """Record the reply to the pending prompt and release the input."""
        message = self.add_message("assistant", content, phones=phones)
        self.pending_prompt = None
        self.busy = False
        return message

    def clear(self, greet: bool = True) -> None:
        """Drop the history and start over."""
        self._messages = []
        self.pending_prompt = None
        self.busy = False
        if greet:
            self.add_message("assistant", GREETING_MESSAGE)


def get_session_state(st_session_state: Any) -> SessionState:
    """
    Get (or create) the SessionState stored in Streamlit's session state.

    Args:
        st_session_state: st.session_state (any attribute-style mapping)
    """
    if "session" not in st_session_state:
        st_session_state["session"] = SessionState()
    return st_session_state["session"]
