"""
Phone Finder Streamlit App - Mobile Shopping Assistant

Run with: streamlit run app.py

Architecture:
- This file: Streamlit UI only
- core/orchestrator.py: Query processing coordination
- handlers/: Per-kind response handlers (guard, FAQ, details, search)
- core/: Business logic (intent, filters, data model)
- ui/: UI helpers (reply text, phone cards, session state)
- api.py: The same engine over HTTP (POST /api/chat)
"""

import streamlit as st

from catalog_loader import load_catalog, get_catalog_statistics
from config.settings import get_settings
from core.errors import CatalogLoadError
from core.orchestrator import QueryEngine
from core.structured_logging import setup_logging, get_logger
from ui.cards import build_cards, format_price
from ui.state import ERROR_MESSAGE, SUGGESTED_QUERIES, get_session_state


# =============================================================================
# CONFIGURATION
# =============================================================================

settings = get_settings()

setup_logging(
    log_dir=settings.log_dir,
    console_level=settings.log_level,
    enable_console=True,
    enable_file=True,
    enable_error_log=True,
)
app_logger = get_logger("app")

st.set_page_config(
    page_title="Mobile Shopping Assistant",
    page_icon="📱",
    layout="centered"
)


# =============================================================================
# COMPONENT INITIALIZATION
# =============================================================================

@st.cache_resource
def load_engine(catalog_path: str):
    """
    Load the catalog and build the engine (cached for the process).

    Raises CatalogLoadError; failures are not cached, so a fixed file
    is picked up on the next run.
    """
    phones = load_catalog(catalog_path)
    return QueryEngine(phones, debug_mode=settings.debug), get_catalog_statistics(phones)


def render_cards(phones) -> None:
    """Render phone cards for an assistant reply."""
    for card in build_cards(phones, limit=settings.max_cards):
        with st.container(border=True):
            st.markdown(card.to_markdown())


def answer_pending(engine: QueryEngine, session) -> None:
    """Answer the prompt held from the previous run and record the reply."""
    try:
        with st.spinner("Thinking..."):
            payload = engine.process(session.pending_prompt)
    except Exception:
        # Logged with stack trace by the orchestrator
        session.finish(ERROR_MESSAGE)
    else:
        session.finish(payload.text, phones=payload.matched_records)
        if settings.debug:
            st.session_state.last_shape = payload.shape.value


# =============================================================================
# MAIN APPLICATION
# =============================================================================

def main():
    st.title("📱 Mobile Shopping Assistant")
    st.markdown("*AI-Powered Shopping for smart mobile choices!*")

    try:
        engine, stats = load_engine(str(settings.catalog_path))
    except CatalogLoadError as e:
        app_logger.error(f"Catalog load failed: {e}", extra={"event": "catalog_load_failed"})
        st.error(f"❌ {e}")
        st.stop()

    if not engine.catalog:
        st.warning("⚠️ No phones loaded. Check your catalog file.")
        st.stop()

    session = get_session_state(st.session_state)

    # Sidebar - Catalog statistics
    with st.sidebar:
        st.header("📦 Phone Catalog")
        st.metric("Total Phones", stats['total'])
        col1, col2 = st.columns(2)
        with col1:
            st.metric("From", format_price(stats['min_price']))
        with col2:
            st.metric("Up to", format_price(stats['max_price']))
        st.caption(
            f"Median price: {format_price(round(stats['median_price']))} · "
            f"{stats['with_reviews']} with user reviews"
        )

        with st.expander("📊 Brands"):
            for brand, count in stats['by_brand'].items():
                st.write(f"• **{brand}:** {count}")

        st.markdown("---")
        if st.button("🔄 New Chat"):
            session.clear()
            st.rerun()

        if settings.debug and st.session_state.get("last_shape"):
            st.caption(f"Last response shape: {st.session_state.last_shape}")

    # Display chat history
    for message in session.get_conversation_history():
        with st.chat_message(message.role):
            st.markdown(message.content)
            if message.phones:
                render_cards(message.phones)

    # Suggested queries
    suggestion = None
    cols = st.columns(len(SUGGESTED_QUERIES))
    for col, query in zip(cols, SUGGESTED_QUERIES):
        if col.button(query, disabled=session.busy, use_container_width=True):
            suggestion = query

    prompt = st.chat_input("Ask me anything about phones...", disabled=session.busy)
    prompt = prompt or suggestion

    # First run: record the message and rerun with the input disabled
    if prompt and prompt.strip() and not session.busy:
        session.submit(prompt)
        st.rerun()

    # Second run: widgets above were drawn disabled; answer, then re-enable
    if session.busy and session.pending_prompt:
        answer_pending(engine, session)
        st.rerun()


if __name__ == "__main__":
    main()
