import streamlit as st

from ..services.entry_store import Draft, EntryStore
from ..services.persistence import EntryRepository


def get_store() -> EntryStore:
    """One store per browser session, loaded once and saved after every change."""
    if "store" not in st.session_state:
        repo = EntryRepository()
        st.session_state.store = EntryStore(repo.load() or [], on_change=repo.save)
    return st.session_state.store


def get_draft() -> Draft:
    if "draft" not in st.session_state:
        st.session_state.draft = Draft()
    return st.session_state.draft
