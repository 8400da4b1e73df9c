from datetime import date

import streamlit as st
from selfreflect.db import init_db
from selfreflect.services.define import define_url, lookup_definition
from selfreflect.services.entry_store import Draft, ValidationFailure
from selfreflect.services.share import SHARE_TITLE, compose_share_text
from selfreflect.ui.state import get_draft, get_store
from selfreflect.ui.theme import load_css, page_header

if "db_init" not in st.session_state:
    init_db()
    st.session_state.db_init = True

load_css()

store = get_store()
draft = get_draft()
# Bumped after every save so the text widgets come back empty
form_id = st.session_state.setdefault("form_id", 0)

page_header("SELF REFLECTION", draft.date)

flash = st.session_state.pop("flash", None)
if flash:
    st.success(flash)

picked = st.date_input("Select Date", value=date.fromisoformat(draft.date), key=f"date_{form_id}")
mood = st.slider("Mood Check-In", 1, 10, draft.mood, key=f"mood_{form_id}")

col_label, col_define = st.columns([4, 1])
with col_label:
    mood_label = st.text_input(
        "Name your feeling",
        value=draft.mood_label,
        placeholder="Name your feeling (e.g., Melancholy, Radiant)",
        key=f"mood_label_{form_id}",
    )
with col_define:
    st.write("")
    define_clicked = st.button("🔍 Define", disabled=not mood_label.strip(), key=f"define_{form_id}")

if define_clicked:
    found = lookup_definition(mood_label)
    if found:
        st.markdown(f"**{found['word']}** *{found['part_of_speech']}*: {found['definition']}")
    else:
        st.caption("No definition found.")
    url = define_url(mood_label)
    if url:
        st.link_button("Search the web ↗", url)

col_past, col_future = st.columns(2)
with col_past:
    past = st.text_area("Past (Gratitude)", value=draft.past, placeholder="I am grateful for...", height=130, key=f"past_{form_id}")
with col_future:
    future = st.text_area("Future (Hope)", value=draft.future, placeholder="Things I hope for...", height=130, key=f"future_{form_id}")

reflection = st.text_area("Deep Reflection", value=draft.reflection, placeholder="Today I learned...", height=200, key=f"reflection_{form_id}")

current = Draft(
    date=picked.isoformat(),
    mood=int(mood),
    mood_label=mood_label,
    past=past,
    future=future,
    reflection=reflection,
)
st.session_state.draft = current

col_save, col_share = st.columns([3, 1])
with col_save:
    save_clicked = st.button("Save Entry", type="primary", use_container_width=True)
with col_share:
    share_clicked = st.button("Share", use_container_width=True)

if save_clicked:
    try:
        store.append(current)
    except ValidationFailure as e:
        st.error(str(e))
    else:
        st.session_state.draft = current.cleared()
        st.session_state.form_id = form_id + 1
        st.session_state.flash = "Journal Entry Saved."
        st.rerun()

if share_clicked:
    st.markdown(f"**{SHARE_TITLE}**")
    st.caption("Copy the text below to share it.")
    st.code(compose_share_text(current), language=None)
