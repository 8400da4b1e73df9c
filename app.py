import streamlit as st
from selfreflect.config import configure_logging
from selfreflect.db import init_db
from selfreflect.ui.theme import load_css, page_header
from selfreflect.ui.state import get_store

st.set_page_config(page_title="Self Reflection", page_icon="📓", layout="centered")

# Init DB and logging on first load
if "db_init" not in st.session_state:
    configure_logging()
    init_db()
    st.session_state.db_init = True

load_css()

store = get_store()

page_header("SELF REFLECTION", "A quiet place to log how you feel and what you hope for.")
st.write(f"You have **{len(store)}** saved {'entry' if len(store) == 1 else 'entries'}.")
st.info("👈 Open **Reflect** to write today's entry, or **Insights** to see your mood and themes.")
