import streamlit as st
from selfreflect.config import get_diagnostics
from selfreflect.db import init_db
from selfreflect.services.export import EXPORT_MIME, export_filename, export_json
from selfreflect.services.themes import extract_themes
from selfreflect.services.trend import mood_trend
from selfreflect.ui.cloud import render_cloud_html
from selfreflect.ui.state import get_store
from selfreflect.ui.theme import load_css, page_header

if "db_init" not in st.session_state:
    init_db()
    st.session_state.db_init = True

load_css()

store = get_store()
entries = store.all()

page_header("INSIGHTS")

col_export, col_clear = st.columns(2)
with col_export:
    st.download_button(
        "⬇️ Export JSON",
        data=export_json(entries),
        file_name=export_filename(),
        mime=EXPORT_MIME,
        use_container_width=True,
    )
with col_clear:
    if st.button("🗑️ Clear All Data", use_container_width=True):
        st.session_state.confirm_clear = True

if st.session_state.get("confirm_clear"):
    st.warning("Are you sure you want to delete all entries? This cannot be undone.")
    c1, c2 = st.columns(2)
    if c1.button("Yes, delete everything", key="btn_confirm_clear"):
        store.clear_all()
        st.session_state.confirm_clear = False
        st.rerun()
    if c2.button("Cancel", key="btn_cancel_clear"):
        st.session_state.confirm_clear = False
        st.rerun()

if not entries:
    st.markdown("""
    <div class="sr-empty">
        <p style="font-size: 3rem;">📖</p>
        <p style="font-family: Georgia, serif; font-size: 1.2rem;">Your journey begins with a single entry.</p>
        <p style="text-transform: uppercase; letter-spacing: 0.2em; font-size: 0.7rem;">No data to display yet.</p>
    </div>
    """, unsafe_allow_html=True)
    st.stop()

st.subheader("Mood Trajectory")
trend = mood_trend(entries)
st.line_chart(trend, y="mood", height=260)
st.caption(" · ".join(f"{row.label}: {row.mood}/10" for row in trend.itertuples()))

st.subheader("Theme Cloud (Gratitude & Hope)")
st.markdown(render_cloud_html(extract_themes(entries)), unsafe_allow_html=True)

with st.expander("Diagnostics"):
    st.json(get_diagnostics())
