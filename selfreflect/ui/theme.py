import streamlit as st

def load_css():
    try:
        with open("assets/theme.css") as f:
            st.markdown(f"<style>{f.read()}</style>", unsafe_allow_html=True)
    except FileNotFoundError:
        pass

def page_header(title: str, caption: str = ""):
    st.markdown(f'<h1 class="sr-title">{title}</h1>', unsafe_allow_html=True)
    if caption:
        st.caption(caption)
