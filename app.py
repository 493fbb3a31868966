"""
Melanie's Therapy Practice - marketing landing page
Built with Streamlit

Run with:  streamlit run app.py
"""

import streamlit as st

from config import PAGE_TITLE, PAGE_ICON
from utils.logging_setup import configure_logging
from landing_page import render_landing_page

# Page config
st.set_page_config(
    page_title=PAGE_TITLE,
    page_icon=PAGE_ICON,
    layout="wide",
    initial_sidebar_state="collapsed"
)


def main():
    configure_logging()
    render_landing_page()


if __name__ == "__main__":
    main()
