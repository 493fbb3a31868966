"""
Session state initialization for the landing page.
Centralizes all session state defaults in one place.
"""

from typing import MutableMapping, Optional

import streamlit as st

from features.contact_form import (
    FIELD_KEYS,
    STATUS_KEY,
    ERRORS_KEY,
    PENDING_KEY,
    CLEAR_PENDING_KEY,
    SubmissionStatus,
)
from components.navigation import SCROLL_TARGET_KEY, SCROLL_NONCE_KEY


def init_session_state(state: Optional[MutableMapping] = None):
    """Initialize all session state variables with defaults"""
    if state is None:
        state = st.session_state

    defaults = {
        # Contact form controls
        FIELD_KEYS['fullName']: '',
        FIELD_KEYS['email']: '',
        FIELD_KEYS['phone']: '',  # Formatted phone mirror
        FIELD_KEYS['preferredContactMethod']: None,  # None = placeholder shown
        FIELD_KEYS['message']: '',

        # Submission lifecycle
        STATUS_KEY: SubmissionStatus(),
        ERRORS_KEY: {},  # Field name -> validation message
        PENDING_KEY: None,  # Payload waiting for delivery on the next run
        CLEAR_PENDING_KEY: False,  # Clear fields before widgets are drawn

        # Smooth-scroll navigation
        SCROLL_TARGET_KEY: None,  # Section id to scroll to after this run
        SCROLL_NONCE_KEY: 0,  # Bumped per request so repeat scrolls re-run
    }
    for k, v in defaults.items():
        if k not in state:
            state[k] = v
