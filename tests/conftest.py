"""
Shared test configuration.
Puts the repo root on sys.path so the flat app modules import like they do
under `streamlit run app.py`.
"""

import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))


@pytest.fixture
def state() -> dict:
    """Plain dict standing in for st.session_state"""
    return {}


@pytest.fixture
def no_submit_delay(monkeypatch):
    """Make the simulated backend resolve immediately"""
    import config

    monkeypatch.setattr(config, "SUBMIT_DELAY_SECONDS", 0.0)
    monkeypatch.setattr(config, "CONTACT_WEBHOOK_URL", "")
