"""
Configuration for Melanie's Therapy Practice landing page.
Central configuration for branding, the contact form and page styling.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env from the same directory as this config file (for local dev)
env_path = Path(__file__).parent / ".env"
load_dotenv(dotenv_path=env_path)


def get_secret(key: str, default: str = "") -> str:
    """
    Get a secret from environment variables (local) or Streamlit secrets (cloud).
    Streamlit Cloud uses st.secrets, local dev uses .env
    """
    value = os.environ.get(key, "")
    if value:
        return value

    try:
        import streamlit as st
        if hasattr(st, 'secrets') and key in st.secrets:
            return st.secrets[key]
    except Exception:
        # st.secrets raises when no secrets.toml exists
        pass

    return default


def _get_float(key: str, default: float) -> float:
    raw = get_secret(key, "")
    try:
        return float(raw) if raw else default
    except ValueError:
        return default


# =============================================================================
# BRANDING
# =============================================================================

PRACTICE_NAME = "Melanie's Therapy Practice"
PAGE_TITLE = "Melanie's Therapy Practice | Couples, Family & Individual Therapy"
PAGE_ICON = "🌿"

PRIMARY_SAGE = "#3f7d6e"
PRIMARY_SAGE_DARK = "#2f6155"
PRIMARY_SAGE_DARKER = "#234a41"
TINT_BACKGROUND = "#f3f8f6"

# =============================================================================
# PAGE ANCHORS
# =============================================================================

MAIN_ID = "main"
SERVICES_ID = "services"
TESTIMONIALS_ID = "testimonials"
CONTACT_ID = "contact"

# =============================================================================
# CONTACT FORM
# =============================================================================

CONTACT_METHODS = ("Email", "Phone", "Text")
CONTACT_METHOD_PLACEHOLDER = "Select one…"
PHONE_MAX_DIGITS = 15

# Simulated submission delay; CONTACT_SUBMIT_DELAY_MS overrides it
SUBMIT_DELAY_SECONDS = _get_float("CONTACT_SUBMIT_DELAY_MS", 550.0) / 1000.0

# Leave empty to keep the simulated backend
CONTACT_WEBHOOK_URL = get_secret("CONTACT_WEBHOOK_URL", "")
CONTACT_WEBHOOK_TIMEOUT = _get_float("CONTACT_WEBHOOK_TIMEOUT", 10.0)

SUBMIT_LABEL = "Send Message"
SUBMITTING_LABEL = "Sending…"

SUCCESS_MESSAGE = (
    "Thanks—your message has been received. "
    "We’ll follow up using your preferred contact method."
)
ERROR_MESSAGE = "Something went wrong while sending your message. Please try again."

# =============================================================================
# LOGGING
# =============================================================================

LOG_LEVEL = get_secret("LOG_LEVEL", "INFO")


# =============================================================================
# LANDING PAGE CSS
# =============================================================================

def get_landing_css() -> str:
    """Get CSS for the landing page - soft sage branding"""
    palette = f"""
<style>
    :root {{
        --sage: {PRIMARY_SAGE};
        --sage-dark: {PRIMARY_SAGE_DARK};
        --sage-darker: {PRIMARY_SAGE_DARKER};
        --tint: {TINT_BACKGROUND};
    }}
</style>
"""
    return palette + """
<style>
    /* Import clean font */
    @import url('https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600;700&family=Fraunces:wght@500;600&display=swap');

    /* Hide Streamlit chrome for landing page */
    #MainMenu {visibility: hidden;}
    footer {visibility: hidden;}
    header[data-testid="stHeader"] {visibility: hidden;}
    .stDeployButton {display: none;}

    /* Global font */
    html, body, [class*="css"] {
        font-family: 'Inter', -apple-system, BlinkMacSystemFont, sans-serif;
    }

    /* Smooth scrolling */
    html {
        scroll-behavior: smooth;
    }

    .block-container {
        max-width: 1100px !important;
        padding-top: 1rem !important;
        padding-bottom: 2rem !important;
    }

    /* Skip link */
    .skip-link {
        position: absolute;
        left: -9999px;
        top: 0;
    }

    .skip-link:focus {
        left: 1rem;
        top: 1rem;
        background: #ffffff;
        padding: 0.5rem 0.75rem;
        border-radius: 8px;
        z-index: 1000;
    }

    /* Header / nav */
    .site-header {
        display: flex;
        justify-content: space-between;
        align-items: center;
        padding: 0.75rem 0;
        border-bottom: 1px solid #d7e7e1;
    }

    .brand {
        display: flex;
        align-items: center;
        gap: 0.6rem;
        font-weight: 700;
        font-size: 1.2rem;
        color: var(--sage-darker);
    }

    .brand-mark {
        display: inline-block;
        width: 22px;
        height: 22px;
        border-radius: 50%;
        background: linear-gradient(135deg, var(--sage) 0%, #a7cfc2 100%);
    }

    .nav {
        display: flex;
        gap: 1.75rem;
    }

    .nav-link {
        color: #475569;
        text-decoration: none;
        font-weight: 500;
    }

    .nav-link:hover {
        color: var(--sage-dark);
    }

    /* Hero */
    .kicker {
        text-transform: uppercase;
        letter-spacing: 0.08em;
        font-size: 0.85rem;
        color: var(--sage);
        font-weight: 600;
    }

    .hero-title {
        font-family: 'Fraunces', Georgia, serif;
        font-size: 2.9rem;
        line-height: 1.15;
        color: #0f172a;
        margin: 0.5rem 0 1rem 0;
    }

    .hero-lead {
        font-size: 1.2rem;
        color: #475569;
        line-height: 1.6;
    }

    .hero-bullets, .steps {
        list-style: none;
        padding: 0;
        margin: 1rem 0;
    }

    .hero-bullet, .step {
        display: flex;
        align-items: flex-start;
        gap: 0.6rem;
        margin-bottom: 0.6rem;
        color: #334155;
    }

    .hero-card {
        background: #ffffff;
        border: 1px solid #d7e7e1;
        border-radius: 16px;
        padding: 1.5rem;
        box-shadow: 0 8px 24px rgba(63, 125, 110, 0.08);
    }

    .card-eyebrow, .eyebrow {
        text-transform: uppercase;
        letter-spacing: 0.08em;
        font-size: 0.8rem;
        color: var(--sage);
        font-weight: 600;
        margin-bottom: 0.25rem;
    }

    .card-title {
        font-size: 1.35rem;
        color: #0f172a;
        margin: 0 0 1rem 0;
    }

    .feature {
        display: flex;
        gap: 0.75rem;
        margin-bottom: 0.9rem;
    }

    .feature-title {
        font-weight: 600;
        color: var(--sage-darker);
        margin: 0;
    }

    .feature-desc {
        color: #64748b;
        margin: 0;
        font-size: 0.95rem;
    }

    /* Icons */
    .icon {
        width: 20px;
        height: 20px;
        fill: var(--sage);
        flex-shrink: 0;
    }

    /* Sections */
    .section-header {
        text-align: center;
        margin: 2rem 0 1.5rem 0;
    }

    .section-title {
        font-family: 'Fraunces', Georgia, serif;
        font-size: 2.1rem;
        color: #0f172a;
        margin: 0.25rem 0 0.5rem 0;
    }

    .lead {
        color: #64748b;
        font-size: 1.05rem;
    }

    [class*="st-key-section-tinted"] {
        background: var(--tint);
        border-radius: 20px;
        padding: 0.5rem 1.5rem 1.5rem 1.5rem;
    }

    /* Cards */
    .card, .testimonial {
        background: #ffffff;
        border: 1px solid #d7e7e1;
        border-radius: 14px;
        padding: 1.25rem;
        height: 100%;
    }

    .card h3 {
        color: var(--sage-darker);
        font-size: 1.2rem;
        margin: 0.5rem 0;
    }

    .quote {
        font-size: 1.05rem;
        color: #334155;
        font-style: italic;
    }

    .figcaption {
        display: flex;
        align-items: center;
        gap: 0.6rem;
        margin-top: 1rem;
    }

    .avatar {
        display: inline-block;
        width: 32px;
        height: 32px;
        border-radius: 50%;
        background: #d7e7e1;
    }

    .fig-title {
        display: block;
        font-weight: 600;
        color: var(--sage-darker);
    }

    .fig-sub {
        display: block;
        font-size: 0.8rem;
        color: #94a3b8;
    }

    .inline-cta {
        background: linear-gradient(135deg, var(--tint) 0%, #ffffff 100%);
        border: 1px solid #a7cfc2;
        border-radius: 16px;
        padding: 1.25rem 1.5rem;
        margin-top: 1.5rem;
    }

    .inline-cta-title {
        font-weight: 600;
        font-size: 1.15rem;
        color: #0f172a;
        margin: 0;
    }

    .inline-cta-desc {
        color: #64748b;
        margin: 0.25rem 0 0 0;
    }

    /* Buttons */
    .stButton > button {
        border-radius: 999px !important;
        font-weight: 600 !important;
        padding: 0.6rem 1.4rem !important;
        transition: all 0.2s ease !important;
    }

    .stButton > button[kind="primary"] {
        background: linear-gradient(135deg, var(--sage) 0%, var(--sage-dark) 100%) !important;
        border: none !important;
        color: white !important;
    }

    .stButton > button[kind="primary"]:hover {
        background: linear-gradient(135deg, var(--sage-dark) 0%, var(--sage-darker) 100%) !important;
        box-shadow: 0 4px 12px rgba(63, 125, 110, 0.35) !important;
    }

    .stButton > button[kind="secondary"] {
        background: #ffffff !important;
        border: 1px solid #a7cfc2 !important;
        color: var(--sage-dark) !important;
    }

    .stButton > button[kind="tertiary"] {
        color: var(--sage-dark) !important;
        text-decoration: underline;
    }

    .button {
        display: inline-block;
        border-radius: 999px;
        font-weight: 600;
        padding: 0.6rem 1.4rem;
        text-decoration: none;
    }

    .button-primary {
        background: var(--sage);
        color: #ffffff !important;
    }

    .button-secondary {
        background: #ffffff;
        border: 1px solid #a7cfc2;
        color: var(--sage-dark) !important;
    }

    .button-ghost {
        background: transparent;
        color: var(--sage-dark) !important;
    }

    /* Form */
    .field-top {
        display: flex;
        justify-content: space-between;
        align-items: baseline;
        margin-bottom: 0.2rem;
    }

    .label {
        font-weight: 600;
        color: var(--sage-darker);
        font-size: 0.95rem;
    }

    .required {
        color: #b91c1c;
    }

    .hint {
        font-size: 0.8rem;
        color: #94a3b8;
    }

    .field-error {
        font-size: 0.8rem;
        color: #b91c1c;
        margin-top: -0.5rem;
        margin-bottom: 0.5rem;
    }

    .stTextInput > div > div > input, .stTextArea textarea {
        border-radius: 10px !important;
        border: 1px solid #d7e7e1 !important;
    }

    .form-status {
        border-radius: 10px;
        padding: 0.75rem 1rem;
        margin: 0.75rem 0;
        font-size: 0.95rem;
    }

    .form-status-success {
        background: #ecfdf5;
        border: 1px solid #6ee7b7;
        color: #065f46;
    }

    .form-status-error {
        background: #fef2f2;
        border: 1px solid #fca5a5;
        color: #991b1b;
    }

    .form-fine-print, .small-note {
        font-size: 0.8rem;
        color: #94a3b8;
    }

    .contact-panel {
        background: #ffffff;
        border: 1px solid #d7e7e1;
        border-radius: 14px;
        padding: 1.25rem;
    }

    /* Footer */
    .site-footer {
        border-top: 1px solid #d7e7e1;
        margin-top: 3rem;
        padding: 2rem 0 1rem 0;
        color: #64748b;
    }

    .footer-grid {
        display: flex;
        justify-content: space-between;
        flex-wrap: wrap;
        gap: 1.5rem;
    }

    .footer-text {
        max-width: 420px;
        font-size: 0.9rem;
    }

    .footer-links {
        display: flex;
        gap: 1.5rem;
    }

    .footer-link {
        color: #475569;
        text-decoration: none;
    }

    .footer-link:hover {
        color: var(--sage-dark);
        text-decoration: underline;
    }

    .copyright {
        font-size: 0.8rem;
        color: #94a3b8;
        margin-top: 1.5rem;
        text-align: center;
    }
</style>
"""
