"""
Melanie's Therapy Practice - Landing Page

A single marketing page:
1. Header with in-page navigation
2. Hero with calls to action
3. Services and testimonials
4. Contact form (simulated delivery unless a webhook is configured)
5. Footer
"""

from datetime import datetime
from html import escape

import streamlit as st

from config import (
    PRACTICE_NAME,
    MAIN_ID,
    SERVICES_ID,
    TESTIMONIALS_ID,
    CONTACT_ID,
    CONTACT_METHODS,
    CONTACT_METHOD_PLACEHOLDER,
    SUBMITTING_LABEL,
    get_landing_css,
)
from content import (
    SERVICES,
    TESTIMONIALS,
    HERO_KICKER,
    HERO_TITLE,
    HERO_LEAD,
    HERO_HIGHLIGHTS,
    FOCUS_EYEBROW,
    FOCUS_TITLE,
    FOCUS_AREAS,
    NEXT_STEPS,
    FOOTER_TEXT,
)
from components.ui import (
    ButtonMode,
    ButtonVariant,
    SectionTone,
    button,
    field,
    render_icon,
    section,
)
from components.navigation import request_scroll, flush_scroll_request
from features.contact_form import ContactFormController, FIELD_KEYS, SubmissionPhase
from services.contact_backend import get_contact_backend
from utils.session_state import init_session_state


def scroll_button(label: str, target_id: str, key: str, variant: ButtonVariant = ButtonVariant.PRIMARY):
    """Action button that smooth-scrolls to another section"""
    button(
        label,
        ButtonMode.ACTION,
        variant,
        key=key,
        on_click=request_scroll,
        args=(st.session_state, target_id),
    )


def render_icon_list(items, list_class: str, item_class: str, label: str = None) -> str:
    """Bulleted list where every bullet is an icon"""
    aria = f' aria-label="{escape(label)}"' if label else ''
    rows = "".join(
        f'<li class="{item_class}"><span aria-hidden="true">{render_icon(item.icon)}</span>'
        f'<span>{escape(item.text)}</span></li>'
        for item in items
    )
    return f'<ul class="{list_class}"{aria}>{rows}</ul>'


def render_header():
    """Render skip link, brand and primary navigation"""
    button("Skip to content", ButtonMode.LINK, ButtonVariant.GHOST,
           href=f"#{MAIN_ID}", class_name="skip-link")

    col_nav, col_cta = st.columns([4, 1], vertical_alignment="center")
    with col_nav:
        st.markdown(f"""
            <div class="site-header">
                <div class="brand" aria-label="{escape(PRACTICE_NAME)}">
                    <span class="brand-mark" aria-hidden="true"></span>
                    <span class="brand-text">{escape(PRACTICE_NAME)}</span>
                </div>
                <nav class="nav" aria-label="Primary">
                    <a class="nav-link" href="#{SERVICES_ID}">Services</a>
                    <a class="nav-link" href="#{TESTIMONIALS_ID}">Testimonials</a>
                    <a class="nav-link" href="#{CONTACT_ID}">Contact</a>
                </nav>
            </div>
        """, unsafe_allow_html=True)
    with col_cta:
        scroll_button("Book a Consultation", CONTACT_ID, key="nav_cta")


def render_hero():
    """Render the hero copy, calls to action and the focus card"""
    st.markdown(f'<div id="{MAIN_ID}"></div>', unsafe_allow_html=True)

    col_copy, col_card = st.columns([3, 2], gap="large")

    with col_copy:
        st.markdown(f"""
            <p class="kicker">{escape(HERO_KICKER)}</p>
            <h1 class="hero-title">{escape(HERO_TITLE)}</h1>
            <p class="hero-lead">{escape(HERO_LEAD)}</p>
        """, unsafe_allow_html=True)

        col_primary, col_secondary = st.columns(2)
        with col_primary:
            scroll_button("Schedule a Free Consultation", CONTACT_ID, key="hero_primary_cta")
        with col_secondary:
            scroll_button("Explore Services", SERVICES_ID, key="hero_secondary_cta",
                          variant=ButtonVariant.SECONDARY)

        st.markdown(
            render_icon_list(HERO_HIGHLIGHTS, "hero-bullets", "hero-bullet", label="Highlights"),
            unsafe_allow_html=True
        )

    with col_card:
        features_html = "".join(
            f'<div class="feature">'
            f'<div class="feature-icon" aria-hidden="true">{render_icon(f.icon)}</div>'
            f'<div class="feature-text">'
            f'<p class="feature-title">{escape(f.title)}</p>'
            f'<p class="feature-desc">{escape(f.description)}</p>'
            f'</div></div>'
            for f in FOCUS_AREAS
        )
        st.markdown(f"""
            <aside class="hero-card" aria-label="What you can expect">
                <p class="card-eyebrow">{escape(FOCUS_EYEBROW)}</p>
                <h2 class="card-title">{escape(FOCUS_TITLE)}</h2>
                {features_html}
            </aside>
        """, unsafe_allow_html=True)
        scroll_button("Start the conversation", CONTACT_ID, key="hero_card_cta",
                      variant=ButtonVariant.GHOST)


def render_services():
    """Render the services cards"""
    with section(
        SERVICES_ID,
        label="Services",
        eyebrow="Services",
        title="Support tailored to your needs",
        subtitle="Choose the kind of support that fits where you are right now.",
        tone=SectionTone.TINTED,
    ):
        columns = st.columns(len(SERVICES))
        for i, (col, service) in enumerate(zip(columns, SERVICES)):
            with col:
                st.markdown(f"""
                    <article class="card">
                        <div class="card-icon" aria-hidden="true">{render_icon(service.icon)}</div>
                        <h3>{escape(service.title)}</h3>
                        <p>{escape(service.description)}</p>
                    </article>
                """, unsafe_allow_html=True)
                scroll_button("Request availability", CONTACT_ID, key=f"service_cta_{i}",
                              variant=ButtonVariant.SECONDARY)


def render_testimonials():
    """Render client quotes and the inline call to action"""
    with section(
        TESTIMONIALS_ID,
        label="Testimonials",
        eyebrow="Testimonials",
        title="Real words from real people",
        subtitle="A few reflections from clients who wanted something to change—and made it happen.",
    ):
        columns = st.columns(len(TESTIMONIALS))
        for col, testimonial in zip(columns, TESTIMONIALS):
            with col:
                st.markdown(f"""
                    <figure class="testimonial">
                        <blockquote><p class="quote">&ldquo;{escape(testimonial.quote)}&rdquo;</p></blockquote>
                        <figcaption class="figcaption">
                            <span class="avatar" aria-hidden="true"></span>
                            <div>
                                <span class="fig-title">Client</span>
                                <span class="fig-sub">Verified testimonial</span>
                            </div>
                        </figcaption>
                    </figure>
                """, unsafe_allow_html=True)

        col_text, col_action = st.columns([3, 1], vertical_alignment="center")
        with col_text:
            st.markdown("""
                <div class="inline-cta">
                    <p class="inline-cta-title">Ready to stop repeating the same fight?</p>
                    <p class="inline-cta-desc">Reach out and we’ll take the next step together.</p>
                </div>
            """, unsafe_allow_html=True)
        with col_action:
            scroll_button("Contact Melanie", CONTACT_ID, key="testimonials_cta")


def render_form_status(controller: ContactFormController):
    """Live region for the submit outcome; hidden while idle"""
    status = controller.status
    role = controller.status_role
    if role is None:
        return

    tone = "success" if status.phase is SubmissionPhase.SUCCESS else "error"
    st.markdown(f"""
        <div class="form-status form-status-{tone}" role="{role}" aria-live="polite">
            {escape(status.message)}
        </div>
    """, unsafe_allow_html=True)


def render_contact_form(controller: ContactFormController):
    """Render the contact form controls wired to the controller"""
    errors = controller.errors

    col_left, col_right = st.columns(2)
    with col_left:
        with field("Full Name", required=True, error=errors.get("fullName")):
            st.text_input("Full Name", key=FIELD_KEYS["fullName"], autocomplete="name",
                          label_visibility="collapsed")
    with col_right:
        with field("Email", required=True, error=errors.get("email")):
            st.text_input("Email", key=FIELD_KEYS["email"], autocomplete="email",
                          label_visibility="collapsed")

    col_left, col_right = st.columns(2)
    with col_left:
        with field("Phone", hint="Optional"):
            st.text_input("Phone", key=FIELD_KEYS["phone"], autocomplete="tel",
                          on_change=controller.on_phone_change,
                          label_visibility="collapsed")
    with col_right:
        with field("Preferred Contact Method", required=True,
                   error=errors.get("preferredContactMethod")):
            st.selectbox(
                "Preferred Contact Method",
                options=list(CONTACT_METHODS),
                index=None,
                placeholder=CONTACT_METHOD_PLACEHOLDER,
                key=FIELD_KEYS["preferredContactMethod"],
                label_visibility="collapsed",
            )

    with field("Message", required=True, error=errors.get("message")):
        st.text_area("Message", key=FIELD_KEYS["message"], height=160,
                     label_visibility="collapsed")

    render_form_status(controller)

    button(
        controller.submit_label,
        ButtonMode.ACTION,
        ButtonVariant.PRIMARY,
        key="contact_submit",
        on_click=controller.submit,
        disabled=controller.status.is_submitting,
    )
    st.markdown("""
        <p class="form-fine-print">By sending, you agree to be contacted about your request.</p>
    """, unsafe_allow_html=True)


def render_contact(controller: ContactFormController):
    """Render the contact section: next steps and the form"""
    with section(
        CONTACT_ID,
        label="Contact form",
        eyebrow="Contact",
        title="Send a message",
        subtitle="Share a little about what you’re navigating. You’ll hear back using your preferred contact method.",
        tone=SectionTone.TINTED,
    ):
        col_intro, col_form = st.columns([2, 3], gap="large")
        with col_intro:
            steps_html = render_icon_list(NEXT_STEPS, "steps", "step")
            st.markdown(f"""
                <div class="contact-panel" aria-label="Contact details">
                    <h3>What happens next</h3>
                    {steps_html}
                    <p class="small-note">Your message is treated with care and confidentiality.</p>
                </div>
            """, unsafe_allow_html=True)
        with col_form:
            render_contact_form(controller)


def render_footer():
    """Render footer"""
    year = datetime.now().year
    st.markdown(f"""
        <footer class="site-footer" aria-label="Footer">
            <div class="footer-grid">
                <div>
                    <div class="brand">
                        <span class="brand-mark" aria-hidden="true"></span>
                        <span>{escape(PRACTICE_NAME)}</span>
                    </div>
                    <p class="footer-text">{escape(FOOTER_TEXT)}</p>
                </div>
                <div class="footer-links" aria-label="Quick links">
                    <a class="footer-link" href="#{SERVICES_ID}">Services</a>
                    <a class="footer-link" href="#{TESTIMONIALS_ID}">Testimonials</a>
                    <a class="footer-link" href="#{CONTACT_ID}">Contact</a>
                </div>
            </div>
            <p class="copyright">© {year} {escape(PRACTICE_NAME)}. All rights reserved.</p>
        </footer>
    """, unsafe_allow_html=True)


def render_landing_page():
    """Main landing page renderer"""

    # Apply custom CSS
    st.markdown(get_landing_css(), unsafe_allow_html=True)

    init_session_state()
    controller = ContactFormController(st.session_state, get_contact_backend())
    # Widget values can only be reset before the widgets are drawn
    controller.apply_pending_clear()

    render_header()
    render_hero()
    render_services()
    render_testimonials()
    render_contact(controller)
    render_footer()

    # Scroll only after every anchor exists on the page
    flush_scroll_request(st.session_state)

    # Second half of a submit: the form above already shows "Sending…"
    if controller.status.is_submitting:
        with st.spinner(SUBMITTING_LABEL):
            finished = controller.process_pending()
        if finished:
            st.rerun()


# Allow running standalone for testing
if __name__ == "__main__":
    render_landing_page()
