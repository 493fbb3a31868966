# End-to-end runs of the Streamlit script with AppTest: rendering, phone
# formatting on change, both submit outcomes and scroll navigation.

from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from config import CONTACT_METHODS, SUBMIT_LABEL, SUBMITTING_LABEL, SUCCESS_MESSAGE
from features.contact_form import FIELD_KEYS, STATUS_KEY, ContactFormController

APP_PATH = str(Path(__file__).resolve().parent.parent / "app.py")


@pytest.fixture
def app(no_submit_delay) -> AppTest:
    at = AppTest.from_file(APP_PATH, default_timeout=30)
    at.run()
    assert not at.exception
    return at


def _markdown_text(at: AppTest) -> str:
    return "\n".join(md.value for md in at.markdown)


def test_page_renders_all_sections(app: AppTest) -> None:
    text = _markdown_text(app)
    for anchor in ('id="main"', 'id="services"', 'id="testimonials"', 'id="contact"'):
        assert anchor in text
    assert "1:1 Therapy" in text
    assert "Couples &amp; Family Therapy" in text
    assert "Intuitive Readings" in text
    assert "All rights reserved." in text


def test_contact_method_options(app: AppTest) -> None:
    select = app.selectbox(key=FIELD_KEYS["preferredContactMethod"])
    assert list(select.options) == list(CONTACT_METHODS)
    assert select.value is None


def test_phone_is_formatted_on_change(app: AppTest) -> None:
    app.text_input(key=FIELD_KEYS["phone"]).input("555 123 4567").run()
    assert app.text_input(key=FIELD_KEYS["phone"]).value == "(555) 123-4567"


def test_empty_submit_keeps_idle(app: AppTest) -> None:
    app.text_input(key=FIELD_KEYS["fullName"]).input("Jordan").run()
    app.button(key="contact_submit").click().run()

    assert not app.exception
    assert app.session_state[STATUS_KEY].phase.value == "idle"
    assert app.text_input(key=FIELD_KEYS["fullName"]).value == "Jordan"
    assert "Email is required." in _markdown_text(app)
    assert SUCCESS_MESSAGE not in _markdown_text(app)


def _fill_form(at: AppTest) -> None:
    at.text_input(key=FIELD_KEYS["fullName"]).input("Jordan Lee")
    at.text_input(key=FIELD_KEYS["email"]).input("jordan@example.com")
    at.selectbox(key=FIELD_KEYS["preferredContactMethod"]).select("Phone")
    at.text_area(key=FIELD_KEYS["message"]).input("Hello there")
    at.run()


def test_valid_submit_clears_form_and_confirms(app: AppTest) -> None:
    _fill_form(app)

    app.button(key="contact_submit").click().run()

    assert not app.exception
    assert app.session_state[STATUS_KEY].phase.value == "success"
    assert app.text_input(key=FIELD_KEYS["fullName"]).value == ""
    assert app.text_input(key=FIELD_KEYS["email"]).value == ""
    assert app.text_area(key=FIELD_KEYS["message"]).value == ""
    assert app.selectbox(key=FIELD_KEYS["preferredContactMethod"]).value is None
    assert 'role="status"' in _markdown_text(app)


def test_scroll_button_consumes_request(app: AppTest) -> None:
    app.button(key="nav_cta").click().run()

    assert not app.exception
    assert app.session_state["scroll_target"] is None


def test_submit_shows_sending_state_before_delivery(app: AppTest, monkeypatch) -> None:
    deliver = ContactFormController.process_pending
    monkeypatch.setattr(ContactFormController, "process_pending", lambda self: False)
    _fill_form(app)

    app.button(key="contact_submit").click().run()

    assert not app.exception
    submit = app.button(key="contact_submit")
    assert submit.label == SUBMITTING_LABEL
    assert submit.disabled is True
    assert app.session_state[STATUS_KEY].phase.value == "submitting"
    assert app.text_input(key=FIELD_KEYS["fullName"]).value == "Jordan Lee"

    # Let the next run deliver
    monkeypatch.setattr(ContactFormController, "process_pending", deliver)
    app.run()

    assert not app.exception
    submit = app.button(key="contact_submit")
    assert submit.label == SUBMIT_LABEL
    assert submit.disabled is False
    assert app.session_state[STATUS_KEY].phase.value == "success"
    assert app.text_input(key=FIELD_KEYS["fullName"]).value == ""


def test_skip_link_is_rendered_as_link_button(app: AppTest) -> None:
    assert 'class="button button-ghost skip-link" href="#main"' in _markdown_text(app)
