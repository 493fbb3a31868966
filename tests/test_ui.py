# HTML helpers are pure functions, so their accessibility attributes and
# variant classes are asserted on the returned markup.

import pytest

from components import ui
from components.ui import (
    ICON_PATHS,
    ButtonMode,
    ButtonVariant,
    IconName,
    button,
    render_field_label,
    render_icon,
    render_link_button,
    render_section_header,
)


def test_every_icon_has_a_path() -> None:
    assert set(ICON_PATHS) == set(IconName)
    assert all(path.startswith("M") for path in ICON_PATHS.values())


def test_decorative_icon_is_hidden() -> None:
    svg = render_icon(IconName.HEART)
    assert 'role="presentation"' in svg
    assert 'aria-hidden="true"' in svg
    assert 'focusable="false"' in svg
    assert ICON_PATHS[IconName.HEART] in svg


def test_titled_icon_is_announced() -> None:
    svg = render_icon(IconName.SHIELD, title="Safe & private")
    assert 'role="img"' in svg
    assert 'aria-label="Safe &amp; private"' in svg
    assert "aria-hidden" not in svg


@pytest.mark.parametrize("variant", list(ButtonVariant))
def test_link_button_variant_class(variant: ButtonVariant) -> None:
    html = render_link_button("Contact", "#contact", variant)
    assert html.startswith('<a class="button button-%s"' % variant.value)
    assert 'href="#contact"' in html


def test_link_button_escapes_label() -> None:
    assert "<b>" not in render_link_button("<b>Hi</b>", "#x")


def test_link_mode_requires_href() -> None:
    with pytest.raises(ValueError):
        button("Go", ButtonMode.LINK)


def test_action_mode_requires_key() -> None:
    with pytest.raises(ValueError):
        button("Go", ButtonMode.ACTION)


def test_link_mode_draws_anchor_with_extra_class(monkeypatch) -> None:
    drawn = []
    monkeypatch.setattr(ui.st, "markdown", lambda body, unsafe_allow_html: drawn.append(body))

    clicked = button("Skip to content", ButtonMode.LINK, ButtonVariant.GHOST,
                     href="#main", class_name="skip-link")

    assert clicked is False
    assert drawn == ['<a class="button button-ghost skip-link" href="#main">Skip to content</a>']


def test_section_header_parts() -> None:
    html = render_section_header("Services", "Support", "Pick one")
    assert '<p class="eyebrow">Services</p>' in html
    assert '<h2 class="section-title">Support</h2>' in html
    assert '<p class="lead">Pick one</p>' in html


def test_section_header_empty_when_nothing_given() -> None:
    assert render_section_header() == ""


def test_section_header_title_only() -> None:
    html = render_section_header(title="Only")
    assert "eyebrow" not in html
    assert "lead" not in html


def test_field_label_required_and_hint() -> None:
    required = render_field_label("Email", required=True)
    assert '<span class="label">Email' in required
    assert "<label" not in required
    assert '<span class="required">*</span>' in required
    assert "hint" not in required

    optional = render_field_label("Phone", hint="Optional")
    assert '<span class="hint">Optional</span>' in optional
    assert "required" not in optional
