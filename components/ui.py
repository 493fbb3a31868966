"""
Presentational building blocks for the landing page.

Icon, Button, Section and Field. Everything here is a pure function of its
inputs: HTML helpers return strings, Streamlit helpers only draw widgets.
"""

from contextlib import contextmanager
from enum import Enum
from html import escape
from typing import Any, Callable, Iterator, Optional, Sequence

import streamlit as st


class IconName(Enum):
    CHECK = "check"
    SPARKLE = "sparkle"
    CHAT = "chat"
    HEART = "heart"
    SHIELD = "shield"


ICON_PATHS = {
    IconName.CHECK: "M9.0 16.2 4.8 12.0l-1.4 1.4L9.0 19 21 7.0l-1.4-1.4z",
    IconName.SPARKLE: "M12 2l1.4 4.6L18 8l-4.6 1.4L12 14l-1.4-4.6L6 8l4.6-1.4z",
    IconName.CHAT: "M21 6a4 4 0 0 0-4-4H7A4 4 0 0 0 3 6v7a4 4 0 0 0 4 4h2v3l4-3h4a4 4 0 0 0 4-4z",
    IconName.HEART: "M12 21s-7-4.4-9.3-9A5.6 5.6 0 0 1 12 5.6 5.6 5.6 0 0 1 21.3 12C19 16.6 12 21 12 21z",
    IconName.SHIELD: "M12 2 20 6v6c0 5-3.4 9.4-8 10-4.6-.6-8-5-8-10V6z",
}


def render_icon(name: IconName, title: Optional[str] = None) -> str:
    """
    Render an icon as inline SVG.

    Titled icons are announced as images; untitled ones are hidden from
    assistive technology.
    """
    if title:
        a11y = f'role="img" aria-label="{escape(title)}"'
    else:
        a11y = 'role="presentation" aria-hidden="true"'
    return (
        f'<svg class="icon" viewBox="0 0 24 24" {a11y} focusable="false">'
        f'<path d="{ICON_PATHS[name]}" /></svg>'
    )


class ButtonMode(Enum):
    """Navigational link vs. actionable control"""
    LINK = "link"
    ACTION = "action"


class ButtonVariant(Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"
    GHOST = "ghost"


# Streamlit button types backing each variant
_STREAMLIT_BUTTON_TYPES = {
    ButtonVariant.PRIMARY: "primary",
    ButtonVariant.SECONDARY: "secondary",
    ButtonVariant.GHOST: "tertiary",
}


def button_classes(variant: ButtonVariant, extra: Optional[str] = None) -> str:
    classes = ["button", f"button-{variant.value}"]
    if extra:
        classes.append(extra)
    return " ".join(classes)


def render_link_button(
    label: str,
    href: str,
    variant: ButtonVariant = ButtonVariant.PRIMARY,
    class_name: Optional[str] = None
) -> str:
    """Render a link styled as a button"""
    return (
        f'<a class="{button_classes(variant, class_name)}" href="{escape(href)}">'
        f'{escape(label)}</a>'
    )


def action_button(
    label: str,
    key: str,
    variant: ButtonVariant = ButtonVariant.PRIMARY,
    on_click: Optional[Callable] = None,
    args: Sequence[Any] = (),
    disabled: bool = False,
    full_width: bool = False
) -> bool:
    """Render an actionable button; returns True on the run it was clicked"""
    return st.button(
        label,
        key=key,
        type=_STREAMLIT_BUTTON_TYPES[variant],
        on_click=on_click,
        args=tuple(args),
        disabled=disabled,
        use_container_width=full_width,
    )


def button(
    label: str,
    mode: ButtonMode,
    variant: ButtonVariant = ButtonVariant.PRIMARY,
    href: Optional[str] = None,
    key: Optional[str] = None,
    on_click: Optional[Callable] = None,
    args: Sequence[Any] = (),
    disabled: bool = False,
    full_width: bool = False,
    class_name: Optional[str] = None
) -> bool:
    """
    Render a button in either mode.

    LINK mode needs href and draws an anchor (never "clicked" from Python).
    ACTION mode needs key and draws a Streamlit button.
    """
    if mode is ButtonMode.LINK:
        if href is None:
            raise ValueError("Link buttons need an href")
        st.markdown(render_link_button(label, href, variant, class_name), unsafe_allow_html=True)
        return False

    if key is None:
        raise ValueError("Action buttons need a key")
    return action_button(
        label,
        key=key,
        variant=variant,
        on_click=on_click,
        args=args,
        disabled=disabled,
        full_width=full_width,
    )


class SectionTone(Enum):
    DEFAULT = "default"
    TINTED = "tinted"


def render_section_header(
    eyebrow: Optional[str] = None,
    title: Optional[str] = None,
    subtitle: Optional[str] = None
) -> str:
    """Heading group for a section; empty when there is nothing to show"""
    if not (eyebrow or title or subtitle):
        return ""

    parts = ['<header class="section-header">']
    if eyebrow:
        parts.append(f'<p class="eyebrow">{escape(eyebrow)}</p>')
    if title:
        parts.append(f'<h2 class="section-title">{escape(title)}</h2>')
    if subtitle:
        parts.append(f'<p class="lead">{escape(subtitle)}</p>')
    parts.append('</header>')
    return "".join(parts)


@contextmanager
def section(
    section_id: Optional[str] = None,
    label: Optional[str] = None,
    eyebrow: Optional[str] = None,
    title: Optional[str] = None,
    subtitle: Optional[str] = None,
    tone: SectionTone = SectionTone.DEFAULT
) -> Iterator[Any]:
    """
    Layout wrapper for a page section.

    Usage:
        with section("services", label="Services", title="...", tone=SectionTone.TINTED):
            st.markdown(...)
    """
    key = f"section-{tone.value}-{section_id or 'anonymous'}"
    with st.container(key=key) as container:
        if section_id:
            aria = f' aria-label="{escape(label)}"' if label else ""
            st.markdown(f'<div id="{escape(section_id)}"{aria}></div>', unsafe_allow_html=True)
        header = render_section_header(eyebrow, title, subtitle)
        if header:
            st.markdown(header, unsafe_allow_html=True)
        yield container


def render_field_label(
    label: str,
    hint: Optional[str] = None,
    required: bool = False
) -> str:
    """
    Visible label row. Decorative only: the widget drawn below keeps its own
    (collapsed) label, which is what assistive technology announces.
    """
    required_html = ' <span class="required">*</span>' if required else ''
    hint_html = f'<span class="hint">{escape(hint)}</span>' if hint else ''
    return (
        f'<div class="field-top">'
        f'<span class="label">{escape(label)}{required_html}</span>'
        f'{hint_html}'
        f'</div>'
    )


@contextmanager
def field(
    label: str,
    hint: Optional[str] = None,
    required: bool = False,
    error: Optional[str] = None
) -> Iterator[None]:
    """
    Label row, then whatever control the caller draws inside the block,
    then the caller-supplied validation message, if any.

    Usage:
        with field("Email", required=True, error=errors.get("email")):
            st.text_input("Email", key="contact_email", label_visibility="collapsed")
    """
    st.markdown(render_field_label(label, hint, required), unsafe_allow_html=True)
    yield
    if error:
        st.markdown(f'<p class="field-error">{escape(error)}</p>', unsafe_allow_html=True)
