import config
from config import (
    PRIMARY_SAGE,
    PRIMARY_SAGE_DARK,
    PRIMARY_SAGE_DARKER,
    TINT_BACKGROUND,
    get_landing_css,
)


def test_css_palette_comes_from_branding_constants() -> None:
    css = get_landing_css()
    assert f"--sage: {PRIMARY_SAGE};" in css
    assert f"--sage-dark: {PRIMARY_SAGE_DARK};" in css
    assert f"--sage-darker: {PRIMARY_SAGE_DARKER};" in css
    assert f"--tint: {TINT_BACKGROUND};" in css


def test_css_follows_palette_changes(monkeypatch) -> None:
    monkeypatch.setattr(config, "PRIMARY_SAGE", "#123456")
    css = get_landing_css()
    assert "--sage: #123456;" in css
    # Everything else references the variable, not the hex
    assert css.count("#123456") == 1
    assert "var(--sage)" in css
