"""Tests règles de style — tables + repli sur valeur par défaut."""
import pytest

from page_studio.blocks import GradientBackground, ImageBackground, SolidBackground
from page_studio.core.schemas import GlobalSettings
from page_studio.core.styles import (
    generate_css_variables, google_font_url, palette_variables, resolve_animation_class,
    resolve_background, resolve_font, resolve_grid_columns, resolve_justify,
    resolve_padding, resolve_radius,
)


@pytest.mark.parametrize("value, token", [
    ("none", "pt-0"), ("xs", "pt-8"), ("sm", "pt-12"), ("md", "pt-20"),
    ("lg", "pt-32"), ("xl", "pt-48"), ("2xl", "pt-64"),
])
def test_padding_scale(value, token):
    assert resolve_padding(value, "top") == token


@pytest.mark.parametrize("value", ["huge", "", None, "XL"])
def test_padding_falls_back_to_md(value):
    assert resolve_padding(value, "top") == "pt-20"
    assert resolve_padding(value, "bottom") == "pb-20"


def test_radius():
    assert resolve_radius("none") == "rounded-none"
    assert resolve_radius("sm") == "rounded"
    assert resolve_radius("full") == "rounded-full"
    assert resolve_radius("weird") == resolve_radius("md") == "rounded-lg"


def test_animation_class():
    assert resolve_animation_class("fade-in") == "animate__animated animate__fadeIn"
    assert resolve_animation_class("slide-up") == "animate__animated animate__slideInUp"
    assert resolve_animation_class("bounce") == "animate__animated animate__bounce"
    assert resolve_animation_class("none") == ""
    assert resolve_animation_class("wobble") == ""


def test_background_modes():
    assert resolve_background(SolidBackground(color="#fff")) == {"background-color": "#fff"}
    gradient = GradientBackground(gradient="linear-gradient(red, blue)")
    assert resolve_background(gradient) == {"background-image": "linear-gradient(red, blue)"}
    image = resolve_background(ImageBackground(url="/bg.jpg"))
    assert image == {
        "background-image": "url(/bg.jpg)",
        "background-size": "cover",
        "background-position": "center",
    }
    assert resolve_background(None) == {"background-color": "transparent"}


def test_layout_helpers():
    assert resolve_grid_columns(2) == "md:grid-cols-2"
    assert resolve_grid_columns(4) == "md:grid-cols-2 lg:grid-cols-4"
    assert resolve_grid_columns(7) == "md:grid-cols-3"
    assert resolve_justify("right") == "end"
    assert resolve_justify(None) == "start"


def test_fonts():
    assert resolve_font("display") == ("Playfair Display", "Playfair+Display")
    assert resolve_font("comic") == ("Inter", "Inter")
    assert "family=Roboto+Mono" in google_font_url("mono")


def test_css_variables():
    settings = GlobalSettings(primary_color="#123456")
    variables = palette_variables(settings)
    assert list(variables)[:5] == [
        "--color-primary", "--color-secondary", "--color-bg", "--color-text", "--color-accent",
    ]
    css = generate_css_variables(settings)
    assert css.startswith(":root {")
    assert "--color-primary: #123456;" in css
    assert "--color-accent: #FBBF24;" in css
