from __future__ import annotations

import pytest

from hypertext.normalise import normalise_attribute, normalise_key, normalise_style, normalise_tag


@pytest.mark.parametrize("value", [None, "", {}, 0, False])
def test_falsy_style_is_absent(value: object) -> None:
    assert normalise_style(value) is None


def test_style_text_is_trusted_verbatim() -> None:
    assert normalise_style("background:green;") == "background:green;"


def test_style_mapping_skips_falsy_declarations() -> None:
    style = {"font_size": "12px", "color": None, "margin": 0, "display": "block", "x": False}

    assert normalise_style(style) == "font-size:12px;display:block;"


@pytest.mark.parametrize("value", [42, ["color:red"], object()])
def test_unsupported_style_is_absent(value: object) -> None:
    assert normalise_style(value) is None


def test_key_replaces_every_underscore() -> None:
    assert normalise_key("data_foo_bar") == "data-foo-bar"
    assert normalise_key("plain") == "plain"


def test_tag_is_lowered_and_hyphenated() -> None:
    assert normalise_tag("Custom_Element") == "custom-element"
    assert normalise_tag("DIV") == "div"


def test_attribute_trailing_underscore_escapes_keywords() -> None:
    assert normalise_attribute("for_") == "for"
    assert normalise_attribute("content_") == "content"
    assert normalise_attribute("data_x") == "data-x"
    assert normalise_attribute("_") == "-"
