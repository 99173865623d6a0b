# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

from __future__ import annotations as _future_annotations

from collections.abc import Callable
from typing import Any

from hypertext.builder import Builder, create_element, create_fragment
from hypertext.serialise import is_number


def _take_first(
    content: tuple[Any, ...],
    predicate: Callable[[Any], bool],
) -> tuple[Any, list[Any]]:
    for index, item in enumerate(content):
        if predicate(item):
            return item, [*content[:index], *content[index + 1 :]]

    return None, list(content)


def _input(name: str, kind: str, promote: str, predicate: Callable[[Any], bool]) -> Builder:
    def template(*content: Any) -> Any:
        value, rest = _take_first(content, predicate)
        attributes: dict[str, Any] = {"type": kind}
        if value is not None:
            attributes[promote] = value
        return create_element("input", attributes, rest)

    template.__name__ = template.__qualname__ = name
    return template


checkbox = _input("checkbox", "checkbox", "checked", lambda item: isinstance(item, bool))
numberbox = _input("numberbox", "number", "value", is_number)
textbox = _input("textbox", "text", "value", lambda item: isinstance(item, str))


def stylesheet(*content: Any) -> Any:
    href, rest = _take_first(content, lambda item: isinstance(item, str))
    attributes: dict[str, Any] = {"rel": "stylesheet"}
    if href is not None:
        attributes["href"] = href
    return create_element("link", attributes, rest)


def fragment(*content: Any) -> Any:
    return create_fragment(content)


TEMPLATES: dict[str, Builder] = {
    "checkbox": checkbox,
    "numberbox": numberbox,
    "textbox": textbox,
    "stylesheet": stylesheet,
    "fragment": fragment,
}
