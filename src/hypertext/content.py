# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

"""
Resolution of builder arguments into a node under construction.

Content is deliberately permissive: ``None``, callables and any shape not
listed below are ignored rather than rejected, so a tree can be assembled
from conditional expressions without guarding each one.

- nodes are appended (fragments dissolve into their children);
- booleans, numbers and strings become text nodes;
- mappings set classes, attributes and event bindings, with nested
  content under the ``content`` key;
- any other iterable is resolved item by item, to any depth.
"""

from __future__ import annotations as _future_annotations

from collections.abc import Iterable, Mapping
from typing import Any

import numbers
import re

from hypertext.host import Document, current_document
from hypertext.normalise import normalise_attribute, normalise_key, normalise_style
from hypertext.serialise import format_value

_CLASS_SEPARATORS = re.compile(r"[ .]")
_EVENT_KEY = re.compile(r"(?:on-?)?(\w+)", re.ASCII)


def add_content(target: Any, content: Any, document: Document[Any] | None = None) -> None:
    _add_content(document or current_document(), target, content)


def _add_content(document: Document[Any], target: Any, content: Any) -> None:
    if content is None:
        return

    if document.is_node(content):
        document.append_child(target, content)
        return

    match content:
        case bool() | numbers.Number() | str():
            document.append_child(target, document.create_text_node(format_value(content)))
        case bytes() | bytearray() | memoryview():
            pass
        case _ if callable(content):
            pass
        case Mapping():
            for key, value in content.items():
                _set_value(document, target, str(key), value)
        case Iterable():
            for item in content:
                _add_content(document, target, item)


def _set_value(document: Document[Any], target: Any, key: str, value: Any) -> None:
    match key:
        case "content":
            _add_content(document, target, value)
        case "class" | "class_":
            _add_class(document, target, value)
        case _ if callable(value):
            _add_event_listener(document, target, key, value)
        case "style":
            if style := normalise_style(value):
                document.set_attribute(target, "style", style)
        case _ if value is not None:
            document.set_attribute(target, normalise_attribute(key), value)


def _add_class(document: Document[Any], target: Any, value: Any) -> None:
    match value:
        case bool() | bytes() | bytearray() | memoryview() | Mapping():
            pass
        case str():
            for token in _CLASS_SEPARATORS.split(value):
                if token:
                    document.add_class(target, token)
        case numbers.Number():
            document.add_class(target, format_value(value))
        case Iterable() if not callable(value):
            for item in value:
                _add_class(document, target, item)


def _add_event_listener(document: Document[Any], target: Any, key: str, listener: Any) -> None:
    if found := _EVENT_KEY.fullmatch(normalise_key(key)):
        document.add_event_listener(target, found.group(1), listener)
