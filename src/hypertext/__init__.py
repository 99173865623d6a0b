# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

"""
Declarative builder for HTML trees.

    from hypertext import elements as h

    h.div(
        {"class": "card.wide", "data_id": 7, "content": [h.p("child 1")]},
        h.p("child 2"),
        [h.p("child 3"), h.p("child 4")],
    ).to_html(indent=2)
"""

from __future__ import annotations as _future_annotations

from hypertext.builder import create_element, create_fragment
from hypertext.content import add_content
from hypertext.elements import KNOWN_TAGS, Elements
from hypertext.errors import HierarchyRequestError, HypertextError, ReadOnlyFactoryError
from hypertext.host import (
    Document,
    MinidomDocument,
    StandaloneDocument,
    configure,
    current_document,
)
from hypertext.nodes import Element, Fragment, Node, Text
from hypertext.normalise import (
    normalise_attribute,
    normalise_key,
    normalise_style,
    normalise_tag,
)
from hypertext.serialise import VOID_ELEMENTS, serialise
from hypertext.templates import TEMPLATES, checkbox, fragment, numberbox, stylesheet, textbox

elements = Elements(TEMPLATES, KNOWN_TAGS)

__all__ = [
    "KNOWN_TAGS",
    "TEMPLATES",
    "VOID_ELEMENTS",
    "Document",
    "Element",
    "Elements",
    "Fragment",
    "HierarchyRequestError",
    "HypertextError",
    "MinidomDocument",
    "Node",
    "ReadOnlyFactoryError",
    "StandaloneDocument",
    "Text",
    "add_content",
    "checkbox",
    "configure",
    "create_element",
    "create_fragment",
    "current_document",
    "elements",
    "fragment",
    "normalise_attribute",
    "normalise_key",
    "normalise_style",
    "normalise_tag",
    "numberbox",
    "serialise",
    "stylesheet",
    "textbox",
]
