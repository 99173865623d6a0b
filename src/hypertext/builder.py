# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

from __future__ import annotations as _future_annotations

from collections.abc import Callable
from typing import Any

from hypertext.content import add_content
from hypertext.host import Document, current_document

Builder = Callable[..., Any]


def create_element(tag: str, *content: Any, document: Document[Any] | None = None) -> Any:
    document = document or current_document()
    element = document.create_element(tag)
    add_content(element, content, document)
    return element


def create_fragment(*content: Any, document: Document[Any] | None = None) -> Any:
    document = document or current_document()
    fragment = document.create_document_fragment()
    add_content(fragment, content, document)
    return fragment
