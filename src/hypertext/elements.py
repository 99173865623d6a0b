# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

"""
Name-indexed element builders.

``elements.div(...)``, ``elements["div"](...)`` and
``elements.custom_element(...)`` all hand back a builder for the tag, with
the name lower-cased and underscores turned into hyphens. Builders are made
on first use and kept; the surface itself is read-only.

Attribute access only reaches tags that are not already attributes of the
mapping: ``elements.get``, ``.keys``, ``.items`` and ``.values`` are the
usual ``Mapping`` methods. Subscript those names instead
(``elements["get"]``); subscripting always yields a tag builder.
"""

from __future__ import annotations as _future_annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any, NoReturn

import logging

from hypertext.builder import Builder, create_element
from hypertext.errors import ReadOnlyFactoryError
from hypertext.normalise import normalise_tag

logger = logging.getLogger("hypertext")

KNOWN_TAGS = (
    "a",        "abbr",     "acronym",  "address",    "applet",   "area",
    "article",  "aside",    "audio",    "b",          "base",     "basefont",
    "bdi",      "bdo",      "big",      "blockquote", "body",     "br",
    "button",   "canvas",   "caption",  "center",     "cite",     "code",
    "col",      "colgroup", "datalist", "dd",         "del",      "details",
    "dfn",      "dialog",   "dir",      "div",        "dl",       "dt",
    "em",       "embed",    "fieldset", "figcaption", "figure",   "font",
    "footer",   "form",     "frame",    "frameset",   "h1",       "head",
    "header",   "hr",       "html",     "i",          "iframe",   "img",
    "input",    "ins",      "kbd",      "keygen",     "label",    "legend",
    "li",       "link",     "main",     "map",        "mark",     "menu",
    "menuitem", "meta",     "meter",    "nav",        "noframes", "noscript",
    "object",   "ol",       "optgroup", "option",     "output",   "p",
    "param",    "pre",      "progress", "q",          "rp",       "rt",
    "ruby",     "s",        "samp",     "script",     "section",  "select",
    "small",    "source",   "span",     "strike",     "strong",   "style",
    "sub",      "summary",  "sup",      "table",      "tbody",    "td",
    "textarea", "tfoot",    "th",       "thead",      "time",     "title",
    "tr",       "track",    "tt",       "u",          "ul",       "var",
    "video",    "wbr",
)  # fmt: skip


def _builder(tag: str) -> Builder:
    def build(*content: Any) -> Any:
        return create_element(tag, content)

    build.__name__ = build.__qualname__ = tag
    return build


class Elements(Mapping[str, Builder]):
    _factories: dict[str, Builder]

    __slots__ = ("_factories",)

    def __init__(self, templates: Mapping[str, Builder], tags: Iterable[str] = ()) -> None:
        object.__setattr__(self, "_factories", dict(templates))
        for tag in tags:
            self[tag]  # noqa: B018 pre-populates the cache

    def __getitem__(self, tag: str) -> Builder:
        tag = normalise_tag(tag)
        factory = self._factories.get(tag)

        if factory is None:
            logger.debug("Creating builder for <%s>", tag)
            factory = self._factories[tag] = _builder(tag)

        return factory

    def __getattr__(self, tag: str) -> Builder:
        if tag.startswith("_"):
            raise AttributeError(tag)

        return self[tag]

    def __contains__(self, tag: object) -> bool:
        return isinstance(tag, str) and normalise_tag(tag) in self._factories

    def __iter__(self) -> Iterator[str]:
        return iter(self._factories)

    def __len__(self) -> int:
        return len(self._factories)

    def __setitem__(self, tag: str, _: Any) -> NoReturn:
        self._reject(tag)

    def __setattr__(self, tag: str, _: Any) -> NoReturn:
        self._reject(tag)

    def __delitem__(self, tag: str) -> NoReturn:
        self._reject(tag)

    def __delattr__(self, tag: str) -> NoReturn:
        self._reject(tag)

    @staticmethod
    def _reject(tag: str) -> NoReturn:
        logger.error("cannot set <%s>", tag)
        raise ReadOnlyFactoryError(tag)
