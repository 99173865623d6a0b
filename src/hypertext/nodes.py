# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

from __future__ import annotations as _future_annotations

from collections.abc import Callable, Iterable, Iterator, MutableSet
from typing import Any

import abc
import logging

from hypertext.errors import HierarchyRequestError
from hypertext.serialise import (
    VOID_ELEMENTS,
    Indent,
    serialise,
    write_break,
    write_open_tag,
)

AttributeValue = str | bool | int | float

logger = logging.getLogger("hypertext")


class Node(abc.ABC):
    child_nodes: list[Node]

    def __init__(self) -> None:
        self.child_nodes = []

    def append_child(self, node: Node) -> Node:
        if isinstance(node, Fragment):
            # Clones of nested fragments dissolve again on the way in.
            for child in node.child_nodes:
                self.append_child(child.clone())
        else:
            self.child_nodes.append(node)

        return node

    @abc.abstractmethod
    def clone(self) -> Node:
        pass

    def write(self, out: list[str], indent: str | None, depth: int) -> None:
        for child in self.child_nodes:
            child.write(out, indent, depth)

    def to_html(self, indent: Indent = None) -> str:
        return serialise(self, indent)

    @property
    def html(self) -> str:
        return serialise(self)

    def __str__(self) -> str:
        return self.html


class ClassList(MutableSet[str]):
    _tokens: dict[str, None]

    __slots__ = ("_tokens",)

    def __init__(self, tokens: Iterable[str] = ()) -> None:
        self._tokens = dict.fromkeys(tokens)

    def __contains__(self, token: object) -> bool:
        return token in self._tokens

    def __iter__(self) -> Iterator[str]:
        return iter(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def add(self, value: str) -> None:
        self._tokens[value] = None

    def discard(self, value: str) -> None:
        self._tokens.pop(value, None)

    def __repr__(self) -> str:
        return f"ClassList({list(self._tokens)!r})"


class Element(Node):
    _tag: str
    class_list: ClassList
    attributes: dict[str, AttributeValue]

    def __init__(self, tag: str) -> None:
        super().__init__()
        self._tag = tag.lower()
        self.class_list = ClassList()
        self.attributes = {}

    @property
    def tag(self) -> str:
        return self._tag

    @property
    def is_void(self) -> bool:
        return self._tag in VOID_ELEMENTS

    def add_class(self, token: str) -> None:
        self.class_list.add(token)

    def set_attribute(self, key: str, value: AttributeValue) -> None:
        self.attributes[key] = value

    def add_event_listener(self, event: str, listener: Callable[..., Any]) -> None:
        logger.warning(
            "cannot assign a server-side function to client-side event '%s'",
            event,
            extra={"tag": self._tag, "listener": getattr(listener, "__qualname__", None)},
        )

    def clone(self) -> Element:
        copy = Element(self._tag)
        copy.class_list = ClassList(self.class_list)
        copy.attributes = dict(self.attributes)
        copy.child_nodes = [child.clone() for child in self.child_nodes]
        return copy

    def write(self, out: list[str], indent: str | None, depth: int) -> None:
        write_open_tag(out, self._tag, self.class_list, self.attributes.items())

        if self.is_void:
            return

        if self.child_nodes:
            for child in self.child_nodes:
                write_break(out, indent, depth + 1)
                child.write(out, indent, depth + 1)
            write_break(out, indent, depth)

        out.append(f"</{self._tag}>")

    def __repr__(self) -> str:
        return f"<Element {self._tag} children={len(self.child_nodes)}>"


class Text(Node):
    _text: str

    def __init__(self, text: str) -> None:
        super().__init__()
        self._text = text

    @property
    def text(self) -> str:
        return self._text

    def append_child(self, node: Node) -> Node:
        raise HierarchyRequestError("text nodes cannot have children")

    def clone(self) -> Text:
        return Text(self._text)

    def write(self, out: list[str], indent: str | None, depth: int) -> None:
        out.append(self._text)

    def __repr__(self) -> str:
        return f"Text({self._text!r})"


class Fragment(Node):
    def clone(self) -> Fragment:
        copy = Fragment()
        copy.child_nodes = [child.clone() for child in self.child_nodes]
        return copy

    def __repr__(self) -> str:
        return f"<Fragment children={len(self.child_nodes)}>"
