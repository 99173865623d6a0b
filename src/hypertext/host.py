# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

"""
Node factories the builder runs against.

A ``Document`` supplies the three creation capabilities (element, text and
fragment) plus the handful of mutations the content resolver performs. The
builder never inspects its environment: one document is configured when the
process starts, and everything afterwards goes through it.
"""

from __future__ import annotations as _future_annotations

from collections.abc import Callable
from typing import Any, Generic, TypeVar

import abc
import logging
from xml.dom import minidom

from hypertext.nodes import AttributeValue, Element, Fragment, Node, Text
from hypertext.serialise import Indent, format_value, serialise

NodeT = TypeVar("NodeT")

logger = logging.getLogger("hypertext")


class Document(abc.ABC, Generic[NodeT]):
    @abc.abstractmethod
    def create_element(self, tag: str) -> NodeT:
        pass

    @abc.abstractmethod
    def create_text_node(self, text: str) -> NodeT:
        pass

    @abc.abstractmethod
    def create_document_fragment(self) -> NodeT:
        pass

    @abc.abstractmethod
    def is_node(self, value: object) -> bool:
        pass

    @abc.abstractmethod
    def append_child(self, parent: NodeT, child: NodeT) -> None:
        pass

    @abc.abstractmethod
    def add_class(self, element: NodeT, token: str) -> None:
        pass

    @abc.abstractmethod
    def set_attribute(self, element: NodeT, key: str, value: AttributeValue) -> None:
        pass

    @abc.abstractmethod
    def add_event_listener(
        self,
        element: NodeT,
        event: str,
        listener: Callable[..., Any],
    ) -> None:
        pass

    @abc.abstractmethod
    def serialise(self, node: NodeT, indent: Indent = None) -> str:
        pass


class StandaloneDocument(Document[Node]):
    def create_element(self, tag: str) -> Element:
        return Element(tag)

    def create_text_node(self, text: str) -> Text:
        return Text(text)

    def create_document_fragment(self) -> Fragment:
        return Fragment()

    def is_node(self, value: object) -> bool:
        return isinstance(value, Node)

    def append_child(self, parent: Node, child: Node) -> None:
        if isinstance(parent, Text):
            logger.debug("Dropping child appended to a text node")
            return

        parent.append_child(child)

    def add_class(self, element: Node, token: str) -> None:
        if isinstance(element, Element):
            element.add_class(token)
        else:
            logger.debug("Dropping class %r on %r", token, element)

    def set_attribute(self, element: Node, key: str, value: AttributeValue) -> None:
        if isinstance(element, Element):
            element.set_attribute(key, value)
        else:
            logger.debug("Dropping attribute %r on %r", key, element)

    def add_event_listener(
        self,
        element: Node,
        event: str,
        listener: Callable[..., Any],
    ) -> None:
        if isinstance(element, Element):
            element.add_event_listener(event, listener)
        else:
            logger.debug("Dropping '%s' listener on %r", event, element)

    def serialise(self, node: Node, indent: Indent = None) -> str:
        return serialise(node, indent)


class MinidomDocument(Document[minidom.Node]):
    """Builds trees out of live ``xml.dom.minidom`` nodes."""

    dom: minidom.Document

    def __init__(self) -> None:
        self.dom = minidom.Document()

    def create_element(self, tag: str) -> minidom.Element:
        return self.dom.createElement(tag.lower())

    def create_text_node(self, text: str) -> minidom.Text:
        return self.dom.createTextNode(text)

    def create_document_fragment(self) -> minidom.DocumentFragment:
        return self.dom.createDocumentFragment()

    def is_node(self, value: object) -> bool:
        return isinstance(value, minidom.Node)

    def append_child(self, parent: minidom.Node, child: minidom.Node) -> None:
        if parent.nodeType == minidom.Node.TEXT_NODE:
            logger.debug("Dropping child appended to a text node")
            return

        parent.appendChild(child)

    def add_class(self, element: minidom.Node, token: str) -> None:
        if element.nodeType != minidom.Node.ELEMENT_NODE:
            logger.debug("Dropping class %r on %r", token, element)
            return

        tokens = dict.fromkeys(element.getAttribute("class").split())
        tokens[token] = None
        element.setAttribute("class", " ".join(tokens))

    def set_attribute(self, element: minidom.Node, key: str, value: AttributeValue) -> None:
        if element.nodeType != minidom.Node.ELEMENT_NODE:
            logger.debug("Dropping attribute %r on %r", key, element)
            return

        element.setAttribute(key, format_value(value))

    def add_event_listener(
        self,
        element: minidom.Node,
        event: str,
        listener: Callable[..., Any],
    ) -> None:
        logger.warning(
            "cannot assign a server-side function to client-side event '%s'",
            event,
            extra={"listener": getattr(listener, "__qualname__", None)},
        )

    def serialise(self, node: minidom.Node, indent: Indent = None) -> str:
        return serialise(self.import_node(node), indent)

    def import_node(self, node: minidom.Node) -> Node:
        """Copy a minidom tree into the standalone node model."""
        imported: Node

        match node.nodeType:
            case minidom.Node.ELEMENT_NODE:
                imported = Element(node.tagName)
                for key, value in node.attributes.items():
                    if key == "class":
                        for token in value.split():
                            imported.add_class(token)
                    else:
                        imported.set_attribute(key, value)
            case minidom.Node.TEXT_NODE | minidom.Node.CDATA_SECTION_NODE:
                return Text(node.data)
            case _:
                imported = Fragment()

        for child in node.childNodes:
            imported.append_child(self.import_node(child))

        return imported


_document: Document[Any] = StandaloneDocument()


def configure(document: Document[Any]) -> None:
    global _document  # noqa: PLW0603 process-wide selection made once at startup
    _document = document


def current_document() -> Document[Any]:
    return _document


DOCUMENTS: dict[str, Callable[[], Document[Any]]] = {
    "standalone": StandaloneDocument,
    "minidom": MinidomDocument,
}
