from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

import pytest

from hypertext.host import StandaloneDocument, configure, current_document
from hypertext.nodes import Node


class RecordingDocument(StandaloneDocument):
    events: list[tuple[str, Callable[..., Any]]]

    def __init__(self) -> None:
        self.events = []

    def add_event_listener(self, element: Node, event: str, listener: Callable[..., Any]) -> None:
        self.events.append((event, listener))


@pytest.fixture(autouse=True)
def _restore_document() -> Iterator[None]:
    previous = current_document()
    yield
    configure(previous)


@pytest.fixture
def recording() -> RecordingDocument:
    return RecordingDocument()
