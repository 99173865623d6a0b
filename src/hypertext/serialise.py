# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

from __future__ import annotations as _future_annotations

from typing import TYPE_CHECKING

import decimal
import math
import numbers

if TYPE_CHECKING:
    from collections.abc import Iterable

    from hypertext.nodes import Node

Indent = bool | int | float | str | None

# Elements which never render children or a closing tag.
VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "command",
        "embed",
        "hr",
        "img",
        "input",
        "keygen",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    },
)


def resolve_indent(indent: Indent) -> str | None:
    match indent:
        case None | False:
            return None
        case True:
            return "\t"
        case int():
            return " " * indent
        case float() if math.isfinite(indent):
            return " " * int(indent)
        case str():
            return indent

    return None


def serialise(node: Node, indent: Indent = None) -> str:
    out: list[str] = []
    node.write(out, resolve_indent(indent), 0)
    return "".join(out)


def is_number(value: object) -> bool:
    return isinstance(value, numbers.Number) and not isinstance(value, bool)


def format_value(value: object) -> str:
    """Render a scalar the way a browser's ``String()`` would."""
    if isinstance(value, bool):
        return "true" if value else "false"

    if isinstance(value, numbers.Integral):
        return str(int(value))

    if isinstance(value, numbers.Real | decimal.Decimal):
        if isinstance(value, decimal.Decimal) and value.is_nan():
            return "NaN"
        number = float(value)
        if math.isnan(number):
            return "NaN"
        if math.isinf(number):
            return "Infinity" if number > 0 else "-Infinity"
        if number.is_integer():
            return str(int(number))
        return str(number)

    return str(value)


def write_open_tag(
    out: list[str],
    tag: str,
    classes: Iterable[str],
    attributes: Iterable[tuple[str, object]],
) -> None:
    out.append(f"<{tag}")

    if class_names := " ".join(classes):
        out.append(f' class="{class_names}"')

    out.extend(f' {key.lower()}="{format_value(value)}"' for key, value in attributes)
    out.append(">")


def write_break(out: list[str], indent: str | None, depth: int) -> None:
    if indent is not None:
        out.append("\n")
        out.append(indent * depth)
