# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

"""Key, tag and style canonicalisation applied before anything is stored."""

from __future__ import annotations as _future_annotations

from collections.abc import Mapping
from typing import Any


def normalise_key(key: str) -> str:
    return key.replace("_", "-")


def normalise_tag(tag: str) -> str:
    return normalise_key(tag.lower())


def normalise_style(value: Any) -> str | None:
    """
    Format a style value as CSS declaration text.

    Strings are trusted verbatim. Mappings produce one ``key:value;``
    declaration per truthy value, so ``{"display": visible and "none"}``
    only emits the declaration when the condition holds.
    """
    if not value:
        return None

    if isinstance(value, str):
        return value

    if isinstance(value, Mapping):
        return "".join(
            f"{normalise_key(str(key))}:{declaration};"
            for key, declaration in value.items()
            if declaration
        )

    return None


def normalise_attribute(key: str) -> str:
    """Attribute keys may carry one trailing underscore to dodge keywords (``for_``)."""
    if len(key) > 1 and key.endswith("_"):
        key = key[:-1]

    return normalise_key(key)
