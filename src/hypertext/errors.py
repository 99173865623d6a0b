# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

from __future__ import annotations as _future_annotations


class HypertextError(Exception):
    pass


class ReadOnlyFactoryError(HypertextError, TypeError):
    tag: str

    def __init__(self, tag: str) -> None:
        super().__init__(f"cannot set <{tag}>")
        self.tag = tag


class HierarchyRequestError(HypertextError, ValueError):
    pass
