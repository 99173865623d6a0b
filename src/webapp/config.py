# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

from __future__ import annotations as _future_annotations

from collections.abc import Mapping, Sequence

import argparse
import dataclasses
import os

from dotenv import load_dotenv

from hypertext.host import DOCUMENTS
from hypertext.serialise import Indent


def parse_indent(value: str | None) -> Indent:
    """
    Read an indentation setting.

    Empty means no indentation, ``tab`` a tab per level, a number that many
    spaces; anything else is used as the literal indent string.
    """
    if not value:
        return None

    if value.lower() == "tab":
        return True

    if value.isdigit():
        return int(value)

    return value


@dataclasses.dataclass(frozen=True)
class Settings:
    host: str = "127.0.0.1"
    port: int = 33333
    indent: Indent = None
    document: str = "standalone"
    local: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        environ = os.environ if environ is None else environ
        return cls(
            host=environ.get("HYPERTEXT_HOST", cls.host),
            port=int(environ.get("HYPERTEXT_PORT", cls.port)),
            indent=parse_indent(environ.get("HYPERTEXT_INDENT")),
            document=environ.get("HYPERTEXT_DOCUMENT", cls.document),
        )


def load_settings(argv: Sequence[str] | None = None) -> Settings:
    load_dotenv()
    defaults = Settings.from_env()

    parser = argparse.ArgumentParser(prog="webapp")
    parser.add_argument("--host", default=defaults.host)
    parser.add_argument("--port", type=int, default=defaults.port)
    parser.add_argument("--indent", type=parse_indent, default=defaults.indent)
    parser.add_argument("--document", choices=sorted(DOCUMENTS), default=defaults.document)
    parser.add_argument("--local", action="store_true", default=False)
    args = parser.parse_args(argv)

    return Settings(
        host=args.host,
        port=args.port,
        indent=args.indent,
        document=args.document,
        local=args.local,
    )
