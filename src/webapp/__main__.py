# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

from __future__ import annotations as _future_annotations

import asyncio
import logging

import hypertext
from hypertext.host import DOCUMENTS
from webapp import make_app, serve
from webapp.config import load_settings
from webapp.logs import install


def main() -> None:
    settings = load_settings()

    if settings.local:
        install(level=logging.DEBUG, indent=2)
    else:
        install()
    hypertext.configure(DOCUMENTS[settings.document]())

    loop = asyncio.new_event_loop()
    task = loop.create_task(serve(make_app(settings), settings), name="webapp-main")
    loop.run_until_complete(task)


if __name__ == "__main__":
    main()
