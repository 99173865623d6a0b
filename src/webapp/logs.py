# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

from __future__ import annotations as _future_annotations

from types import TracebackType
from typing import Any

import logging
import traceback

from pythonjsonlogger.json import JsonFormatter as _JsonFormatter

_SysExcInfoType = (
    tuple[type[BaseException], BaseException, TracebackType | None] | tuple[None, None, None]
)


class JsonFormatter(_JsonFormatter):
    def add_fields(
        self,
        log_data: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        super().add_fields(log_data, record, message_dict)
        log_data.setdefault("level", record.levelname)
        log_data.setdefault("logger", record.name)

    def formatException(self, ei: _SysExcInfoType) -> dict[str, Any] | None:  # type: ignore[override]
        exc_type, exc_value, exc_traceback = ei
        if exc_type is None or exc_value is None:
            return None

        cause = exc_value.__cause__
        if cause is None and not exc_value.__suppress_context__:
            cause = exc_value.__context__

        return {
            "type": exc_type.__name__,
            "message": str(exc_value),
            "traceback": [
                {
                    "source": f"{frame.filename}:{frame.lineno}",
                    "method": frame.name,
                    "code": frame.line,
                }
                for frame in reversed(traceback.extract_tb(exc_traceback))
            ],
            "cause": (
                self.formatException((type(cause), cause, cause.__traceback__))
                if cause
                else None
            ),
        }


def install(*, level: int = logging.INFO, indent: int | None = None) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter(json_indent=indent))
    handler.setLevel(level)

    for name in ("hypertext", "webapp"):
        logging.getLogger(name).addHandler(handler)
        logging.getLogger(name).setLevel(level)

    return handler
