"""Process-wide logging and output sinks.

stdout belongs to the MCP stdio transport, so log records go to stderr
and anything the analysis engine prints is routed to a sink picked at
startup.
"""

from __future__ import annotations

import contextlib
import logging
import os
import sys
import threading
from typing import IO, Iterator, List

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: int = logging.WARNING) -> None:
    """Send all records to stderr; records below `level` are dropped.

    With the default level, informational output is discarded for the
    lifetime of the process while warnings and errors stay visible.
    """
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(level)


# sys.stdout is process-global; engine calls that redirect it run one at a time
_ENGINE_LOCK = threading.Lock()


@contextlib.contextmanager
def engine_output(sink: str) -> Iterator[IO[str]]:
    """Redirect sys.stdout for the duration of an engine call.

    Holds a process-wide lock so overlapping calls never restore stdout
    while another engine call is still writing.
    """
    with _ENGINE_LOCK:
        if sink == "stderr":
            with contextlib.redirect_stdout(sys.stderr):
                yield sys.stderr
            return

        with open(os.devnull, "w", encoding="utf-8") as devnull:
            with contextlib.redirect_stdout(devnull):
                yield devnull


class _ErrorCollector(logging.Handler):
    def __init__(self) -> None:
        super().__init__(logging.ERROR)
        self.messages: List[str] = []

    def emit(self, record: logging.LogRecord) -> None:
        message = record.getMessage()
        if record.exc_info and record.exc_info[1] is not None:
            detail = str(record.exc_info[1])
            if detail and detail not in message:
                message = f"{message}: {detail}"
        self.messages.append(message)


@contextlib.contextmanager
def captured_errors(logger_name: str) -> Iterator[List[str]]:
    """Collect ERROR records emitted under `logger_name` while the block runs."""
    collector = _ErrorCollector()
    target = logging.getLogger(logger_name)
    target.addHandler(collector)
    try:
        yield collector.messages
    finally:
        target.removeHandler(collector)
