"""Per-scenario logging that mirrors to stdout and a log file."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any

LOG_FILE_NAME = "log.txt"
LOG_FORMAT = "[%(asctime)s] %(message)s"
LOGGER_NAME = "scenario"


class ScenarioLog:
    """
    Logger bound to a single test scenario.

    Every message goes to stdout. When ``output_dir`` is given it is also
    appended to ``<output_dir>/log.txt``, and the file is registered once
    in ``attachments`` so the fixture can publish it with the report.

    All instances share the ``scenario`` logger and detach their handlers
    on ``close()``, so only one log should be open per process at a time.
    A pytest worker runs its tests one after another, which keeps that true.

    Attributes:
        name: Scenario name.
        log_path: Path of the log file, or None when logging to stdout only.
        attachments: ``(name, path)`` pairs produced by this log.
    """

    def __init__(self, name: str, output_dir: str | Path | None = None):
        self.name = name
        self.log_path: Path | None = None
        self.attachments: list[tuple[str, Path]] = []

        # shared by every scenario; handlers belong to this instance
        self._logger = logging.getLogger(LOGGER_NAME)
        self._logger.setLevel(logging.INFO)
        self._logger.propagate = False

        formatter = logging.Formatter(LOG_FORMAT)
        self._handlers: list[logging.Handler] = []

        stream_handler = logging.StreamHandler(sys.stdout)
        stream_handler.setFormatter(formatter)
        self._handlers.append(stream_handler)

        if output_dir is not None:
            directory = Path(output_dir)
            directory.mkdir(parents=True, exist_ok=True)
            self.log_path = directory / LOG_FILE_NAME
            # delay=True: the file is only created on the first record
            file_handler = logging.FileHandler(
                self.log_path, mode="a", encoding="utf-8", delay=True
            )
            file_handler.setFormatter(formatter)
            self._handlers.append(file_handler)

        for handler in self._handlers:
            self._logger.addHandler(handler)

    def msg(self, message: str) -> None:
        """Log a single message."""
        self._logger.info(message)
        if self.log_path is not None and not any(
            name == "log" for name, _ in self.attachments
        ):
            self.attachments.append(("log", self.log_path))

    def object(self, obj: Any) -> None:
        """Log an object as indented JSON."""
        self.msg(json.dumps(obj, indent=2, default=str))

    def close(self) -> None:
        """Flush and detach all handlers."""
        for handler in self._handlers:
            self._logger.removeHandler(handler)
            handler.close()
        self._handlers.clear()
