"""Sinks that record messages to a file or a terminal stream."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, TextIO, Union

from mazegame.messages import Message

DEFAULT_LOG_PATH = "file_for_log"


class Logger(ABC):
    """Receives messages; usable as a context manager."""

    @abstractmethod
    def log(self, message: Message) -> None:
        """Record one message."""

    def close(self) -> None:
        """Release any resources the logger holds."""

    def __enter__(self) -> "Logger":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class FileLogger(Logger):
    """Writes each message as a line to a file, truncating it first."""

    def __init__(self, path: Union[str, Path] = DEFAULT_LOG_PATH) -> None:
        self.path = Path(path)
        self._file: Optional[TextIO] = open(self.path, "w", encoding="utf-8")

    def log(self, message: Message) -> None:
        if self._file is None:
            raise ValueError("log file is closed")
        self._file.write(message.text() + "\n")
        self._file.flush()

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None


class TerminalLogger(Logger):
    """Prints each message to a stream, standard output by default."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream

    def log(self, message: Message) -> None:
        print(message.text(), file=self.stream or sys.stdout, flush=True)