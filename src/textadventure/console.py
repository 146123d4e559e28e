from __future__ import annotations

import logging
import sys
from typing import Iterable, List, Optional, Protocol, TextIO, Union

logger = logging.getLogger(__name__)


class Console(Protocol):
    """Line-oriented channel to the human player.

    ``read_command`` shows ``prompt`` and returns one line without its line
    terminator. It raises EOFError when no more input will ever arrive and may
    raise OSError when reading fails.
    """

    def say(self, message: str) -> None: ...
    def read_command(self, prompt: str) -> str: ...


class StreamConsole:
    """Console over text streams, stdin/stdout by default."""

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout

    def say(self, message: str) -> None:
        self._out.write(message + "\n")
        self._out.flush()

    def read_command(self, prompt: str) -> str:
        self.say(prompt)
        line = self._readline()
        if line == "":
            raise EOFError("input stream closed")
        return line.rstrip("\r\n")

    def _readline(self) -> str:
        """Read one line, decoding byte streams a line at a time.

        Undecodable bytes are reported as an OSError for that line only, so
        the next line can still be read.
        """
        raw = getattr(self._in, "buffer", None)
        if raw is None:
            return self._in.readline()
        encoding = getattr(self._in, "encoding", None) or "utf-8"
        data = raw.readline()
        try:
            return data.decode(encoding)
        except UnicodeDecodeError as e:
            logger.debug("Undecodable input line %r", data)
            raise OSError(f"input is not valid {encoding}: {e.reason}") from e


ScriptEntry = Union[str, BaseException]


class ScriptedConsole:
    """Console replaying a fixed script, for tests and headless runs.

    Each entry is returned as one line; an exception instance is raised at
    its turn instead. Every prompt and message lands in ``transcript`` and
    messages alone in ``messages``.
    """

    def __init__(self, lines: Iterable[ScriptEntry]) -> None:
        self._script: List[ScriptEntry] = list(lines)
        self.transcript: List[str] = []
        self.messages: List[str] = []

    @property
    def remaining(self) -> int:
        return len(self._script)

    def say(self, message: str) -> None:
        self.transcript.append(message)
        self.messages.append(message)

    def read_command(self, prompt: str) -> str:
        self.transcript.append(prompt)
        if not self._script:
            raise EOFError("script exhausted")
        entry = self._script.pop(0)
        if isinstance(entry, BaseException):
            logger.debug("Scripted console raising %r", entry)
            raise entry
        return entry


__all__ = [
    "Console",
    "ScriptedConsole",
    "StreamConsole",
]
