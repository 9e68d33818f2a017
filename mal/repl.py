"""Line-oriented REPL.

Each input line is read as exactly one expression, evaluated in the
interpreter's global environment and printed readably. ReadError and
EvalError are reported as ``<Kind> : <message>`` on stderr and the loop goes
on with earlier bindings intact.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Iterable, Optional, TextIO

try:
    import readline
except ImportError:  # not available on every platform
    readline = None

from mal import config
from mal.completion import Completer
from mal.errors import EvalError, ReadError
from mal.interpreter import Interpreter

logger = logging.getLogger(__name__)


class Repl:
    def __init__(
        self,
        interpreter: Optional[Interpreter] = None,
        *,
        prompt: Optional[str] = None,
        history_file: Optional[Path] = None,
        history_size: Optional[int] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ):
        self.interp = interpreter or Interpreter()
        self.prompt = config.get_prompt() if prompt is None else prompt
        self.history_file = history_file
        self.history_size = config.get_history_size() if history_size is None else history_size
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr

    def handle_line(self, line: str) -> None:
        """Evaluate one line and write its result or error."""
        if not line.strip():
            return
        try:
            output = self.interp.rep(line)
        except (ReadError, EvalError) as ex:
            logger.debug("line failed: %r", line, exc_info=True)
            print(f"{ex.kind} : {ex}", file=self.stderr)
            return
        print(output, file=self.stdout)

    def run_lines(self, lines: Iterable[str]) -> None:
        for line in lines:
            self.handle_line(line.rstrip("\n"))

    def run(self) -> int:
        if not self.stdin.isatty():
            self.run_lines(self.stdin)
            return 0

        self._setup_readline()
        try:
            while True:
                try:
                    line = input(self.prompt)
                except KeyboardInterrupt:
                    print(file=self.stdout)
                    continue
                self.handle_line(line)
        except EOFError:
            print(file=self.stdout)
        finally:
            self._save_history()
        return 0

    # --- readline wiring ---
    def _setup_readline(self) -> None:
        if readline is None:
            logger.debug("readline unavailable; history and completion disabled")
            return
        readline.set_completer(Completer(self.interp.env))
        readline.set_completer_delims(Completer.DELIMS)
        readline.parse_and_bind("tab: complete")
        readline.set_history_length(self.history_size)
        if self.history_file is not None:
            try:
                readline.read_history_file(str(self.history_file))
            except OSError:
                logger.debug("no history at %s", self.history_file)

    def _save_history(self) -> None:
        if readline is None or self.history_file is None:
            return
        try:
            readline.write_history_file(str(self.history_file))
        except OSError:
            logger.warning("could not save history to %s", self.history_file)
