"""Symbol completion against a live environment.

Used by the REPL's readline hook and by the language server. Candidates are
the names bound in the environment chain; after an opening ``(`` or ``[``
the special-form names are offered as well.
"""

from __future__ import annotations

import re

from mal.types.environment import Environment
from mal.evaluation.special_forms import SpecialForm

TOKEN_SPLIT_RE = re.compile(r"[\s,{}]+")
OPENERS = "(["


def candidates(prefix: str, env: Environment, at_head: bool = False) -> list[str]:
    """Sorted names starting with `prefix`."""
    names = set(env.names())
    if at_head:
        names.update(SpecialForm.names())
    return sorted(n for n in names if n.startswith(prefix))


def complete(line: str, env: Environment) -> list[str]:
    """Complete the last token of `line`, returning whole replacement lines."""
    last = TOKEN_SPLIT_RE.split(line)[-1]
    if not last:
        return []
    fragment = last.lstrip(OPENERS)
    at_head = fragment != last
    keep = line[: len(line) - len(fragment)]
    return [keep + name for name in candidates(fragment, env, at_head)]


class Completer:
    """readline ``complete(text, state)`` adapter over `candidates`."""

    DELIMS = " \t\n,{}()[]'\"`~^@;"

    def __init__(self, env: Environment):
        self.env = env
        self.matches: list[str] = []

    def matches_for(self, text: str, line: str, begidx: int) -> list[str]:
        at_head = begidx > 0 and line[begidx - 1] in OPENERS
        return candidates(text, self.env, at_head)

    def __call__(self, text: str, state: int):
        if state == 0:
            import readline
            self.matches = self.matches_for(text, readline.get_line_buffer(), readline.get_begidx())
        if state < len(self.matches):
            return self.matches[state]
        return None
