"""
  Reader: lexer and recursive-descent parser.

- `lex` is a lazy token generator over one buffer of text; it always finishes
  with a single END token and stops at the first lexical error.
- `TokenStream` parses tokens into mal values:

    - integers -> int
    - strings -> str (escapes \\\\, \\" and \\n decoded)
    - symbols -> interned Symbol
    - ( ) -> List, [ ] -> Vector, { } -> Map
    - 'x `x ~x ~@x @x -> (quote x) (quasiquote x) ... (deref x)
    - ^m x -> (with-meta x m)

- `read(text)` consumes exactly one expression.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Iterator, NamedTuple, Optional

from mal import Expr
from mal.errors import ReadError
from mal.types.collections import List, Vector, Map
from mal.types.number import parse_int
from mal.types.symbol import Symbol
from mal.reader.reader_macros import reader_macros


TOKEN_RE = re.compile(
    r"[\s,]*("
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<special>~@|['`~^@])"  # prefix syntax
    r"|(?P<open>[(\[{])"  # ( [ {
    r"|(?P<close>[)\]}])"  # ) ] }
    r'|(?P<string>"(?:\\.|[^\\"])*"?)'  # double-quoted strings, possibly unterminated
    r"|(?P<atom>[^\s\[\]{}()'\"`,;]+)"  # numbers and symbols
    r")"
)

STRING_RE = re.compile(r'"(?:\\.|[^\\"])*"', re.DOTALL)
NUMBER_RE = re.compile(r"-?\d+")
NUMBER_PREFIX_RE = re.compile(r"-?\d")
ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)
SEPARATOR_RE = re.compile(r"[\s,]*")

ESCAPES: dict[str, str] = {
    "n": "\n",
}


class TokenKind(Enum):
    NUMBER = "number"
    STRING = "string"
    SYMBOL = "symbol"
    SPECIAL = "special"
    OPEN = "open"
    CLOSE = "close"
    END = "end"


class Delimiter(Enum):
    PARENTHESES = ("(", ")")
    BRACKETS = ("[", "]")
    BRACES = ("{", "}")

    @property
    def closer(self) -> str:
        return self.value[1]

    @classmethod
    def for_char(cls, char: str) -> Delimiter:
        for delim in cls:
            if char in delim.value:
                return delim
        raise ValueError(f"Not a delimiter: {char!r}")


class Token(NamedTuple):
    kind: TokenKind
    value: object
    pos: int
    raw: str

    def describe(self) -> str:
        """Human-readable token text for error messages."""
        if self.kind is TokenKind.END:
            return "end of input"
        return self.raw


def _unescape(body: str) -> str:
    return ESCAPE_RE.sub(lambda m: ESCAPES.get(m.group(1), m.group(1)), body)


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields Tokens, finishing with one END token."""
    pos = 0
    n = len(source)
    while True:
        m = TOKEN_RE.match(source, pos)
        if m is None:
            start = SEPARATOR_RE.match(source, pos).end()
            if start < n:
                raise ReadError(start, f"Unexpected character {source[start]!r}")
            yield Token(TokenKind.END, None, n, "")
            return

        pos = m.end()
        start = m.start(1)
        text = m.group(1)

        if m.group("comment") is not None:
            continue
        if m.group("special") is not None:
            yield Token(TokenKind.SPECIAL, text, start, text)
        elif m.group("open") is not None:
            yield Token(TokenKind.OPEN, Delimiter.for_char(text), start, text)
        elif m.group("close") is not None:
            yield Token(TokenKind.CLOSE, Delimiter.for_char(text), start, text)
        elif m.group("string") is not None:
            if not STRING_RE.fullmatch(text):
                raise ReadError(start, "unterminated string")
            yield Token(TokenKind.STRING, _unescape(text[1:-1]), start, text)
        elif NUMBER_RE.fullmatch(text):
            yield Token(TokenKind.NUMBER, parse_int(text), start, text)
        elif NUMBER_PREFIX_RE.match(text):
            raise ReadError(start, f"invalid number {text}")
        else:
            yield Token(TokenKind.SYMBOL, text, start, text)


class TokenStream:
    def __init__(self, token_iter: Iterator[Token]):
        self.tokens = iter(token_iter)
        self.buffer: list[Token] = []
        self.last: Optional[Token] = None

    def peek(self) -> Token:
        if not self.buffer:
            tok = next(self.tokens, None)
            if tok is None:
                # the lexer always ends with END; keep returning it
                end = self.last.pos if self.last is not None else 0
                tok = Token(TokenKind.END, None, end, "")
            self.buffer.append(tok)
        return self.buffer[0]

    def advance(self) -> Token:
        tok = self.peek()
        if tok.kind is not TokenKind.END:
            self.buffer.pop(0)
        self.last = tok
        return tok

    def parse_expr(self) -> Expr:
        tok = self.peek()

        if tok.kind is TokenKind.OPEN:
            return self.parse_collection()

        if tok.kind is TokenKind.SPECIAL:
            self.advance()
            return reader_macros.dispatch(tok, self)

        return self.parse_atom()

    def parse_atom(self) -> Expr:
        tok = self.advance()
        if tok.kind in (TokenKind.NUMBER, TokenKind.STRING):
            return tok.value
        if tok.kind is TokenKind.SYMBOL:
            return Symbol(tok.value)
        if tok.kind is TokenKind.END:
            raise ReadError(tok.pos, "Unexpected end of input")
        raise ReadError(tok.pos, f"Unexpected token {tok.describe()}")

    def parse_collection(self) -> Expr:
        first = self.advance()
        delim: Delimiter = first.value
        items: list[Expr] = []
        while True:
            tok = self.peek()
            if tok.kind is TokenKind.CLOSE:
                self.advance()
                if tok.value is not delim:
                    raise ReadError(
                        tok.pos,
                        f"Unbalanced {delim.name.lower()} : expected {delim.closer}, got {tok.describe()}",
                    )
                break
            if tok.kind is TokenKind.END:
                raise ReadError(tok.pos, f"Expected {delim.closer}, got end of input")
            items.append(self.parse_expr())

        if delim is Delimiter.BRACKETS:
            return Vector(items)
        if delim is Delimiter.BRACES:
            return Map.from_items(items)
        return List(items)

    def parse_all(self) -> Iterator[Expr]:
        while self.peek().kind is not TokenKind.END:
            yield self.parse_expr()


def read(text: str) -> Expr:
    """Read exactly one expression from `text`.

    Raises ReadError on lexical or syntactic errors, including trailing input.
    """
    stream = TokenStream(lex(text))
    expr = stream.parse_expr()
    tok = stream.peek()
    if tok.kind is not TokenKind.END:
        raise ReadError(tok.pos, f"Expected end of input, got {tok.describe()}")
    return expr
