# src/netlist_core/parser/lexer.py
"""
Tokenizer for the S-expression dialect used by netlist exports.

The lexer works on the UTF-8 bytes of the export and never copies text. Every
token carries a `Span` of byte offsets into that buffer and consumers resolve
it only when they need the characters.
"""
import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Tuple, Union

from ..errors import SourceDecodeError

logger = logging.getLogger(__name__)

Source = Union[str, bytes]


def as_source_bytes(source: Source) -> bytes:
    """
    Returns the UTF-8 buffer all spans refer to.

    Text is encoded; bytes are checked to be valid UTF-8 and used as given.
    """
    if isinstance(source, str):
        return source.encode("utf-8")
    source = bytes(source)
    try:
        source.decode("utf-8")
    except UnicodeDecodeError as e:
        raise SourceDecodeError(offset=e.start, reason=e.reason) from e
    return source


@dataclass(frozen=True)
class Span:
    """Half-open `[start, end)` byte range into the UTF-8 source."""
    start: int
    end: int

    def __str__(self):
        return f"{self.start}..{self.end}"

    def text(self, source: Source) -> str:
        if isinstance(source, str):
            source = source.encode("utf-8")
        return source[self.start:self.end].decode("utf-8")

    def line_col(self, source: Source) -> Tuple[int, int]:
        """1-based (line, column) of the start of the span. Columns count characters."""
        if isinstance(source, str):
            source = source.encode("utf-8")
        line = source.count(b"\n", 0, self.start) + 1
        line_start = source.rfind(b"\n", 0, self.start) + 1
        column = len(source[line_start:self.start].decode("utf-8", errors="replace")) + 1
        return line, column

    def location(self, source: Source) -> str:
        line, column = self.line_col(source)
        return f"line {line}, column {column}"


class TokenKind(Enum):
    LPAREN = "'('"
    RPAREN = "')'"
    STRING = "string"
    ERROR = "error"

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    span: Span


# Whitespace is exactly space, tab, CR, LF and form-feed; vertical tab and
# non-ASCII bytes belong to bare atoms. Quote and backslash never occur inside
# a multi-byte UTF-8 sequence, so matching on bytes cannot split a character.
_TOKEN_RE = re.compile(rb'''
      (?P<ws>[ \t\r\n\f]+)
    | (?P<lparen>\()
    | (?P<rparen>\))
    | "(?P<quoted>(?:[^"\\]|\\["\\nfrtb]|\\u[0-9a-fA-F]{4})*)"
    | (?P<bare>[^ \t\r\n\f()"]+)
''', re.VERBOSE)


class Lexer:
    """
    Lazily scans a source into `Token`s.

    The lexer is an iterable, not an iterator: each call to `iter()` starts a
    fresh scan from offset 0, so the same lexer can be traversed repeatedly.
    Quoted strings are reported without their delimiters and with escape
    sequences left as written. Input that matches no token rule yields a single
    `TokenKind.ERROR` token covering the offending byte.
    """

    def __init__(self, source: Source):
        self.source = as_source_bytes(source)

    def __iter__(self) -> Iterator[Token]:
        return self._scan()

    def _scan(self) -> Iterator[Token]:
        source = self.source
        pos = 0
        length = len(source)
        while pos < length:
            match = _TOKEN_RE.match(source, pos)
            if match is None:
                logger.debug("Unclassifiable input at byte %d: %r", pos, source[pos:pos + 1])
                yield Token(TokenKind.ERROR, Span(pos, pos + 1))
                pos += 1
                continue

            group = match.lastgroup
            if group == "lparen":
                yield Token(TokenKind.LPAREN, Span(match.start(), match.end()))
            elif group == "rparen":
                yield Token(TokenKind.RPAREN, Span(match.start(), match.end()))
            elif group == "quoted":
                yield Token(TokenKind.STRING, Span(match.start("quoted"), match.end("quoted")))
            elif group == "bare":
                yield Token(TokenKind.STRING, Span(match.start(), match.end()))
            pos = match.end()


def tokenize(source: Source) -> Iterator[Token]:
    """Convenience wrapper returning a single pass over the tokens of `source`."""
    return iter(Lexer(source))
