# src/netlist_core/parser/sexpr_parser.py
import logging
from typing import Iterator, List, Optional, Tuple

from .exceptions import UnexpectedEofError, UnexpectedTokenError, UnknownTokenError
from .lexer import Lexer, Source, Span, Token, TokenKind
from .tree import Atom, GenericNode, Labeled

logger = logging.getLogger(__name__)


class SExprParser:
    """
    Descent parser turning a token stream into a generic labeled tree.

    Grammar:
        sexpr := "(" STRING (STRING | sexpr)* ")"

    Open lists are kept on an explicit stack, so nesting depth is limited by
    memory rather than by the interpreter's recursion limit.

    The parser does not recover from errors. The first problem found raises and
    no partial tree is returned. Anything after the root's closing parenthesis
    is ignored.
    """

    def __init__(self, source: Source):
        lexer = Lexer(source)
        self.source: bytes = lexer.source
        self._tokens: Iterator[Token] = iter(lexer)
        self._lookahead: Optional[Token] = None

    def parse(self) -> Labeled:
        """Parses the root S-expression of the source text."""
        root = self._parse_sexpr()
        logger.debug("Parsed S-expression tree with root '%s'.", root.label)
        return root

    # --- Token stream helpers ---

    def _peek(self) -> Optional[Token]:
        if self._lookahead is None:
            self._lookahead = next(self._tokens, None)
        return self._lookahead

    def _get(self) -> Token:
        token = self._peek()
        if token is None:
            end = len(self.source)
            span = Span(end, end)
            raise UnexpectedEofError(span, location=span.location(self.source))
        self._lookahead = None
        if token.kind is TokenKind.ERROR:
            raise UnknownTokenError(
                token.span.text(self.source), token.span, location=token.span.location(self.source)
            )
        return token

    def _expect(self, kind: TokenKind) -> Token:
        token = self._get()
        if token.kind is not kind:
            raise UnexpectedTokenError(
                expected=str(kind),
                found=str(token.kind),
                span=token.span,
                location=token.span.location(self.source),
            )
        return token

    # --- Grammar ---

    def _open_list(self) -> Tuple[Span, List[GenericNode]]:
        self._expect(TokenKind.LPAREN)
        label = self._expect(TokenKind.STRING)
        return label.span, []

    def _parse_sexpr(self) -> Labeled:
        stack = [self._open_list()]
        while True:
            token = self._peek()
            if token is not None and token.kind is TokenKind.RPAREN:
                self._get()
                label_span, contents = stack.pop()
                node = Labeled(label_span, tuple(contents), self.source)
                if not stack:
                    return node
                stack[-1][1].append(node)
            elif token is not None and token.kind is TokenKind.LPAREN:
                stack.append(self._open_list())
            else:
                # STRING, ERROR and end of input are all handled by _get().
                stack[-1][1].append(Atom(self._get().span, self.source))


def parse_sexpr(source: Source) -> Labeled:
    """Parse S-expression text (or its UTF-8 bytes) into its generic tree."""
    return SExprParser(source).parse()
