# src/netlist_core/parser/tree.py
"""
The generic labeled tree produced by the S-expression parser, and the thin
query layer the raw extraction stage is written against.

An S-expression is either a string atom or a label followed by zero or more
child S-expressions. `GenericNode` models exactly those two cases as a closed
union of `Atom` and `Labeled`; code that walks the tree handles both and treats
anything else as a programming error.

Nodes store spans only. The characters live in the one shared UTF-8 source
buffer, and `Atom.text` / `Labeled.label` resolve a span when asked. Equality
is structural over the resolved text, not over offsets.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, Tuple, Union

from .exceptions import MissingChildError, MissingValueError
from .lexer import Span

logger = logging.getLogger(__name__)

_NEEDS_QUOTES = frozenset(' \t\r\n\f()"')


@dataclass(frozen=True, eq=False)
class Atom:
    """A string atom. For quoted strings the span excludes the quotes."""
    span: Span
    source: bytes = field(repr=False)

    @property
    def text(self) -> str:
        return self.span.text(self.source)

    def __eq__(self, other):
        if not isinstance(other, Atom):
            return NotImplemented
        return self.text == other.text

    def __hash__(self):
        return hash(self.text)

    def __str__(self):
        return _render_atom(self.text)


@dataclass(frozen=True, eq=False)
class Labeled:
    """A parenthesized list: a label followed by ordered child nodes."""
    label_span: Span
    contents: Tuple[GenericNode, ...]
    source: bytes = field(repr=False)

    @property
    def label(self) -> str:
        return self.label_span.text(self.source)

    def has_label(self, label: str) -> bool:
        """Compares the label against `label` without slicing the source."""
        span = self.label_span
        encoded = label.encode("utf-8")
        return (span.end - span.start == len(encoded)
                and self.source.startswith(encoded, span.start))

    def __eq__(self, other):
        if not isinstance(other, Labeled):
            return NotImplemented
        return self.label == other.label and self.contents == other.contents

    def __hash__(self):
        return hash((self.label, self.contents))

    # --- Query layer ---

    def children(self, label: str) -> Iterator[Labeled]:
        """Yields every direct child carrying `label`, in document order."""
        for node in self.contents:
            if isinstance(node, Labeled):
                if node.has_label(label):
                    yield node
            elif isinstance(node, Atom):
                continue
            else:
                raise TypeError(f"Unexpected tree node type: {type(node).__name__}")

    def child(self, label: str) -> Labeled:
        """Returns the first direct child carrying `label`."""
        for node in self.children(label):
            return node
        raise MissingChildError(label)

    def value(self, label: str) -> str:
        """
        Returns the value of the first child carrying `label`.

        The value is that child's own first element, which must be an atom.
        A missing child and a present-but-empty (or nested) child are reported
        as different errors.
        """
        node = self.child(label)
        if node.contents:
            first = node.contents[0]
            if isinstance(first, Atom):
                return first.text
            if not isinstance(first, Labeled):
                raise TypeError(f"Unexpected tree node type: {type(first).__name__}")
        raise MissingValueError(label)

    def __str__(self):
        parts = [_render_atom(self.label)]
        parts.extend(str(node) for node in self.contents)
        return f"({' '.join(parts)})"


GenericNode = Union[Atom, Labeled]


def _render_atom(text: str) -> str:
    if not text or any(c in _NEEDS_QUOTES for c in text):
        return f'"{text}"'
    return text
