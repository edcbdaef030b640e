# src/netlist_core/parser/__init__.py
from .lexer import Lexer, Span, Token, TokenKind, tokenize
from .tree import Atom, GenericNode, Labeled
from .sexpr_parser import SExprParser, parse_sexpr
from .raw_data import (
    PartId,
    RawComponent,
    RawDesign,
    RawNet,
    RawNetList,
    RawNode,
    RawPart,
    RawPin,
)
from .extraction import SUPPORTED_VERSION, extract_netlist
from .exceptions import (
    BaseParsingError,
    MissingChildError,
    MissingValueError,
    UnexpectedEofError,
    UnexpectedRootLabelError,
    UnexpectedTokenError,
    UnknownPinTypeError,
    UnknownTokenError,
    UnknownVersionError,
)

__all__ = [
    # Tokenizer and parser
    "Lexer", "Span", "Token", "TokenKind", "tokenize",
    "SExprParser", "parse_sexpr",
    # Generic tree
    "Atom", "GenericNode", "Labeled",
    # IR Data Structures
    "PartId", "RawComponent", "RawDesign", "RawNet", "RawNetList",
    "RawNode", "RawPart", "RawPin",
    # Extraction
    "SUPPORTED_VERSION", "extract_netlist",
    # Exceptions
    "BaseParsingError", "MissingChildError", "MissingValueError",
    "UnexpectedEofError", "UnexpectedRootLabelError", "UnexpectedTokenError",
    "UnknownPinTypeError", "UnknownTokenError", "UnknownVersionError",
]
