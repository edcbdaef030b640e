# src/netlist_core/parser/exceptions.py
"""
Defines custom, diagnosable exceptions for the tokenizing, parsing and raw
extraction stages.

Every exception here derives from `BaseParsingError`, which in turn derives from
`NetlistParseError`. A caller of `netlist_core.parse()` can therefore catch one
concrete type for all reportable input errors, or a specific subclass when the
kind of failure matters.

Errors are grouped by the stage that raises them:

1.  **Syntactic:** `UnexpectedEofError`, `UnexpectedTokenError` and
    `UnknownTokenError`, raised by the recursive-descent parser. Each carries the
    `Span` of the offending input.
2.  **Structural:** `MissingChildError` and `MissingValueError`, raised by the
    generic tree query layer when a required field is absent or empty.
3.  **Domain:** `UnknownPinTypeError`, `UnexpectedRootLabelError` and
    `UnknownVersionError`, raised while mapping the tree onto the netlist schema.
"""
from dataclasses import dataclass

from ..errors import NetlistParseError, format_diagnostic_report
from .lexer import Span


class BaseParsingError(NetlistParseError):
    """
    A local, concrete base class for all S-expression parsing and schema errors.
    """
    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Generic Parsing Error",
            details=str(self),
            suggestion="Please check the format and content of the netlist export.",
            context={}
        )


# --- Syntactic errors ---

@dataclass(eq=False)
class UnexpectedEofError(BaseParsingError):
    """The input ended while the parser still expected a token."""
    span: Span
    location: str = ""

    def __str__(self):
        return f"Unexpected EOF at {self.span}"

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Unexpected End Of Input",
            details=str(self),
            suggestion="The file looks truncated. Check for unbalanced parentheses.",
            context={'span': self.span, 'location': self.location}
        )


@dataclass(eq=False)
class UnexpectedTokenError(BaseParsingError):
    """A token of the wrong kind was found where exactly one kind is allowed."""
    expected: str
    found: str
    span: Span
    location: str = ""

    def __str__(self):
        return f"Expected {self.expected} but found {self.found} at {self.span}"

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Unexpected Token",
            details=str(self),
            suggestion="Every list must start with '(' immediately followed by a label.",
            context={'span': self.span, 'location': self.location}
        )


@dataclass(eq=False)
class UnknownTokenError(BaseParsingError):
    """The tokenizer could not classify a piece of input."""
    found: str
    span: Span
    location: str = ""

    def __str__(self):
        return f"Unexpected token {self.found!r} at {self.span}"

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Unknown Token",
            details=str(self),
            suggestion="Look for an unterminated string or an invalid escape sequence near this offset.",
            context={'span': self.span, 'location': self.location, 'user_input': self.found}
        )


# --- Structural (query) errors ---

@dataclass(eq=False)
class MissingChildError(BaseParsingError):
    """No direct child carries the requested label."""
    label: str

    def __str__(self):
        return f"SExpr {self.label} not found"

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Missing Field",
            details=str(self),
            suggestion="The netlist is missing a required field. Re-export it with a supported schematic editor version.",
            context={'user_input': self.label}
        )


@dataclass(eq=False)
class MissingValueError(BaseParsingError):
    """The labeled child exists but does not start with a string value."""
    label: str

    def __str__(self):
        return f"Value not found for {self.label}"

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Missing Value",
            details=str(self),
            suggestion="The field is present but empty or nested. Check the export for truncated entries.",
            context={'user_input': self.label}
        )


# --- Domain errors ---

@dataclass(eq=False)
class UnknownPinTypeError(BaseParsingError):
    """A pin-type string is outside the supported vocabulary."""
    pin_type: str

    def __str__(self):
        return f"Unknown pin type {self.pin_type}"

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Unknown Pin Type",
            details=str(self),
            suggestion="Supported pin types are input, output, bidirectional, tri_state, passive, free, "
                       "power_in, power_out, open_collector, open_emitter and any '*no_connect' variant.",
            context={'user_input': self.pin_type}
        )


@dataclass(eq=False)
class UnexpectedRootLabelError(BaseParsingError):
    """The root list is not an `export`."""
    label: str

    def __str__(self):
        return f"Unexpected root label {self.label}"

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Unexpected Root Label",
            details=str(self),
            suggestion="The input is not a netlist export. Schematic and board files are not accepted.",
            context={'user_input': self.label}
        )


@dataclass(eq=False)
class UnknownVersionError(BaseParsingError):
    """The export declares a format version that is not supported."""
    version: str

    def __str__(self):
        return f"Unknown version {self.version}"

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Unsupported Netlist Version",
            details=str(self),
            suggestion="Export the netlist in the current KiCad S-expression format (version \"E\").",
            context={'user_input': self.version}
        )
