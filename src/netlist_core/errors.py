# src/netlist_core/errors.py
import logging
from dataclasses import dataclass
from abc import abstractmethod
from typing import Any, Dict, Protocol
from typing import runtime_checkable

logger = logging.getLogger(__name__)


# --- Diagnostic Protocol & Base Exception ---

@runtime_checkable
class Diagnosable(Protocol):
    """
    A protocol for exceptions that can generate their own rich diagnostic report.
    Lets any caller work with a "diagnosable" object without knowing its concrete type.
    """
    def get_diagnostic_report(self) -> str:
        """Generates a complete, user-friendly, multi-line report string."""
        ...


class DiagnosableError(Exception, Diagnosable):
    """
    A common, concrete base class for all internal exceptions that are diagnosable.

    1. It inherits from `Exception`, making it a valid, concrete class for use in
       `except` clauses.
    2. It implements the `Diagnosable` protocol and declares `get_diagnostic_report`
       as an abstract method. Every subclass provides its own report.
    """
    @abstractmethod
    def get_diagnostic_report(self) -> str:
        """
        Abstract method to generate the diagnostic report.
        Subclasses MUST implement this.
        """
        raise NotImplementedError


class NetlistParseError(DiagnosableError):
    """
    The single catchable base class for every error raised by `netlist_core.parse()`.

    Lexical, syntactic, structural, domain and linkage errors all derive from it,
    so a caller that does not care which stage failed can write
    `except NetlistParseError`.
    """
    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Netlist Parse Error",
            details=str(self),
            suggestion="Re-export the netlist from the schematic editor and try again.",
            context={}
        )


# --- Semantic Linkage Errors ---

class NetlistLinkageError(NetlistParseError):
    """
    Base class for errors found while cross-linking components, parts and nets.

    The exported netlist is syntactically valid but refers to something that is
    not there. A complete export never does this, so these errors point at a
    corrupt or unsupported file.
    """
    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Netlist Linkage Error",
            details=str(self),
            suggestion="The netlist is internally inconsistent. Re-export it from the schematic.",
            context={}
        )


@dataclass(eq=False)
class MissingPartError(NetlistLinkageError):
    """A component's libsource names a lib/part pair with no matching libpart."""
    ref_des: str
    part_id: Any

    def __str__(self):
        return f"Part '{self.part_id}' used by component '{self.ref_des}' not found in libparts"

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Missing Part",
            details=str(self),
            suggestion="Check that the 'libparts' section lists every library part referenced by a 'comp' entry.",
            context={'ref_des': self.ref_des, 'part_id': self.part_id}
        )


@dataclass(eq=False)
class MissingNetError(NetlistLinkageError):
    """A pin of a component's part is not attached to any net node."""
    ref_des: str
    pin_num: str

    def __str__(self):
        return f"No net found for component {self.ref_des}, pin {self.pin_num}"

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Missing Net",
            details=str(self),
            suggestion="Every pin of every placed part must appear as a 'node' in some net, including unconnected pins.",
            context={'ref_des': self.ref_des, 'user_input': self.pin_num}
        )


@dataclass(eq=False)
class UnusedPartError(NetlistLinkageError):
    """A libpart is defined but no component instantiates it."""
    part_id: Any

    def __str__(self):
        return f"Unused part {self.part_id}"

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Unused Part",
            details=str(self),
            suggestion="Remove the libpart from the export or place a component that uses it.",
            context={'part_id': self.part_id}
        )


# --- Stateless Formatting Utility ---

def format_diagnostic_report(
    error_type: str,
    details: str,
    suggestion: str,
    context: Dict[str, Any]
) -> str:
    """
    A stateless helper to format the final multi-line report string, ensuring a
    consistent look and feel for all user-facing diagnostics.

    Args:
        error_type: The high-level category of the error (e.g., "Missing Part").
        details: A detailed, potentially multi-line description of the problem.
        suggestion: Actionable advice for the user to resolve the issue.
        context: A dictionary of contextual information (span, ref_des, user input, etc.).

    Returns:
        A formatted, user-friendly diagnostic report string ready for display.
    """
    lines = [
        "\n",
        "=============== netlist-core: Actionable Diagnostic Report ===============",
        f"Error Type:     {error_type}",
    ]
    if span := context.get('span'):
        lines.append(f"Span:           {span}")
    if location := context.get('location'):
        lines.append(f"Location:       {location}")
    if source_file := context.get('source_file'):
        lines.append(f"Source File:    {source_file}")
    if ref_des := context.get('ref_des'):
        lines.append(f"Component:      {ref_des}")
    if part_id := context.get('part_id'):
        lines.append(f"Part:           {part_id}")
    if user_input := context.get('user_input'):
        lines.append(f"User Input:     '{user_input}'")

    lines.append("\nDetails:")
    for line in details.splitlines():
        lines.append(f"  {line}")

    if suggestion:
        lines.append("\nSuggestion:")
        for line in suggestion.splitlines():
            lines.append(f"  {line}")

    lines.append("==========================================================================")
    return "\n".join(lines)


# --- Input Errors ---

@dataclass(eq=False)
class SourceDecodeError(NetlistParseError):
    """Netlist bytes that are not valid UTF-8."""
    offset: int
    reason: str

    def __str__(self):
        return f"Netlist source is not valid UTF-8 at byte {self.offset}: {self.reason}"

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Invalid Source Encoding",
            details=str(self),
            suggestion="Netlist exports are UTF-8 text. Pass the file contents undecoded or decode them as UTF-8.",
            context={'location': f"byte {self.offset}"}
        )
